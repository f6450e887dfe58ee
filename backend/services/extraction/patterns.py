"""
Padrões regex centralizados e compilados.

Este módulo contém os padrões estáticos usados pelos módulos de extração,
pré-compilados para melhor performance. Padrões montados a partir das
tabelas de números por extenso são compilados sob demanda via RegexCache.
"""
import re


# Denylist de sequências perigosas (comparação sem distinção de caixa)
DANGEROUS_SEQUENCES = (
    "<script",
    "</script>",
    "javascript:",
    "eval(",
    "drop table",
    "select *",
    "delete from",
    "insert into",
    "update set",
    "--",
    "/*",
    "*/",
)


class Patterns:
    """Registry de padrões regex compilados para texto capturado."""

    # =========================================================================
    # LIMPEZA DE TEXTO
    # =========================================================================

    # Tags HTML: "<b>", "</script>"
    HTML_TAG = re.compile(r'<[^>]+>')

    # Qualquer entrada da denylist
    DANGEROUS = re.compile(
        '|'.join(re.escape(s) for s in DANGEROUS_SEQUENCES),
        re.IGNORECASE
    )

    # Terminadores de frase para estatísticas de texto
    SENTENCE_END = re.compile(r'[.!?]')

    # =========================================================================
    # VALORES MONETÁRIOS
    # =========================================================================

    # Valor com duas casas decimais: "2,50", "13.99"
    TWO_DECIMAL_AMOUNT = re.compile(r'\d+[,.]\d{2}')

    # Preço em texto livre, com símbolo opcional: "€ 2,50", "2.50"
    PRICE_IN_TEXT = re.compile(r'€?\s*(\d+[,.]\d{2})')

    # Entrada decimal já com ponto: "2.5", "10", ".5"
    DECIMAL_INPUT = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$')

    # Símbolo do euro antes ou depois do valor: "2,50 €", "€2,50"
    CURRENCY_AFFIX = re.compile(r'^\s*€\s*|\s*€\s*$')

    # =========================================================================
    # PREÇOS NUMÉRICOS EM TRANSCRIÇÕES (ordem de prioridade)
    # =========================================================================

    # "2 euros e 50 cêntimos"
    SPOKEN_EUROS_AND_CENTS = re.compile(
        r'(?<![\d,.])(\d+)\s*euros?\s+e\s+(\d{1,2})\s*c[êe]ntimos?\b',
        re.IGNORECASE
    )

    # "2,50 euros", "2,5 €"
    SPOKEN_DECIMAL_EUROS = re.compile(
        r'(?<![\d,.])(\d+[,.]\d{1,2})\s*(?:euros?\b|€)',
        re.IGNORECASE
    )

    # "€ 2,50", "€3"
    SPOKEN_EURO_SYMBOL_FIRST = re.compile(r'€\s*(\d+(?:[,.]\d{1,2})?)(?![\d,.]*\d)')

    # "3 euros"
    SPOKEN_INTEGER_EUROS = re.compile(r'(?<![\d,.])(\d+)\s*euros?\b', re.IGNORECASE)

    # "50 cêntimos"
    SPOKEN_INTEGER_CENTS = re.compile(r'(?<![\d,.])(\d+)\s*c[êe]ntimos?\b', re.IGNORECASE)

    # Valor decimal solto: "Leite 2,50"
    SPOKEN_BARE_AMOUNT = re.compile(r'(?<![\d,.])(\d+[,.]\d{2})(?![\d,.]*\d)')

    # =========================================================================
    # CORREÇÃO OCR
    # =========================================================================

    # Token "numérico" com confusões OCR: "1O,5O", "€2,S0", "O,99"
    OCR_NUMERIC_TOKEN = re.compile(r'^(€?)([0-9OolIS]+(?:[,.][0-9OolIS]+)?)(€?)([.,;:]?)$')
