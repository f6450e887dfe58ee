"""
Regras de negocio do CadaEuro.

Limites de precos, quantidades e nomes. Sao invariantes do dominio e
por isso nao sao lidos do ambiente.
"""


class BusinessRules:
    """Limites comerciais aplicados pelas validacoes."""
    # Precos (euros)
    MIN_PRICE = 0.01
    MAX_PRICE = 999999.99

    # Quantidades
    MIN_QUANTITY = 1
    MAX_QUANTITY = 10000
    HIGH_QUANTITY_WARNING = 100

    # Nomes
    MIN_PRODUCT_NAME_LENGTH = 1
    MAX_PRODUCT_NAME_LENGTH = 100
    MIN_LIST_NAME_LENGTH = 1
    MAX_LIST_NAME_LENGTH = 50

    # Texto livre
    MAX_SANITIZED_LENGTH = 1000

    # Moeda
    DEFAULT_CURRENCY = "EUR"
    CURRENCY_SYMBOL = "€"
    DECIMAL_SEPARATOR = ","
    THOUSANDS_SEPARATOR = " "


class MethodAdvisoryRules:
    """Limiares para avisos especificos por metodo de captura."""
    # Metodos com tempo estimado acima disto geram aviso de demora
    SLOW_PROCESSING_SECONDS = 2.0
    # Precos acima disto, em metodos com IA, sugerem dupla verificacao
    LLM_HIGH_PRICE = 100.0
