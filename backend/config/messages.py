"""
Mensagens padronizadas do CadaEuro.

Textos com placeholders usam str.format.
"""


class Messages:
    """Mensagens de erro, aviso e sugestao padronizadas (pt_PT)."""
    # Nome de produto
    NAME_EMPTY = "Nome não pode estar vazio"
    NAME_TOO_SHORT = "Nome deve ter pelo menos {min} caractere"
    NAME_TOO_LONG = "Nome não pode exceder {max} caracteres"
    NAME_DANGEROUS = "Nome contém caracteres não permitidos"
    NAME_INVALID_FORMAT = "Nome tem formato inválido"
    NAME_SANITIZED = "Nome foi sanitizado para segurança"
    NAME_NOT_EXTRACTED = "Não foi possível extrair nome do produto"
    # Nome de lista
    LIST_NAME_EMPTY = "Nome da lista não pode estar vazio"
    LIST_EMPTY = "Lista está vazia"
    LIST_NOT_SEQUENCE = "Itens da lista têm formato inválido"
    # Preço
    PRICE_NOT_FINITE = "Preço deve ser um número válido"
    PRICE_NAN = "Preço não é um número válido"
    PRICE_BELOW_MIN = "Preço deve ser pelo menos {min}"
    PRICE_EXCEEDS_MAX = "Preço não pode exceder {max}"
    PRICE_INVALID_FORMAT = "Preço tem formato inválido"
    # Quantidade
    QUANTITY_BELOW_MIN = "Quantidade deve ser pelo menos {min}"
    QUANTITY_EXCEEDS_MAX = "Quantidade não pode exceder {max}"
    QUANTITY_NOT_INTEGER = "Quantidade deve ser um número inteiro"
    QUANTITY_HIGH = "Quantidade muito alta: {quantity} unidades"
    # Avisos
    LOW_TEXT_QUALITY = "Qualidade do texto pode ser melhorada (confiança: {confidence})"
    LOW_OCR_CONFIDENCE = "Baixa confiança na leitura OCR ({confidence})"
    OCR_PRICE_NOT_DETECTED = "Preço não detectado pelo OCR"
    VOICE_PRICE_NOT_IDENTIFIED = "Preço não identificado na transcrição"
    VOICE_PRODUCT_UNCLEAR = "Nome do produto não claro na transcrição"
    VOICE_TRANSCRIPTION_IMPRECISE = "Transcrição pode ter imprecisões ({confidence})"
    SLOW_PROCESSING = "Processamento {method} pode demorar {seconds}s"
    OCR_PRICE_LOW_CONFIDENCE = "Confiança OCR baixa ({confidence})"
    VOICE_PRICE_LOW_CONFIDENCE = "Confiança de voz baixa ({confidence})"
    # Sugestões
    SUGGEST_SANITIZED = "Use: '{value}'"
    SUGGEST_FORMAT = "Sugestão de formatação: '{value}'"
    SUGGEST_LIST_NAME = "Sugestão de nome: '{value}'"
    SUGGEST_ROUNDED_PRICE = "Preço será arredondado para {price}"
    SUGGEST_LLM_CHECK = "Preço alto será verificado via IA para precisão"
    SUGGEST_FALLBACK = "Se houver problemas, use {method}"
    SUGGEST_LIGHTING = "Verifique se o texto está claro e bem iluminado"
    SUGGEST_OCR_CORRECTED = "Texto corrigido de OCR: '{value}'"
    SUGGEST_CONFIRM_PRICE = "Confirme o preço manualmente"
    SUGGEST_REPEAT_PRICE = "Repita mencionando o preço claramente"
    SUGGEST_REPEAT_PRODUCT = "Repita o nome do produto mais devagar"
    SUGGEST_REPEAT_PRICE_CLEARLY = "Repita o preço mais claramente"
    SUGGEST_ADD_PRODUCT = "Adicione pelo menos um produto"
    # Recuperação (recovery suggestions)
    RECOVERY_PRODUCT_NAME = "Use entre {min} e {max} caracteres"
    RECOVERY_LIST_NAME = "Use entre {min} e {max} caracteres no nome da lista"
    RECOVERY_PRICE = "Use um preço entre {min} e {max}"
    RECOVERY_QUANTITY = "Use uma quantidade entre {min} e {max}"
    RECOVERY_OCR = "Tente novamente ou use entrada manual"
    RECOVERY_VOICE = "Repita mais devagar ou use entrada manual"
    RECOVERY_MANUAL = "Verifique se todos os campos estão preenchidos corretamente"
    RECOVERY_DEFAULT = "Verifique os dados e tente novamente"
