# Services do CadaEuro
#
# extraction/   normalização, OCR, confiança e preços
# validation/   motor de validação (ValidationResult)
# models.py     CaptureMethod, CapturedText, ExtractedProduct, ValidationResult
#
# NOTA: o pipeline é carregado sob demanda para evitar import circular
# entre services.models e os módulos de extração.


def __getattr__(name):
    """Lazy loading do pipeline de captura."""
    if name == "CapturePipeline":
        from .capture_pipeline import CapturePipeline
        return CapturePipeline
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
