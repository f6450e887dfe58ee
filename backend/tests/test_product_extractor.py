"""
Testes para a extração de produto por método de captura.
"""
from services.extraction.product_extractor import extract_product, split_numeric_price
from services.extraction.spoken_price import extract_product_and_price
from services.models import CaptureMethod


class TestSplitNumericPrice:
    """Testes para split_numeric_price."""

    def test_price_after_name(self):
        assert split_numeric_price("Leite Mimosa 1,29 €") == ("Leite Mimosa", 1.29)

    def test_symbol_first(self):
        assert split_numeric_price("pão de forma € 1,20") == ("Pão de Forma", 1.2)

    def test_without_price(self):
        assert split_numeric_price("arroz agulha") == ("Arroz Agulha", None)

    def test_empty(self):
        assert split_numeric_price("  ") == ("", None)


class TestExtractProduct:
    """Testes para extract_product."""

    def test_scenario_b_voice(self):
        """Cenário B: extração de voz com número por extenso."""
        assert extract_product_and_price("Leite Mimosa dois euros") == ("Leite Mimosa", 2.0)
        product = extract_product("Leite Mimosa dois euros", CaptureMethod.VOICE)
        assert (product.name, product.price) == ("Leite Mimosa", 2.0)

    def test_scenario_c_scanner(self):
        """Cenário C: dígitos trocados pelo OCR são corrigidos antes da extração."""
        product = extract_product("Le1te M1m0sa", CaptureMethod.SCANNER, ocr_strategy="contextual")
        assert product.name == "Leite Mimosa"
        assert product.needs_price_confirmation

    def test_scanner_numeric_confusions(self):
        product = extract_product("Iogurte 1,O9€", CaptureMethod.SCANNER, ocr_strategy="contextual")
        assert product.name == "Iogurte"
        assert product.price == 1.09

    def test_manual_not_corrected(self):
        """Entrada manual não passa pelo corretor de OCR."""
        product = extract_product("Le1te 1,29", CaptureMethod.MANUAL)
        assert product.name == "Le1te"
        assert product.price == 1.29

    def test_scenario_d_empty_voice(self):
        product = extract_product("", CaptureMethod.VOICE)
        assert product.name == ""
        assert product.price is None
        assert product.confidence == 0.0
