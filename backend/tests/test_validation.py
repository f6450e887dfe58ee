"""
Testes para as validações de nome, preço, quantidade e regras por método.
"""
import math
from decimal import Decimal

import pytest

from config import BusinessRules, Messages
from exceptions import InvalidPrice, InvalidProductName, InvalidQuantity
from services.extraction.price_parser import parse_decimal
from services.models import CaptureMethod
from services.validation import (
    is_valid_price_string,
    price_invalid_reason,
    product_name_invalid_reason,
    validate_for_method,
    validate_manual_input,
    validate_ocr_input,
    validate_price,
    validate_price_for_method,
    validate_price_for_source,
    validate_product_name,
    validate_quantity,
    validate_voice_input,
)


class TestValidateProductName:
    """Testes para validate_product_name."""

    def test_valid_name(self):
        result = validate_product_name("Leite Mimosa")
        assert result.is_valid
        assert result.warnings == ()

    def test_empty_name(self):
        result = validate_product_name("   ")
        assert not result.is_valid
        assert result.errors == (InvalidProductName(Messages.NAME_EMPTY),)

    def test_too_long(self):
        result = validate_product_name("a" * (BusinessRules.MAX_PRODUCT_NAME_LENGTH + 1))
        assert isinstance(result.errors[0], InvalidProductName)
        assert "100" in result.errors[0].reason

    def test_dangerous_name(self):
        """Cenário F: sequência perigosa reportada como tal."""
        result = validate_product_name("<script>alert(1)</script>")
        assert not result.is_valid
        assert result.errors[0].reason == Messages.NAME_DANGEROUS

    def test_dangerous_name_regardless_of_length(self):
        result = validate_product_name("<script>" + "a" * 200)
        assert result.errors[0].reason == Messages.NAME_DANGEROUS

    def test_formatting_suggestion(self):
        result = validate_product_name("leite mimosa")
        assert result.is_valid
        assert Messages.SUGGEST_FORMAT.format(value="Leite Mimosa") in result.suggestions

    def test_sanitized_warning(self):
        """Tags HTML sem sequências perigosas são avisadas, não recusadas."""
        result = validate_product_name("<b>Leite</b>")
        assert result.is_valid
        assert Messages.NAME_SANITIZED in result.warnings
        assert Messages.SUGGEST_SANITIZED.format(value="Leite") in result.suggestions

    def test_low_quality_warning(self):
        result = validate_product_name("a#")
        assert result.is_valid
        assert any("Qualidade do texto" in w for w in result.warnings)

    def test_invalid_reason_helper(self):
        assert product_name_invalid_reason("Pão") is None
        assert product_name_invalid_reason(None) == Messages.NAME_EMPTY


class TestValidatePrice:
    """Testes para validate_price."""

    def test_scenario_a_manual_price(self):
        """Cenário A: '2,50 €' manual é válido, sem avisos."""
        price = parse_decimal("2,50 €")
        assert price == 2.5
        result = validate_price(price)
        assert result.is_valid
        assert result.warnings == ()

    def test_scenario_e_exceeds_maximum(self):
        """Cenário E: 1 000 000,00 excede o máximo."""
        result = validate_price(1000000.00)
        assert not result.is_valid
        error = result.errors[0]
        assert isinstance(error, InvalidPrice)
        assert "exceder" in error.reason

    def test_below_minimum(self):
        result = validate_price(0.0)
        assert result.errors[0].reason.startswith("Preço deve ser pelo menos")

    def test_bounds_inclusive(self):
        assert validate_price(0.01).is_valid
        assert validate_price(999999.99).is_valid

    def test_nan_and_infinity(self):
        assert validate_price(math.nan).errors[0].reason == Messages.PRICE_NAN
        assert validate_price(math.inf).errors[0].reason == Messages.PRICE_NOT_FINITE
        assert validate_price(-math.inf).errors[0].reason == Messages.PRICE_NOT_FINITE

    @pytest.mark.parametrize("value", [None, "2,50", True])
    def test_not_a_number(self, value):
        assert price_invalid_reason(value) == Messages.PRICE_INVALID_FORMAT
        assert not validate_price(value).is_valid

    def test_decimal_price(self):
        """Decimal é aceite e validado como qualquer preço numérico."""
        assert price_invalid_reason(Decimal("2.50")) is None
        assert validate_price(Decimal("2.10")).suggestions == ()
        assert validate_price(Decimal("0.01")).is_valid
        assert validate_price(Decimal("1000000")).errors[0].reason == price_invalid_reason(1000000.0)
        assert validate_price(Decimal("NaN")).errors[0].reason == Messages.PRICE_NAN
        assert validate_price(Decimal("-Infinity")).errors[0].reason == Messages.PRICE_NOT_FINITE

    def test_integer_price(self):
        assert validate_price(3).is_valid

    def test_rounding_suggestion(self):
        result = validate_price(2.499)
        assert result.is_valid
        assert Messages.SUGGEST_ROUNDED_PRICE.format(price="2,50 €") in result.suggestions

    def test_with_method_adds_advice(self):
        result = validate_price(2.5, CaptureMethod.VOICE)
        assert result.is_valid
        assert any("pode demorar" in w for w in result.warnings)


class TestValidatePriceForMethod:
    """Avisos de preço dependentes do método."""

    def test_manual_has_no_advice(self):
        result = validate_price_for_method(500.0, CaptureMethod.MANUAL)
        assert result.warnings == ()
        assert result.suggestions == ()

    def test_voice_is_slow(self):
        result = validate_price_for_method(2.0, CaptureMethod.VOICE)
        assert result.warnings == (
            Messages.SLOW_PROCESSING.format(method=CaptureMethod.VOICE.title, seconds=3),
        )

    def test_scanner_is_not_slow(self):
        assert validate_price_for_method(2.0, CaptureMethod.SCANNER).warnings == ()

    def test_high_price_llm_check(self):
        result = validate_price_for_method(150.0, CaptureMethod.SCANNER)
        assert Messages.SUGGEST_LLM_CHECK in result.suggestions
        assert Messages.SUGGEST_FALLBACK.format(method="Adicionar manualmente") in result.suggestions


class TestValidatePriceForSource:
    """Limiares de confiança por fonte do preço."""

    def test_base_failure_returned_as_is(self):
        result = validate_price_for_source(0.0, CaptureMethod.SCANNER, 0.1)
        assert len(result.errors) == 1
        assert result.warnings == ()

    def test_low_ocr_confidence(self):
        result = validate_price_for_source(2.5, CaptureMethod.SCANNER, 0.6)
        assert result.is_valid
        assert Messages.OCR_PRICE_LOW_CONFIDENCE.format(confidence="60,0%") in result.warnings
        assert Messages.SUGGEST_CONFIRM_PRICE in result.suggestions

    def test_ocr_confidence_threshold_inclusive(self):
        result = validate_price_for_source(2.5, CaptureMethod.SCANNER, 0.8)
        assert not any("Confiança OCR" in w for w in result.warnings)

    def test_low_voice_confidence(self):
        result = validate_price_for_source(2.5, CaptureMethod.VOICE, 0.5)
        assert Messages.VOICE_PRICE_LOW_CONFIDENCE.format(confidence="50,0%") in result.warnings
        assert Messages.SUGGEST_REPEAT_PRICE_CLEARLY in result.suggestions

    def test_manual_rounding_not_duplicated(self):
        result = validate_price_for_source(2.499, CaptureMethod.MANUAL)
        rounded = Messages.SUGGEST_ROUNDED_PRICE.format(price="2,50 €")
        assert result.suggestions.count(rounded) == 1

    def test_price_string(self):
        assert is_valid_price_string("2,50") is True
        assert is_valid_price_string("dois euros") is False


class TestValidateQuantity:
    """Testes para validate_quantity."""

    def test_valid(self):
        assert validate_quantity(1).is_valid
        assert validate_quantity(10000).is_valid
        assert validate_quantity(3.0).is_valid

    def test_bounds(self):
        assert validate_quantity(0).errors == (
            InvalidQuantity(Messages.QUANTITY_BELOW_MIN.format(min=1)),
        )
        assert validate_quantity(10001).errors == (
            InvalidQuantity(Messages.QUANTITY_EXCEEDS_MAX.format(max=10000)),
        )

    @pytest.mark.parametrize("value", [1.5, None, "2", True, math.nan])
    def test_not_integer(self, value):
        result = validate_quantity(value)
        assert result.errors == (InvalidQuantity(Messages.QUANTITY_NOT_INTEGER),)

    def test_high_quantity_warning(self):
        result = validate_quantity(150)
        assert result.is_valid
        assert result.warnings == (Messages.QUANTITY_HIGH.format(quantity=150),)
        assert validate_quantity(100).warnings == ()


class TestMethodSpecificRules:
    """Verificações por método: só avisos e sugestões."""

    def test_ocr_missing_price(self):
        result = validate_ocr_input("Leite Mimosa", None)
        assert result.is_valid
        assert Messages.OCR_PRICE_NOT_DETECTED in result.warnings
        assert Messages.SUGGEST_CONFIRM_PRICE in result.suggestions

    def test_ocr_zero_price_counts_as_missing(self):
        assert Messages.OCR_PRICE_NOT_DETECTED in validate_ocr_input("Leite", 0.0).warnings

    def test_ocr_low_confidence(self):
        result = validate_ocr_input("!!", 1.0)
        assert any("Baixa confiança" in w for w in result.warnings)
        assert Messages.SUGGEST_LIGHTING in result.suggestions

    def test_ocr_corrected_suggestion(self):
        result = validate_ocr_input("Le1te", 1.0, ocr_strategy="contextual")
        assert Messages.SUGGEST_OCR_CORRECTED.format(value="Leite") in result.suggestions

    def test_voice_missing_price(self):
        result = validate_voice_input("leite mimosa", None, spoken_strategy="keyword_tables")
        assert result.is_valid
        assert Messages.VOICE_PRICE_NOT_IDENTIFIED in result.warnings
        assert Messages.SUGGEST_REPEAT_PRICE in result.suggestions

    def test_voice_price_found_in_transcript(self):
        result = validate_voice_input("leite dois euros", None, spoken_strategy="keyword_tables")
        assert Messages.VOICE_PRICE_NOT_IDENTIFIED not in result.warnings

    def test_voice_product_unclear(self):
        result = validate_voice_input("", 2.0)
        assert Messages.VOICE_PRODUCT_UNCLEAR in result.warnings
        assert Messages.SUGGEST_REPEAT_PRODUCT in result.suggestions

    @pytest.mark.parametrize("price", ["2,50", True, math.nan])
    def test_method_rules_tolerate_invalid_price(self, price):
        """Preço inválido não faz as regras do método lançar exceção."""
        for method in (CaptureMethod.MANUAL, CaptureMethod.SCANNER, CaptureMethod.VOICE):
            assert validate_for_method("Leite", price, method).is_valid

    def test_manual_only_suggestions(self):
        result = validate_manual_input("leite", 2.499)
        assert result.warnings == ()
        assert Messages.SUGGEST_FORMAT.format(value="Leite") in result.suggestions
        assert Messages.SUGGEST_ROUNDED_PRICE.format(price="2,50 €") in result.suggestions

    def test_dispatch(self):
        assert validate_for_method("Leite", None, CaptureMethod.MANUAL).warnings == ()
        scanner = validate_for_method("Leite", None, CaptureMethod.SCANNER)
        assert Messages.OCR_PRICE_NOT_DETECTED in scanner.warnings
