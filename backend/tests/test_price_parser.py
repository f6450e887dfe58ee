"""
Testes para o parser de preços numéricos e a formatação monetária.
"""
import math
from decimal import Decimal

import pytest

from services.extraction.price_parser import (
    extract_all_prices,
    is_valid_price,
    is_valid_price_input,
    parse_decimal,
)
from utils.formatting import format_currency, format_decimal, format_percent, round_to_cents


class TestParseDecimal:
    """Testes para parse_decimal."""

    @pytest.mark.parametrize("text,expected", [
        ("2,50", 2.5),
        ("2.50", 2.5),
        ("  3 ", 3.0),
        (",5", 0.5),
        ("999999,99", 999999.99),
        ("0,01", 0.01),
        ("2,50 €", 2.5),
        ("2,5€", 2.5),
        ("€ 1,29", 1.29),
    ])
    def test_valid(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", [
        None, "", "abc", "0,00", "0", "-1", "1.000,50", "1000000", "€", "2,50 € €", "nan", "inf",
    ])
    def test_invalid(self, text):
        assert parse_decimal(text) is None

    def test_rounds_to_cents(self):
        assert parse_decimal("2,555") == 2.56


class TestIsValidPrice:
    """Testes para is_valid_price e is_valid_price_input."""

    def test_range(self):
        assert is_valid_price(0.01) is True
        assert is_valid_price(999999.99) is True
        assert is_valid_price(0.0) is False
        assert is_valid_price(1000000.0) is False

    def test_non_finite(self):
        assert is_valid_price(None) is False
        assert is_valid_price(math.nan) is False
        assert is_valid_price(math.inf) is False

    def test_price_input(self):
        """Entrada manual: apenas dígitos e uma vírgula."""
        assert is_valid_price_input("2,50") is True
        assert is_valid_price_input("12") is True
        assert is_valid_price_input("2.50") is False
        assert is_valid_price_input("2,5,0") is False
        assert is_valid_price_input("") is False
        assert is_valid_price_input("0") is False
        assert is_valid_price_input("2,50 €") is False


class TestExtractAllPrices:
    """Testes para extract_all_prices."""

    def test_receipt(self):
        assert extract_all_prices("Pão 0,45 € Leite 1,29 €") == [0.45, 1.29]

    def test_symbol_first(self):
        assert extract_all_prices("Total € 10.00") == [10.0]

    def test_empty(self):
        assert extract_all_prices("") == []
        assert extract_all_prices(None) == []
        assert extract_all_prices("sem preços") == []

    def test_injected_cache(self, regex_cache):
        extract_all_prices("1,00", regex_cache)
        assert len(regex_cache) == 1


class TestFormatting:
    """Testes para a formatação pt_PT."""

    def test_round_to_cents_half_up(self):
        assert round_to_cents(2.675) == 2.68
        assert round_to_cents(1.004) == 1.0

    def test_round_non_finite(self):
        assert math.isinf(round_to_cents(math.inf))
        assert math.isnan(round_to_cents(math.nan))

    def test_format_decimal(self):
        assert format_decimal(2.5) == "2,50"
        assert format_decimal(1234.5, grouping=True) == "1 234,50"
        assert format_decimal(-3.2) == "-3,20"

    def test_format_currency(self):
        assert format_currency(2.5) == "2,50 €"
        assert format_currency(999999.99, grouping=True) == "999 999,99 €"
        assert format_currency(math.nan) == "0,00 €"

    def test_format_percent(self):
        assert format_percent(0.42) == "42,0%"
        assert format_percent(1.0) == "100,0%"

    def test_round_decimal_input(self):
        assert round_to_cents(Decimal("2.675")) == 2.68
        assert round_to_cents(Decimal("2.50")) == 2.5
        assert math.isnan(round_to_cents(Decimal("NaN")))


# Cêntimos de 0,01 € a 999 999,99 €, com os extremos incluídos
SAMPLED_CENTS = sorted(set(range(1, 100_000_000, 7919)) | {1, 2, 99, 100, 250, 99_999_999})


class TestPriceProperties:
    """Propriedades do parser e do arredondamento em toda a gama de preços."""

    @pytest.mark.parametrize("cents", [1, 99_999_999])
    def test_round_trip_limits(self, cents):
        value = cents / 100
        assert parse_decimal(format_decimal(value)) == value

    def test_round_trip_sampled(self):
        """parse_decimal(format_decimal(x)) == x para valores ao cêntimo."""
        for cents in SAMPLED_CENTS:
            value = cents / 100
            assert parse_decimal(format_decimal(value)) == value, value

    @pytest.mark.parametrize("offset", [0.0, 0.001, 0.0031, 0.0049, -0.0049])
    def test_rounding_stays_within_half_cent(self, offset):
        """|round_to_cents(p) - p| < 0,005 fora do ponto médio exato."""
        for cents in SAMPLED_CENTS:
            price = cents / 100 + offset
            if not is_valid_price(price):
                continue
            assert abs(round_to_cents(price) - price) < 0.005, price
