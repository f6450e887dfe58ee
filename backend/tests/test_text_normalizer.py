"""
Testes para o módulo text_normalizer.
"""
import pytest

from config import BusinessRules
from services.extraction.text_normalizer import (
    contains_dangerous,
    information_density,
    is_valid_list_name,
    is_valid_product_name,
    normalize,
    normalize_product_name,
    pluralize,
    sanitize,
    smart_join,
    text_statistics,
    valid_product_names,
)


class TestNormalize:
    """Testes para a função normalize."""

    def test_empty_and_none(self):
        """Texto vazio ou None resulta em string vazia."""
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize("   \n\t ") == ""

    def test_collapses_whitespace(self):
        """Sequências de espaços colapsam num só."""
        assert normalize("  Leite   Mimosa  ") == "Leite Mimosa"

    def test_control_characters_become_separators(self):
        """Quebras de linha e tabs separam palavras."""
        assert normalize("Leite\nMimosa\t1,29") == "Leite Mimosa 1,29"

    def test_invisible_characters_removed(self):
        """Caracteres zero-width e BOM são descartados."""
        assert normalize("Lei\u200bte\ufeff") == "Leite"

    def test_keeps_portuguese_accents(self):
        """Acentos portugueses ficam intactos."""
        assert normalize("pão  de  açúcar") == "pão de açúcar"

    @pytest.mark.parametrize("text", [
        "  Leite \n Mimosa ",
        "pão\t\tde forma",
        "",
        "€ 2,50",
    ])
    def test_idempotent(self, text):
        """normalize(normalize(x)) == normalize(x)."""
        once = normalize(text)
        assert normalize(once) == once


class TestSanitize:
    """Testes para sanitize e contains_dangerous."""

    def test_removes_script_tags(self):
        """Tags e sequências perigosas são removidas."""
        result = sanitize("<script>alert(1)</script>Leite")
        assert "<script" not in result.lower()
        assert "Leite" in result
        assert not contains_dangerous(result)

    def test_removes_sql_sequences(self):
        """Sequências SQL da denylist são removidas sem distinção de caixa."""
        result = sanitize("Leite; DROP TABLE produtos")
        assert "drop table" not in result.lower()
        assert not contains_dangerous(result)

    def test_nested_sequences_removed_until_stable(self):
        """Remoção repetida até não restar nenhuma sequência."""
        result = sanitize("<scr<script>ipt>Leite")
        assert not contains_dangerous(result)

    def test_comment_markers_removed(self):
        assert not contains_dangerous(sanitize("Leite -- /* nada */"))

    def test_truncates_long_text(self):
        """Texto sanitizado não excede o limite."""
        result = sanitize("a" * 2000)
        assert len(result) == BusinessRules.MAX_SANITIZED_LENGTH

    def test_clean_text_unchanged(self):
        assert sanitize("Leite Mimosa") == "Leite Mimosa"

    def test_contains_dangerous_case_insensitive(self):
        assert contains_dangerous("JavaScript:alert(1)") is True
        assert contains_dangerous("Leite Mimosa") is False


class TestNormalizeProductName:
    """Testes para a capitalização portuguesa."""

    def test_capitalizes_words(self):
        assert normalize_product_name("leite mimosa") == "Leite Mimosa"

    def test_connectives_lowercase(self):
        """Conectivos ficam em minúsculas, exceto na primeira posição."""
        assert normalize_product_name("pão DE forma") == "Pão de Forma"
        assert normalize_product_name("arroz com feijão e ovos") == "Arroz com Feijão e Ovos"

    def test_first_word_connective_capitalized(self):
        assert normalize_product_name("de manhã") == "De Manhã"

    def test_empty(self):
        assert normalize_product_name("") == ""
        assert normalize_product_name(None) == ""


class TestNameValidity:
    """Testes para is_valid_product_name e is_valid_list_name."""

    def test_valid_product_name(self):
        assert is_valid_product_name("Leite Mimosa") is True

    def test_product_name_limits(self):
        assert is_valid_product_name("") is False
        assert is_valid_product_name("a") is True
        assert is_valid_product_name("a" * 100) is True
        assert is_valid_product_name("a" * 101) is False

    def test_dangerous_product_name(self):
        assert is_valid_product_name("<script>") is False

    def test_list_name_limits(self):
        assert is_valid_list_name("Compras da semana") is True
        assert is_valid_list_name("a" * 50) is True
        assert is_valid_list_name("a" * 51) is False

    def test_valid_product_names_filters(self):
        names = ["Leite", "", "<script>", "Pão"]
        assert valid_product_names(names) == ["Leite", "Pão"]


class TestTextStatistics:
    """Testes para estatísticas de texto."""

    def test_counts(self):
        stats = text_statistics("Leite Mimosa. Pão de forma!")
        assert stats.words == 5
        assert stats.sentences == 2
        assert stats.characters == len("Leite Mimosa. Pão de forma!")

    def test_text_without_terminators_is_one_sentence(self):
        assert text_statistics("Leite Mimosa").sentences == 1

    def test_empty_text(self):
        stats = text_statistics("")
        assert stats.words == 0
        assert stats.characters == 0
        assert stats.sentences == 1

    def test_information_density(self):
        assert information_density("") == 0.0
        assert information_density("ab cd") == pytest.approx(2 / 5)


class TestJoinAndPluralize:
    """Testes para smart_join e pluralize."""

    def test_smart_join_skips_empty(self):
        assert smart_join(["Leite", "", None, "  Pão  "]) == "Leite, Pão"

    def test_smart_join_separator(self):
        assert smart_join(["a", "b"], separator=" / ") == "a / b"

    @pytest.mark.parametrize("word,count,expected", [
        ("leite", 1, "leite"),
        ("limão", 2, "limões"),
        ("pastel", 3, "pasteis"),
        ("flor", 2, "flores"),
        ("ovo", 12, "ovos"),
    ])
    def test_pluralize(self, word, count, expected):
        assert pluralize(word, count) == expected
