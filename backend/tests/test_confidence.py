"""
Testes para a pontuação de confiança.
"""
import pytest

from services.extraction.confidence import best_quality_text, score
from services.extraction.product_extractor import extract_product
from services.models import CaptureMethod


class TestScore:
    """Testes para score."""

    def test_empty_text(self):
        assert score("") == 0.0
        assert score(None) == 0.0
        assert score("   ") == 0.0

    def test_clean_text(self):
        assert score("Leite Mimosa") == 1.0

    def test_strange_characters_penalized(self):
        """Penalização proporcional aos caracteres estranhos."""
        assert score("Leite @#") == pytest.approx(1.0 - 0.5 * 2 / 8)

    def test_price_punctuation_not_penalized(self):
        assert score("Leite (1L) 1,29-0.10") == 1.0

    def test_short_text_penalized(self):
        assert score("ab") == pytest.approx(0.7)

    def test_long_text_penalized(self):
        assert score("a" * 60) == pytest.approx(0.8)

    def test_bonuses_capped_at_one(self):
        """Euro e valor decimal bonificam, sem passar de 1.0."""
        assert score("Leite 2,50 €") == 1.0
        assert score("a" * 60 + " 2,50 €") == pytest.approx(1.0)

    def test_bonus_compensates_noise(self):
        noisy = "Leite ## 2,50"
        assert score(noisy) > score("Leite ## 250")

    def test_range(self):
        for text in ["", "!", "@@@@@", "Leite", "€€€ 1,00", "x" * 200]:
            assert 0.0 <= score(text) <= 1.0

    def test_uses_injected_cache(self, regex_cache):
        score("Leite 2,50", regex_cache)
        score("Pão 0,45", regex_cache)
        assert len(regex_cache) == 1
        assert regex_cache.stats()["hits"] == 1

    def test_confidence_reflects_noise_before_correction(self):
        """A confiança do scanner é calculada sobre o texto ainda não corrigido."""
        raw = "Le1te M1m0sa ##"
        product = extract_product(raw, CaptureMethod.SCANNER)
        assert product.confidence == score(raw)
        assert product.confidence < 1.0


class TestBestQualityText:
    """Testes para best_quality_text."""

    def test_picks_highest_score(self):
        candidates = ["Le1te !!##", "Leite Mimosa 1,29 €"]
        assert best_quality_text(candidates) == "Leite Mimosa 1,29 €"

    def test_tie_keeps_first(self):
        assert best_quality_text(["Leite", "Arroz"]) == "Leite"

    def test_empty_candidates(self):
        assert best_quality_text([]) is None

    def test_accepts_generator(self, regex_cache):
        result = best_quality_text((t for t in ["@@", "Pão 0,45 €"]), regex_cache)
        assert result == "Pão 0,45 €"
