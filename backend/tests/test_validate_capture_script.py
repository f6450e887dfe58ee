"""
Testes para o script de linha de comando validate_capture.
"""
import json

import pytest

from scripts.validate_capture import build_parser, main


@pytest.fixture(autouse=True)
def _logging(restore_root_logging):
    yield


class TestValidateCaptureScript:
    """Testes para scripts/validate_capture.py."""

    def test_parser_defaults(self):
        args = build_parser().parse_args(["Leite 1,29 €"])
        assert args.method == "keyboard"
        assert args.quantity == 1
        assert args.price is None
        assert args.strict is False

    def test_valid_capture_json(self, capsys):
        code = main(["Leite Mimosa 1,29 €", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["product"]["name"] == "Leite Mimosa"
        assert data["product"]["price"] == 1.29
        assert data["validation"]["is_valid"] is True

    def test_voice_report(self, capsys):
        code = main(["pão dois euros e cinquenta cêntimos", "--method", "mic"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Produto:   Pão" in out
        assert "Preço:     2,50 €" in out

    def test_invalid_capture_exit_code(self, capsys):
        code = main(["Arroz", "--price", "0"])
        out = capsys.readouterr().out
        assert code == 1
        assert "ERRO  Preço inválido" in out

    def test_strict_mode(self, capsys):
        code = main(["leite mimosa", "--method", "voice", "--strict", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 1
        assert data["validation"]["errors"][0]["kind"] == "voice_validation_failed"

    def test_invalid_method(self, capsys):
        code = main(["Leite", "--method", "fax"])
        assert code == 2
        assert "Pedido inválido" in capsys.readouterr().err
