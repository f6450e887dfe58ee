"""
Valida uma captura a partir da linha de comando.

Exemplos:
    python scripts/validate_capture.py "Leite Mimosa 1,29€" --method camera
    python scripts/validate_capture.py "pão dois euros e cinquenta cêntimos" --method mic --json
"""
# ruff: noqa: E402

import argparse
import sys
from pathlib import Path

# Adicionar diretório pai ao path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError as SchemaError

from logging_config import get_logger, setup_logging
from schemas import CaptureRequest, CaptureResponse
from services.capture_pipeline import CapturePipeline
from utils.formatting import format_currency, format_percent

logger = get_logger('scripts.validate_capture')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extrai e valida produto e preço de um texto capturado'
    )
    parser.add_argument('text', help='Texto capturado (OCR, transcrição ou teclado)')
    parser.add_argument(
        '--method',
        default='keyboard',
        help='Método de captura: camera, mic, keyboard (ou SCANNER, VOICE, MANUAL)'
    )
    parser.add_argument('--price', type=float, default=None, help='Preço já conhecido')
    parser.add_argument('--quantity', type=int, default=1, help='Quantidade')
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Falhas específicas do método passam a erros'
    )
    parser.add_argument('--json', action='store_true', help='Saída em JSON')
    return parser


def print_report(response: CaptureResponse) -> None:
    product = response.product
    validation = response.validation
    price = "(por confirmar)" if product.price is None else format_currency(product.price)

    print(f"Método:    {response.source.value}")
    print(f"Texto:     {response.text}")
    print(f"Produto:   {product.name or '-'}")
    print(f"Preço:     {price}")
    print(f"Confiança: {format_percent(response.confidence)}")
    print(f"Válido:    {'sim' if validation.is_valid else 'não'}")
    for error in validation.errors:
        print(f"  ERRO  {error.description}")
        print(f"        -> {error.recovery_suggestion}")
    for warning in validation.warnings:
        print(f"  AVISO {warning}")
    for suggestion in validation.suggestions:
        print(f"  DICA  {suggestion}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    # Em JSON o stdout fica reservado ao resultado
    setup_logging(level="WARNING" if args.json else None)

    try:
        request = CaptureRequest(
            text=args.text,
            source=args.method,
            price=args.price,
            quantity=args.quantity,
        )
    except SchemaError as e:
        print(f"Pedido inválido: {e.errors()[0]['msg']}", file=sys.stderr)
        return 2

    logger.debug(f"[CLI] método={request.source.value} strict={args.strict}")
    pipeline = CapturePipeline(strict=args.strict)
    outcome = pipeline.process(request.to_captured(), request.price, request.quantity)
    response = CaptureResponse.from_outcome(outcome)

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print_report(response)

    return 0 if outcome.is_valid else 1


if __name__ == '__main__':
    sys.exit(main())
