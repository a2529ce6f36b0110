"""Run a calculator from the command line and print its report as JSON.

Usage:
    python scripts/compute.py salary params.json
    echo '{"goldPrice": 3000, "cash": 300000}' | python scripts/compute.py zakat -
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from egtax.engine import CALCULATORS, compute
from egtax.errors import CalculationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Egyptian tax and finance calculators")
    parser.add_argument("calculator", choices=sorted(CALCULATORS), help="Calculator key")
    parser.add_argument("params", help="Path to a JSON parameter file, or - for stdin")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default 2)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Compute one report. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    raw = sys.stdin.read() if args.params == "-" else Path(args.params).read_text()
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Parameters are not valid JSON: %s", exc)
        return 2

    try:
        report = compute(args.calculator, params)
    except ValidationError as exc:
        logger.error("Invalid parameters for %s:\n%s", args.calculator, exc)
        return 2
    except CalculationError as exc:
        logger.error("Calculation failed: %s", exc.message_key)
        return 1

    print(report.model_dump_json(by_alias=True, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
