"""Format a single value from the command line."""
from __future__ import annotations
import argparse
import sys

from dotenv import load_dotenv

from .config import Settings
from .errors import NumberFormatError
from .formatting.dispatcher import NUMERIC_STRING_PATTERN
from .formatting.pipes import format_currency, format_decimal, format_percent
from .models.options import Style
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="format-number",
        description="Format a number for display using locale conventions.",
    )
    parser.add_argument("value", help="number to format, e.g. 1234.5 or -3e2")
    parser.add_argument("--style", choices=[s.value for s in Style], default=Style.DECIMAL.value)
    parser.add_argument("--digits", default=None, help="digit info, e.g. 1.2-2")
    parser.add_argument("--locale", default=None, help="locale identifier, e.g. en-US")
    parser.add_argument("--currency", default=None, help="ISO 4217 currency code")
    parser.add_argument("--symbol", action="store_true", default=None,
                        help="show the currency symbol instead of the code")
    return parser


def _protect_negative_value(argv: list[str]) -> list[str]:
    """Move a negative number such as "-3e2" after "--" so argparse reads it as the value."""
    if "--" in argv:
        return list(argv)
    for i, arg in enumerate(argv):
        if arg.startswith("-") and NUMERIC_STRING_PATTERN.fullmatch(arg):
            return argv[:i] + argv[i + 1:] + ["--", arg]
    return list(argv)


def main(argv: list[str] | None = None) -> int:
    """Print the formatted value. Returns the process exit code."""
    load_dotenv()
    args = build_parser().parse_args(_protect_negative_value(sys.argv[1:] if argv is None else argv))
    settings = Settings()
    setup_logging(settings.log_level, file=sys.stderr)

    locale = args.locale or settings.locale
    style = Style(args.style)
    try:
        if style == Style.CURRENCY:
            result = format_currency(
                args.value,
                locale,
                args.currency or settings.currency_code,
                settings.currency_as_symbol if args.symbol is None else args.symbol,
                args.digits,
            )
        elif style == Style.PERCENT:
            result = format_percent(args.value, locale, args.digits)
        else:
            result = format_decimal(args.value, locale, args.digits)
    except NumberFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result if result is not None else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
