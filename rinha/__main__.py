"""Command-line interface for the Rinha interpreter."""

from __future__ import annotations

import argparse
import logging
import sys

from rinha.config import get_log_level, get_pprint_options_json, get_recursion_limit
from rinha.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json, pprint_term
from rinha.errors import RinhaError, RinhaLoadError
from rinha.interpreter import Interpreter, raised_recursion_limit
from rinha.reader.loader import load, load_path

logger = logging.getLogger("rinha")

EXIT_OK = 0
EXIT_EVAL_ERROR = 1
EXIT_LOAD_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for the rinha CLI."""
    parser = argparse.ArgumentParser(
        prog="rinha", description="Evaluate a Rinha program given as a JSON syntax tree"
    )
    parser.add_argument("input", nargs="?", default="-", help="Program JSON file ('-' or omitted reads stdin)")
    parser.add_argument("--dump", action="store_true", help="Pretty-print the loaded tree instead of running it")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in --dump output")
    parser.add_argument("--log-level", default=None, help="Logging level (default: RINHA_LOG_LEVEL or WARNING)")
    return parser


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _pprint_options(no_color: bool) -> dict:
    raw = get_pprint_options_json()
    options = load_options_from_json(raw) if raw else dict(DEFAULT_OPTIONS)
    if no_color:
        for key in ("color_keywords", "color_names", "color_literals", "color_operators"):
            options[key] = False
    return options


def _report(exc: RinhaError) -> None:
    print(f"error: {exc.kind}: {exc}", file=sys.stderr)


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.log_level or get_log_level())
        limit = get_recursion_limit()
    except (argparse.ArgumentTypeError, ValueError) as exc:
        parser.error(str(exc))

    # The whole document is read before anything is evaluated
    try:
        with raised_recursion_limit(limit):
            if args.input == "-":
                program = load(sys.stdin)
            else:
                program = load_path(args.input)
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except RinhaLoadError as exc:
        _report(exc)
        return EXIT_LOAD_ERROR

    if args.dump:
        print(pprint_term(program, options=_pprint_options(args.no_color)))
        return EXIT_OK

    try:
        Interpreter(recursion_limit=limit).run(program)
    except RinhaError as exc:
        sys.stdout.flush()
        _report(exc)
        return EXIT_EVAL_ERROR
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
