"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgn4convert.convert import ConversionOptions, VariantPolicy, convert_pgn4
from pgn4convert.errors import ConversionError
from pgn4convert.oracle import DEFAULT_BACKEND, ORACLE_BACKENDS, load_oracle

_LOGGER = logging.getLogger("pgn4convert")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgn4convert",
        description="Convert a four-player PGN4 game record into standard PGN.",
    )
    parser.add_argument("input", nargs="?", help="PGN4 file (default: stdin)")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--variant", help="Override the variant detected from Site")
    parser.add_argument("--files", type=int, help="Native board files")
    parser.add_argument("--ranks", type=int, help="Native board ranks")
    policy = parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--fallback-variant",
        metavar="VARIANT",
        help="Use VARIANT instead of failing on an unsupported variant",
    )
    policy.add_argument(
        "--strict",
        action="store_true",
        help="Fail on an unsupported variant (default)",
    )
    parser.add_argument(
        "--no-castling-gate-square",
        action="store_true",
        help="Write castling gating moves as O-O/E instead of O-O/Ee1",
    )
    parser.add_argument(
        "--no-remap",
        action="store_true",
        help="Input already uses native coordinates",
    )
    parser.add_argument(
        "--oracle",
        choices=sorted(ORACLE_BACKENDS),
        default=DEFAULT_BACKEND,
        help="Rules library used to resolve moves",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser


def setup_logger(log_level: str) -> None:
    _LOGGER.handlers.clear()
    _LOGGER.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    _LOGGER.addHandler(handler)


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    policy = VariantPolicy.FAIL
    extra: dict[str, str] = {}
    if args.fallback_variant:
        policy = VariantPolicy.FALLBACK
        extra["fallback_variant"] = args.fallback_variant
    return ConversionOptions(
        variant=args.variant,
        files=args.files,
        ranks=args.ranks,
        unsupported_variant=policy,
        gate_castling_square=not args.no_castling_gate_square,
        remap_coordinates=not args.no_remap,
        **extra,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the converter; return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_level)

    try:
        options = options_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    try:
        result = convert_pgn4(text, load_oracle(args.oracle), options)
    except ConversionError as exc:
        print(f"Conversion failed: {exc}", file=sys.stderr)
        return 2

    if result.unresolved:
        _LOGGER.warning(
            "%d move(s) left unconverted: %s",
            len(result.unresolved),
            " ".join(move.token for move in result.unresolved),
        )

    if args.output:
        Path(args.output).write_text(result.text, encoding="utf-8")
    else:
        sys.stdout.write(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
