"""Command line entry point: print the multiple k * G of the generator of a catalog curve.

Example:
    $ python -m ecarith --curve secp256k1 --scalar 0x2
    Point Coordinates:
    x = c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5
    y = 1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a
"""

import argparse
import logging

from ecarith import config
from ecarith.elliptic_curves.curve_parameters import CURVES
from ecarith.elliptic_curves.point import Point
from ecarith.util.exceptions import CurveConfigurationError

FORMAT = "%(levelname)s %(module)s %(lineno)d:%(message)s"

logger = logging.getLogger(__name__)


def parse_scalar(value: str) -> int:
    """Parse a non-negative scalar written in decimal or with a `0x`, `0o` or `0b` prefix."""
    try:
        scalar = int(value, 0)
    except ValueError as e:
        msg = f"invalid scalar: {value!r}"
        raise argparse.ArgumentTypeError(msg) from e
    if scalar < 0:
        msg = f"the scalar must be non-negative: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return scalar


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecarith", description="Elliptic curve scalar multiplication k * G")
    parser.add_argument(
        "--curve",
        help=f"Curve to use, one of: {', '.join(curve.name for curve in CURVES.values())}. "
        f"Defaults to ${config.ENV_VAR}, or {config.DEFAULT_CURVE_NAME} if unset.",
    )
    parser.add_argument("--scalar", type=parse_scalar, default=1, help="Scalar k, decimal or 0x-prefixed hex")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=FORMAT)

    try:
        curve = config.select_curve(args.curve) if args.curve is not None else config.active_curve()
    except CurveConfigurationError as e:
        parser.error(str(e))

    logger.debug("Computing k * G on %s for k = %#x", curve, args.scalar)
    print(Point.generator(curve) * args.scalar)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
