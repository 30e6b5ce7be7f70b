"""Command-line interface for powerset."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from powerset.config import POWERSET_CONFIG
from powerset.formatting import power_set_to_dict, render_power_set
from powerset.generator import generate
from powerset.io import load_elements
from powerset.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _resolve_input(path: Optional[Path]) -> List[int]:
    """Return the elements from ``path``, or the demo input when it is None.

    Exits with status 1 when the file cannot be read or parsed.
    """
    if path is None:
        return list(POWERSET_CONFIG.demo_input)

    try:
        return load_elements(path)
    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"❌ ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load input: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to load input: {type(e).__name__}: {e}")
        sys.exit(1)


def _print_power_set(elements: List[int], output_format: str) -> None:
    """Compute the power set of ``elements`` and print it to stdout."""
    subsets = generate(elements)
    logger.debug(
        f"Printing {len(subsets)} {_plural(len(subsets), 'subset')} "
        f"as {output_format}"
    )

    if output_format == "json":
        print(json.dumps(power_set_to_dict(elements, subsets), indent=2))
    else:
        print(render_power_set(subsets))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``powerset`` command.

    With no arguments, prints the power set of ``[1, 2, 3]``.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="powerset",
        description="Print the power set of a three-element integer set.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="YAML or JSON file holding the input elements (default: 1 2 3)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    args = parser.parse_args(argv)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    if args.verbose:
        logger.debug("Debug logging enabled")

    elements = _resolve_input(args.input)
    _print_power_set(elements, args.format)


if __name__ == "__main__":
    main()
