"""
Polycut CLI - Main entry point.

Cuts a polygon by a list of lines and prints the area of the largest
fragment. Without ``--input`` the built-in demo (unit square, diagonal cut
then vertical cut) is used.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from .core.config import DEFAULT_EPSILON, CutConfig
from .core.errors import PolycutError
from .core.types import MatchMode
from .cut import largest_fragment_area

DEMO_POLYGON = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
DEMO_LINES = [
    [(0.0, 0.0), (1.0, 1.0)],
    [(0.5, 0.0), (0.5, 1.0)],
]


def load_yaml_input(input_path: str) -> Tuple[List[Any], List[Any]]:
    """
    Load polygon and lines from a YAML (or JSON) file.

    The file must hold a mapping with a ``polygon`` list of ``[x, y]``
    pairs and a ``lines`` list of ``[[x1, y1], [x2, y2]]`` entries.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or keys are missing
    """
    path = Path(input_path)

    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {input_path}: {e}") from e

    if not isinstance(data, dict) or 'polygon' not in data:
        raise ValueError(f"{input_path} must be a mapping with a 'polygon' key")

    return data['polygon'], data.get('lines') or []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polycut",
        description="Polycut - area of the largest fragment after cutting a polygon",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the built-in demo (prints 0.375)
  polycut

  # Cut the polygon described in a YAML file
  polycut --input cuts.yaml

  # Reproduce exact-equality intersection matching
  polycut --input cuts.yaml --match-mode exact
"""
    )
    parser.add_argument(
        "--input",
        help="YAML/JSON file with 'polygon' and 'lines' keys (default: built-in demo)"
    )
    parser.add_argument(
        "--match-mode",
        choices=[mode.value for mode in MatchMode],
        default=MatchMode.TOLERANCE.value,
        help="Intersection matching policy (default: tolerance)"
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=DEFAULT_EPSILON,
        help=f"Geometric tolerance (default: {DEFAULT_EPSILON})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.input:
            polygon, lines = load_yaml_input(args.input)
        else:
            polygon, lines = DEMO_POLYGON, DEMO_LINES

        config = CutConfig(
            epsilon=args.epsilon,
            match_mode=MatchMode(args.match_mode),
        )
        area = largest_fragment_area(polygon, lines, config=config)

    except (OSError, ValueError, PolycutError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(area)
    return 0


if __name__ == '__main__':
    sys.exit(main())
