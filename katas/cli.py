"""
Katas CLI - run the kata programs from the command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import KataConfig, load_kata_config
from .infrastructure import setup_logging
from .runner import PROGRAM_NAMES, KataRunner

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="katas",
        description="Run the practice kata programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run all four programs with their built-in inputs
  katas

  # Run only the word reverser
  katas reverse

  # Override inputs from a YAML file
  katas all --config configs/katas.yaml
""",
    )

    parser.add_argument(
        "program",
        nargs="?",
        choices=list(PROGRAM_NAMES) + ["all"],
        default="all",
        help="Program to run (default: all)",
    )
    parser.add_argument(
        "--config",
        help="YAML file overriding program inputs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        config = load_kata_config(args.config) if args.config else KataConfig()
        runner = KataRunner(config)
        lines = runner.run_all() if args.program == "all" else runner.run(args.program)
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error(f"{args.program} failed: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
