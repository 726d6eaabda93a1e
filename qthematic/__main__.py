"""
qthematic entry point.

Usage:
    python -m qthematic [theme.theme.json]
    python -m qthematic --preset Nord
    python -m qthematic --random-seed 42 --export-code
    python -m qthematic --loglevel DEBUG --log-console
"""

import sys
import argparse

from .logging import DEFAULT_LOG_FILE, setup_logging


def main():
    """Main entry point for qthematic."""
    parser = argparse.ArgumentParser(
        description="qthematic - live theme editor for PyQt6 applications"
    )
    parser.add_argument(
        "theme",
        nargs="?",
        help="Theme JSON file to open (optional, can be loaded from GUI)"
    )
    parser.add_argument(
        "--preset",
        help="Start from a built-in preset (e.g. 'Nord', 'Solarized Light')"
    )
    parser.add_argument(
        "--random-seed",
        type=int,
        default=None,
        help="Start from a random theme generated with this seed"
    )
    parser.add_argument(
        "--export-code",
        action="store_true",
        help="Print Python code for the starting theme and exit without a GUI"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=f"Set logging level (default: WARNING). DEBUG writes to {DEFAULT_LOG_FILE}"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )

    args = parser.parse_args()

    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    if args.export_code:
        return export_code(args)

    # Import here to avoid slow startup for --help
    from .gui.app import run_app

    sys.exit(run_app(
        theme_path=args.theme,
        preset=args.preset,
        random_seed=args.random_seed,
    ))


def export_code(args) -> int:
    """Print the code export for the theme selected on the command line."""
    from .core.code_export import to_source_snippet
    from .core.errors import ThemeError
    from .core.persistence import load_from_file
    from .core.presets import DEFAULT_PRESET, preset_by_name
    from .core.randomizer import randomize

    try:
        if args.theme:
            config = load_from_file(args.theme)
        elif args.random_seed is not None:
            config = randomize(seed=args.random_seed)
        else:
            config = preset_by_name(args.preset or DEFAULT_PRESET)
    except (ThemeError, KeyError) as e:
        print(f"qthematic: {e}", file=sys.stderr)
        return 1

    print(to_source_snippet(config), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
