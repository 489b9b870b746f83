"""hexagen command-line interface.

Usage::

    hexagen -r ./widget -m github.com/acme/widget -p 9090 -g
    hexagen -i
    hexagen <plugin> [args...]     # runs hexagen-<plugin> from PATH
"""

from __future__ import annotations

import argparse
import logging
import sys

from hexagen import __version__
from hexagen.config import GenerationConfig
from hexagen.resolver import resolve_config
from hexagen.scaffolder import GenerationError, GenerationResult, ProjectGenerator
from hexagen.utils import (
    console,
    find_plugin,
    print_error,
    print_success,
    print_summary,
    print_warning,
    run_command,
    run_plugin,
    setup_logging,
)

logger = logging.getLogger(__name__)

INSTALL_COMMAND = ["go", "mod", "tidy"]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``hexagen`` command."""
    parser = argparse.ArgumentParser(
        prog="hexagen",
        description="Scaffold a hexagonal-layout Go HTTP service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  hexagen -r ./widget -m github.com/acme/widget\n"
            "  hexagen -r ./widget -p 9090 -g -c\n"
            "  hexagen -i\n"
            "\n"
            "Any other first argument NAME runs the hexagen-NAME plugin from PATH.\n"
        ),
    )
    parser.add_argument("-i", dest="interactive", action="store_true", help="Interactive mode")
    parser.add_argument("--version", action="store_true", help="Show tool version")
    parser.add_argument("-r", dest="root", default=None, help="Target directory (default: .)")
    parser.add_argument("-m", dest="module_name", default=None, help="Go module name")
    parser.add_argument("-p", dest="port", default=None, help="Server port (default: 8080)")
    parser.add_argument("-g", dest="gitkeep", action="store_true", help="Add .gitkeep files")
    parser.add_argument("-c", dest="clean", action="store_true", help="Clean target directory")
    parser.add_argument(
        "--no-install",
        dest="install",
        action="store_false",
        help="Skip running 'go mod tidy' after generation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def install_dependencies(config: GenerationConfig) -> bool:
    """Run ``go mod tidy`` in the generated root.  Failure is only reported."""
    console.print("Installing dependencies...")
    returncode, _, stderr = run_command(
        INSTALL_COMMAND, cwd=config.root_path, timeout=None, capture=False
    )
    if returncode != 0:
        logger.debug("%s exited with %s: %s", " ".join(INSTALL_COMMAND), returncode, stderr)
        detail = stderr or f"exit status {returncode}"
        print_warning(f"Warning: Failed to install dependencies: {detail}")
        console.print(f"You can manually run: {' '.join(INSTALL_COMMAND)}")
        return False
    print_success("✓ Dependencies installed successfully!")
    return True


def _report(config: GenerationConfig, result: GenerationResult) -> None:
    for entry in result.skipped:
        print_warning(f"Warning: skipped {entry.path}: {entry.reason}")

    print_summary(
        {
            "Root": str(result.root),
            "Module": config.module_name,
            "Port": config.port,
            "Directories": str(len(result.directories)),
            "Files": str(len(result.files)),
        },
        title="hexagen",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``hexagen`` and ``python -m hexagen``."""
    args_list = sys.argv[1:] if argv is None else list(argv)

    # Plugin delegation happens before flag parsing.
    if args_list and not args_list[0].startswith("-"):
        plugin = find_plugin(args_list[0])
        if plugin is None:
            build_parser().error(f"unknown command or plugin: {args_list[0]}")
        sys.exit(run_plugin(plugin, args_list[1:]))

    args = build_parser().parse_args(args_list)

    if args.version:
        console.print(f"hexagen version {__version__}", highlight=False)
        return

    setup_logging("DEBUG" if args.verbose else None)

    config = resolve_config(
        root=args.root,
        module_name=args.module_name,
        port=args.port,
        gitkeep=args.gitkeep,
        clean=args.clean,
        interactive=args.interactive,
        console=console,
    )

    try:
        result = ProjectGenerator(config).generate()
    except GenerationError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    _report(config, result)
    print_success("✓ Project structure created successfully!")

    if args.install:
        install_dependencies(config)

    print_success("✓ Done! Your project is ready.")
    console.print("\nNext steps:", highlight=False)
    console.print(f"  cd {config.root}", highlight=False, soft_wrap=True)
    console.print("  make run", highlight=False)


if __name__ == "__main__":
    main()
