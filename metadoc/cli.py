"""
CLI -- Command interface for metadoc

    metadoc render geometry.yaml
    metadoc module mypackage.shapes --format json
    metadoc images geometry.yaml
    metadoc format '(let [x 1] (inc x))'
    metadoc hash 'text'
    metadoc config --set docs.load_examples=false
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import ConfigManager
from .core.errors import MetaDocError
from . import __version__


logger = logging.getLogger(__name__)


class MetaDocCLI:
    """Shared resources for command handlers."""

    def __init__(self, project_dir: Path, out: Optional[TextIO] = None):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()
        self.out = out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metadoc",
        description="metadoc -- examples and generated sections for API docs",
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("METADOC_PROJECT_PATH", "."),
        help='Project directory for config lookup (default: METADOC_PROJECT_PATH or current)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug output to stderr'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'metadoc {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Self-registration: each command module adds its own parser
    from .commands import register_all
    register_all(subparsers)
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """
    Main entry point for the metadoc CLI.

    Returns:
        Process exit code (0 on success, 1 on error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    from .commands import dispatch
    cli = MetaDocCLI(Path(args.project), out=out)

    try:
        result = dispatch(args.command, cli, args)
    except MetaDocError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1 if result is False else 0


if __name__ == '__main__':
    sys.exit(main())
