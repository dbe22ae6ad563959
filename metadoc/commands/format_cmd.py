"""
Format — Pretty-print forms and compute content hashes

    metadoc format '(let [x 1] (inc x) (dec x))'
    echo '(-> canvas (rect 1 2 3 4) (line 0 0 5 5))' | metadoc format
    metadoc hash 'some text'
"""

import sys

from ..core.hashing import content_hash
from ..core.printer import format_forms
from .base import BaseCommand


COMMAND_NAMES = ['format', 'hash']


class FormatCommand(BaseCommand):
    """Printer and hasher from the command line."""

    def format(self, text: str, indent: int = 0) -> str:
        block_forms = self.config.printer.effective_block_forms
        if indent:
            result = format_forms(text, " " * indent, block_forms=block_forms) + "\n"
        else:
            result = format_forms(text, block_forms=block_forms)
        self.out.write(result)
        return result

    def hash(self, text: str) -> str:
        digest = content_hash(text)
        self.write(digest)
        return digest


def register_parser(subparsers):
    """Register format and hash command parsers."""
    p1 = subparsers.add_parser('format', help='Pretty-print forms (from argument or stdin)')
    p1.add_argument('text', nargs='?', help='Source text (default: read stdin)')
    p1.add_argument('--indent', type=int, default=0, help='Indent every line by N spaces')

    p2 = subparsers.add_parser('hash', help='Print the content hash of a string')
    p2.add_argument('text', help='Text to hash')

    return p1, p2


def handle(cli, args):
    """Handle format and hash command dispatch."""
    cmd = FormatCommand(cli)
    if args.command == 'hash':
        return cmd.hash(args.text)
    text = args.text if args.text is not None else sys.stdin.read()
    return cmd.format(text, args.indent)
