"""
Render — Run the aggregator and print the resulting docs

    metadoc render geometry.yaml              # markdown page
    metadoc render geometry.yaml --format json
    metadoc module mypackage.shapes           # introspect a Python module
"""

from ..core.store import Namespace
from ..presentation.markdown import namespace_to_dict, render_namespace
from ..services.aggregator import AlterStatus, alter_docs
from ..services.discovery import namespace_from_module
from ..services.loader import load_namespace
from .base import BaseCommand


COMMAND_NAMES = ['render', 'module']

FORMATS = ('markdown', 'json')


class RenderCommand(BaseCommand):
    """Load a namespace, alter its docs and print them."""

    def render_file(self, path: str, fmt: str, args) -> AlterStatus:
        block_forms = self.config.printer.effective_block_forms
        return self._render(load_namespace(path, block_forms=block_forms), fmt, args)

    def render_module(self, module_name: str, fmt: str, args) -> AlterStatus:
        return self._render(namespace_from_module(module_name), fmt, args)

    def _render(self, namespace: Namespace, fmt: str, args) -> AlterStatus:
        status = alter_docs(namespace, self.docs_config(args))
        if fmt == 'json':
            data = namespace_to_dict(namespace)
            data['status'] = status.value
            self.write_json(data)
        else:
            self.write(render_namespace(namespace))
        return status


def _add_run_flags(parser):
    parser.add_argument('--format', '-f', choices=FORMATS, default='markdown',
                        help='Output format (default: markdown)')
    parser.add_argument('--no-examples', action='store_true',
                        help='Leave stored examples out of the generated docs')
    parser.add_argument('--no-alter', action='store_true',
                        help='Do not alter docs; print them as loaded')


def register_parser(subparsers):
    """Register render and module command parsers."""
    p1 = subparsers.add_parser('render', help='Generate docs from a YAML namespace definition')
    p1.add_argument('file', help='YAML namespace definition')
    _add_run_flags(p1)

    p2 = subparsers.add_parser('module', help='Generate docs for an importable Python module')
    p2.add_argument('module_name', metavar='MODULE', help='Module name (e.g., mypackage.shapes)')
    _add_run_flags(p2)

    return p1, p2


def handle(cli, args):
    """Handle render and module command dispatch."""
    cmd = RenderCommand(cli)
    if args.command == 'render':
        return cmd.render_file(args.file, args.format, args)
    return cmd.render_module(args.module_name, args.format, args)
