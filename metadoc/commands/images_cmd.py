"""
Images — Manifest of images the drawing collaborator has to produce

    metadoc images geometry.yaml

Prints one JSON entry per generated-image example. Nothing is drawn and no
file is written; the manifest tells an external renderer what to draw and
where the docs expect the result.
"""

from typing import List

from ..core.store import Namespace
from ..services.loader import load_namespace
from .base import BaseCommand


class ImagesCommand(BaseCommand):
    """List generated-image examples of a namespace."""

    def manifest(self, namespace: Namespace) -> List[dict]:
        return [
            {
                "symbol": name,
                "doc": ex.doc,
                "filename": ex.filename,
                "path": ex.path,
                "draw_type": ex.draw_type.value,
                "params": ex.params.to_dict(),
                "code": ex.example,
            }
            for name, ex in namespace.generated_images()
        ]

    def show(self, path: str) -> List[dict]:
        namespace = load_namespace(path, block_forms=self.config.printer.effective_block_forms)
        entries = self.manifest(namespace)
        self.write_json(entries)
        return entries


def register_parser(subparsers):
    p = subparsers.add_parser('images', help='List generated images expected by the docs (JSON)')
    p.add_argument('file', help='YAML namespace definition')
    return p


def handle(cli, args):
    return ImagesCommand(cli).show(args.file)
