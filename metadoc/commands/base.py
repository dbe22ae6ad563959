"""
BaseCommand — Shared foundation for CLI commands

Commands receive the CLI instance and reach configuration and output
through it instead of loading their own.
"""

import sys
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from ..cli import MetaDocCLI
    from ..config import DocsConfig


class BaseCommand:
    """Base class for CLI commands with access to shared resources."""

    def __init__(self, cli: 'MetaDocCLI'):
        self._cli = cli

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        return self._cli.config_manager

    @property
    def out(self):
        """Output stream (stdout unless the CLI was given another)."""
        return self._cli.out or sys.stdout

    def docs_config(self, args) -> 'DocsConfig':
        """Run flags from config, narrowed by --no-examples / --no-alter."""
        from ..config import DocsConfig

        docs = self.config.docs
        return DocsConfig(
            examples_enabled=docs.examples_enabled and not getattr(args, 'no_examples', False),
            aggregation_enabled=docs.aggregation_enabled and not getattr(args, 'no_alter', False),
        )

    def write(self, text: str) -> None:
        print(text, file=self.out)

    def write_json(self, data) -> None:
        self.write(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())
