"""
Commands — CLI command implementations with self-registration

Each command module:
1. Exports register_parser(subparsers) to configure its argparse
2. Exports handle(cli, args) to run the command
3. Optionally sets COMMAND_NAMES when it serves several commands

Adding a command means adding its module to COMMAND_MODULES.
"""

import importlib
import logging
from typing import Dict, Callable, Any

from .base import BaseCommand


logger = logging.getLogger(__name__)

# Order determines help display order
COMMAND_MODULES = [
    'render_cmd',
    'images_cmd',
    'format_cmd',
    'config_cmd',
]

# Handler registry: command_name -> handle function
_handlers: Dict[str, Callable] = {}


def register_all(subparsers) -> None:
    """
    Register every command module's parser and handler.

    Args:
        subparsers: argparse subparsers object from main parser
    """
    _handlers.clear()

    for module_name in COMMAND_MODULES:
        module = importlib.import_module(f'.{module_name}', __package__)

        if hasattr(module, 'register_parser'):
            module.register_parser(subparsers)

        if hasattr(module, 'handle'):
            # Derive from module name: 'render_cmd' -> 'render'
            default_name = module_name.replace('_cmd', '')
            for name in getattr(module, 'COMMAND_NAMES', [default_name]):
                _handlers[name] = module.handle

    logger.debug("Registered commands: %s", ", ".join(_handlers))


def dispatch(command: str, cli: Any, args: Any) -> Any:
    """
    Dispatch command to its registered handler.

    Raises:
        KeyError: If command not registered
    """
    if command not in _handlers:
        raise KeyError(f"Unknown command: {command}. Available: {list(_handlers.keys())}")

    return _handlers[command](cli, args)


def get_registered_commands() -> list:
    """Get list of registered command names."""
    return list(_handlers.keys())


__all__ = ['BaseCommand', 'register_all', 'dispatch', 'get_registered_commands']
