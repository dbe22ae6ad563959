"""
Config — View or set configuration

    metadoc config
    metadoc config --set docs.load_examples=false
"""

from .base import BaseCommand


class ConfigCommand(BaseCommand):
    """Show and update project configuration."""

    def show_config(self) -> str:
        text = self.config_manager.display()
        self.write(text)
        return text

    def set_config(self, key: str, value: str) -> bool:
        error = self.config_manager.set(key, value)
        if error:
            self.write(f"Error: {error}")
            return False
        self.write(f"Set {key} = {value}")
        return True


def register_parser(subparsers):
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., docs.load_examples=false)')
    return p


def handle(cli, args):
    cmd = ConfigCommand(cli)
    if args.set:
        if '=' not in args.set:
            cmd.write("Error: Use format KEY=VALUE (e.g., docs.load_examples=false)")
            return False
        key, value = args.set.split('=', 1)
        return cmd.set_config(key, value)
    return cmd.show_config()
