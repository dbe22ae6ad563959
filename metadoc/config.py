"""
Configuration — Flags and settings for documentation runs

Config hierarchy (highest to lowest priority):
  1. Environment variables (METADOC_LOAD_EXAMPLES, METADOC_ALTER_DOCS)
  2. Project config (.metadoc/config.yaml)
  3. User config (~/.metadoc/config.yaml)
  4. Defaults

The flags are passed explicitly to the aggregator; nothing reads them as
ambient global state.
"""

import logging
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple

from .core.printer import BLOCK_FORMS


logger = logging.getLogger(__name__)


@dataclass
class DocsConfig:
    """
    Switches for documentation runs.

    examples_enabled: include stored examples when altering docs
    aggregation_enabled: when False, alter_docs() does nothing
    """
    examples_enabled: bool = True
    aggregation_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'DocsConfig':
        """Load flags from environment variables, defaulting to True."""
        return cls(
            examples_enabled=_get_bool_env("METADOC_LOAD_EXAMPLES", True),
            aggregation_enabled=_get_bool_env("METADOC_ALTER_DOCS", True),
        )

    def to_dict(self) -> dict:
        return {
            "load_examples": self.examples_enabled,
            "alter_docs": self.aggregation_enabled,
        }


@dataclass
class PrinterConfig:
    """Form printer preferences."""
    block_forms: Tuple[str, ...] = ()  # Added to the built-in block forms

    @property
    def effective_block_forms(self) -> frozenset:
        return BLOCK_FORMS | frozenset(self.block_forms)

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        for name in self.block_forms:
            if not name or any(c.isspace() or c in "()[]{}\"" for c in name):
                return f"Invalid block form name '{name}'"
        return None


@dataclass
class Config:
    """Application configuration."""
    docs: DocsConfig = field(default_factory=DocsConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "docs": self.docs.to_dict(),
            "printer": {
                "block_forms": list(self.printer.block_forms),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        docs_data = data.get("docs", {}) or {}
        printer_data = data.get("printer", {}) or {}

        return cls(
            docs=DocsConfig(
                examples_enabled=_as_bool(docs_data.get("load_examples"), True),
                aggregation_enabled=_as_bool(docs_data.get("alter_docs"), True),
            ),
            printer=PrinterConfig(
                block_forms=tuple(printer_data.get("block_forms") or ()),
            ),
        )

    def validate(self) -> Optional[str]:
        return self.printer.validate()


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment
      2. Project config (.metadoc/config.yaml)
      3. User config (~/.metadoc/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".metadoc"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".metadoc"
    PROJECT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None, user_config_path: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._user_config_path = Path(user_config_path) if user_config_path else self.USER_CONFIG_FILE
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self._user_config_path

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read_yaml(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read_yaml(self.project_config_path))

        # Layer 3: Environment overrides
        for env_key, setting in (("METADOC_LOAD_EXAMPLES", "load_examples"),
                                 ("METADOC_ALTER_DOCS", "alter_docs")):
            if os.environ.get(env_key):
                # A bare "docs:" key loads as None
                docs = config_data.get("docs") or {}
                docs[setting] = _as_bool(os.environ[env_key], docs.get(setting, True))
                config_data["docs"] = docs

        self._config = Config.from_dict(config_data)
        return self._config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring malformed config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", path)
            return {}
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self.project_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.project_config_path, 'w') as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False)

        self._config = config

    def set(self, key: str, value: str) -> Optional[str]:
        """
        Set a configuration value in the project config.

        Args:
            key: Dot-separated key (e.g., "docs.load_examples")
            value: Value to set

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'docs.load_examples')"

        section, setting = parts

        if section == "docs":
            if setting == "load_examples":
                config.docs.examples_enabled = _as_bool(value, config.docs.examples_enabled)
            elif setting == "alter_docs":
                config.docs.aggregation_enabled = _as_bool(value, config.docs.aggregation_enabled)
            else:
                return f"Unknown docs setting: {setting}. Valid: load_examples, alter_docs"
        elif section == "printer":
            if setting == "block_forms":
                config.printer.block_forms = tuple(v.strip() for v in value.split(",") if v.strip())
            else:
                return f"Unknown printer setting: {setting}. Valid: block_forms"
            error = config.printer.validate()
            if error:
                return error
        else:
            return f"Unknown section: {section}. Valid: docs, printer"

        self.save_project(config)
        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        if key == "docs.load_examples":
            return str(config.docs.examples_enabled).lower()
        if key == "docs.alter_docs":
            return str(config.docs.aggregation_enabled).lower()
        if key == "printer.block_forms":
            return ",".join(config.printer.block_forms)
        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        extra = ", ".join(config.printer.block_forms) or "(none)"
        lines = [
            "Configuration:",
            "",
            "Docs:",
            f"  Load examples: {str(config.docs.examples_enabled).lower()}",
            f"  Alter docs: {str(config.docs.aggregation_enabled).lower()}",
            "",
            "Printer:",
            f"  Extra block forms: {extra}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]
        return "\n".join(lines)


def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()


def _as_bool(value: Any, default: bool) -> bool:
    """Interpret YAML/env/CLI values as a boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off"):
        return False
    return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    return _as_bool(os.environ.get(key), default)
