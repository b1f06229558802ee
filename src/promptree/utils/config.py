"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from promptree.utils.exceptions import FormatError

# Format fields that can be configured, with their value type
FORMAT_FIELDS: dict[str, type] = {
    "prefix": str,
    "left_sur": str,
    "right_sur": str,
    "chip": str,
    "suffix": str,
    "line_brk": bool,
    "show_default": bool,
}

_TRUE_WORDS = ("true", "1", "yes", "on")


def get_promptree_dir() -> Path:
    """Get the promptree data directory (XDG-compliant)."""
    if env_dir := os.environ.get("PROMPTREE_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "promptree"


def _coerce(field: str, value):
    """Convert a raw config value to the type of a format field."""
    if FORMAT_FIELDS[field] is bool:
        if isinstance(value, bool):
            return value
        return str(value).lower() in _TRUE_WORDS
    return str(value)


class Config:
    """Application configuration.

    Holds the debug flag and the baseline format applied to every prompt
    issued by the CLI. Library code never reads it implicitly: callers pass
    ``config.format()`` to ``Values`` or ``Menu``.
    """

    def __init__(self, promptree_dir: Optional[Path] = None):
        """Load config from directory."""
        self.promptree_dir = promptree_dir or get_promptree_dir()
        self._config_file = self.promptree_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.debug = False
        # Format overrides (field name -> value), unset fields use the defaults
        self.format_fields: dict[str, object] = {}
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                for key, value in data.get("format", {}).items():
                    if key in FORMAT_FIELDS:
                        self.format_fields[key] = _coerce(key, value)
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell PROMPTREE_* vars."""
        prefix = "PROMPTREE_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both PROMPTREE_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name == "debug":
                    self.debug = value.lower() in _TRUE_WORDS
                elif attr_name in FORMAT_FIELDS:
                    self.format_fields[attr_name] = _coerce(attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.promptree_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "format": self.format_fields,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def format(self):
        """Build the baseline Format from the configured fields."""
        from promptree.core.format import Format

        return Format(**self.format_fields)

    def set_format_field(self, field: str, value: str):
        """Set a format field and persist it.

        Raises:
            FormatError: If the field is not a Format field
        """
        if field not in FORMAT_FIELDS:
            raise FormatError(f"unknown format field: {field}")
        self.format_fields[field] = _coerce(field, value)
        self.save()

    def unset_format_field(self, field: str) -> bool:
        """Remove a format override. Returns True if it was set."""
        if field in self.format_fields:
            del self.format_fields[field]
            self.save()
            return True
        return False

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def get_debug(self) -> bool:
        """Get debug mode status."""
        return self.debug

    @property
    def log_path(self) -> Path:
        """Path to the debug log file."""
        return self.promptree_dir / "debug.log"
