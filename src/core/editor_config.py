"""
Editor Configuration Module.
Defines configuration settings for the command editor.

Values are layered: dataclass defaults, then an optional JSON file,
then environment variables (a .env file is honoured via python-dotenv).
Command-line flags are applied on top by the CLI.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Please enter a command, e.g. open, save, saveas, close, print, new."
DEFAULT_HISTORY_LIMIT = 100

ENV_PREFIX = "EDITOR_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


@dataclass
class EditorConfig:
    """
    Configuration settings for the command editor.

    Attributes:
        prompt: Text shown before each input line.
        history_limit: Maximum number of commands kept for undo (0 = unlimited).
        initial_path: Document path the editor starts with.
        debug: Whether to log at DEBUG level.
        log_to_console: Whether to mirror log records to stderr.
        log_to_file: Whether to write the rotating log file.
        log_dir: Directory of the log file.
    """

    prompt: str = DEFAULT_PROMPT
    history_limit: int = DEFAULT_HISTORY_LIMIT
    initial_path: str = ""
    debug: bool = False
    log_to_console: bool = False
    log_to_file: bool = True
    log_dir: str = "logs"

    def validate(self) -> List[str]:
        """
        Checks the configuration values.

        Returns:
            List[str]: Validation errors, empty if the config is valid.
        """
        errors = []
        if not isinstance(self.history_limit, int) or isinstance(
            self.history_limit, bool
        ):
            errors.append("history_limit must be an integer")
        elif self.history_limit < 0:
            errors.append("history_limit must be >= 0")
        for name in ("prompt", "initial_path", "log_dir"):
            if not isinstance(getattr(self, name), str):
                errors.append(f"{name} must be a string")
        for name in ("debug", "log_to_console", "log_to_file"):
            if not isinstance(getattr(self, name), bool):
                errors.append(f"{name} must be true or false")

        if isinstance(self.prompt, str) and not self.prompt.strip():
            errors.append("prompt must not be empty")
        if isinstance(self.log_dir, str) and not self.log_dir:
            errors.append("log_dir must not be empty")
        return errors

    @property
    def max_history(self) -> Optional[int]:
        """History bound suitable for CommandHistory (None = unbounded)."""
        return self.history_limit or None

    def to_dict(self) -> dict:
        """
        Converts the config to a dictionary for JSON serialization.

        Returns:
            dict: Dictionary representation of the configuration.
        """
        return {
            "prompt": self.prompt,
            "history_limit": self.history_limit,
            "initial_path": self.initial_path,
            "debug": self.debug,
            "log_to_console": self.log_to_console,
            "log_to_file": self.log_to_file,
            "log_dir": self.log_dir,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EditorConfig":
        """
        Creates an EditorConfig from a dictionary.

        Args:
            data: Dictionary containing configuration values.

        Returns:
            EditorConfig: A new EditorConfig instance.
        """
        return cls(
            prompt=data.get("prompt", DEFAULT_PROMPT),
            history_limit=data.get("history_limit", DEFAULT_HISTORY_LIMIT),
            initial_path=data.get("initial_path", ""),
            debug=data.get("debug", False),
            log_to_console=data.get("log_to_console", False),
            log_to_file=data.get("log_to_file", True),
            log_dir=data.get("log_dir", "logs"),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EditorConfig":
        """
        Loads a configuration from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            EditorConfig: The loaded configuration.

        Raises:
            ValueError: If the file is not a JSON object.
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file {path}: expected a JSON object")

        unknown = set(data) - set(cls().to_dict())
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

        return cls.from_dict(data)

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """
        Overrides values from EDITOR_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            EditorConfig: self, for chaining.

        Raises:
            ValueError: If a variable holds an unparsable value.
        """
        env = os.environ if environ is None else environ

        if f"{ENV_PREFIX}PROMPT" in env:
            self.prompt = env[f"{ENV_PREFIX}PROMPT"]
        if f"{ENV_PREFIX}HISTORY_LIMIT" in env:
            raw = env[f"{ENV_PREFIX}HISTORY_LIMIT"]
            try:
                self.history_limit = int(raw)
            except ValueError:
                raise ValueError(
                    f"Invalid integer for {ENV_PREFIX}HISTORY_LIMIT: {raw!r}"
                ) from None
        if f"{ENV_PREFIX}INITIAL_PATH" in env:
            self.initial_path = env[f"{ENV_PREFIX}INITIAL_PATH"]
        if f"{ENV_PREFIX}LOG_DIR" in env:
            self.log_dir = env[f"{ENV_PREFIX}LOG_DIR"]

        for field_name in ("debug", "log_to_console", "log_to_file"):
            key = f"{ENV_PREFIX}{field_name.upper()}"
            if key in env:
                setattr(self, field_name, _parse_bool(key, env[key]))

        return self


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    validate: bool = True,
) -> EditorConfig:
    """
    Builds the effective configuration.

    Args:
        path: Optional JSON config file.
        environ: Environment mapping. When None, a .env file is loaded
            first and os.environ is used.
        validate: Whether to reject invalid values here. Callers that
            layer further overrides on top validate the final result.

    Returns:
        EditorConfig: The merged configuration.

    Raises:
        ValueError: If any source holds invalid values.
    """
    if environ is None:
        load_dotenv()

    config = EditorConfig.from_file(path) if path else EditorConfig()
    config.apply_env(environ)

    errors = config.validate() if validate else []
    if errors:
        raise ValueError("; ".join(errors))

    logger.debug(f"Loaded config: {config.to_dict()}")
    return config
