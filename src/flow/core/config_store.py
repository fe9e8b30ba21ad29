"""User configuration for flow.

Config lives in a TOML file at $FLOW_CONFIG, or ~/.config/flow/config.toml.
A missing file means defaults. Reads use tomllib; writes use tomlkit so
comments and formatting in a hand-edited file survive `flow config set`.

Example config.toml:
  # Where `flow clone` puts repositories (<clone_root>/<owner>/<repo>)
  clone_root = "~/gh"

  # Remote used by `flow checkout` when the input does not name one
  preferred_remote = "origin"

  # Reject `x/y` as an unknown remote when x is not a configured remote,
  # instead of treating `x/y` as one branch name
  strict_remote_prefix = false
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import tomlkit

CONFIG_PATH_ENV = "FLOW_CONFIG"
DEFAULT_CLONE_ROOT = "~/gh"
DEFAULT_PREFERRED_REMOTE = "origin"


@dataclass(frozen=True)
class FlowConfig:
    """In-memory representation of config.toml."""

    clone_root: Path = field(default_factory=lambda: Path(DEFAULT_CLONE_ROOT).expanduser())
    preferred_remote: str = DEFAULT_PREFERRED_REMOTE
    strict_remote_prefix: bool = False


def get_config_keys() -> dict[str, str]:
    """User-exposed config keys with descriptions, in display order."""
    return {
        "clone_root": "Directory that `flow clone` clones into (~/gh by default)",
        "preferred_remote": "Remote used by `flow checkout` when none is named",
        "strict_remote_prefix": "Require the prefix of 'x/y' to be a configured remote",
    }


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "flow" / "config.toml"


def parse_config_value(key: str, value: str) -> object:
    """Convert a command-line string into the type stored for key.

    Raises:
        ValueError: If key is unknown or value does not fit the key's type
    """
    if key not in get_config_keys():
        raise ValueError(f"Invalid key: {key}")
    if key == "strict_remote_prefix":
        if value.lower() not in ("true", "false"):
            raise ValueError(f"Invalid boolean value: {value}")
        return value.lower() == "true"
    if not value.strip():
        raise ValueError(f"Value for {key} cannot be empty")
    return value.strip()


def config_from_mapping(data: dict[str, Any]) -> FlowConfig:
    """Build FlowConfig from parsed TOML, falling back to defaults per key.

    Raises:
        ValueError: If a value has the wrong type
    """
    defaults = FlowConfig()

    clone_root = data.get("clone_root", DEFAULT_CLONE_ROOT)
    if not isinstance(clone_root, str):
        raise ValueError(f"clone_root must be a string, got {type(clone_root).__name__}")

    preferred_remote = data.get("preferred_remote", defaults.preferred_remote)
    if not isinstance(preferred_remote, str) or not preferred_remote:
        raise ValueError("preferred_remote must be a non-empty string")

    strict = data.get("strict_remote_prefix", defaults.strict_remote_prefix)
    if not isinstance(strict, bool):
        raise ValueError("strict_remote_prefix must be true or false")

    return FlowConfig(
        clone_root=Path(clone_root).expanduser(),
        preferred_remote=preferred_remote,
        strict_remote_prefix=strict,
    )


class ConfigStore(ABC):
    """Loads and updates the user config file."""

    @abstractmethod
    def path(self) -> Path:
        """Location of the config file."""
        ...

    @abstractmethod
    def load(self) -> FlowConfig:
        """Load config, returning defaults when the file does not exist.

        Raises:
            ValueError: If the file is not valid TOML or has invalid values
        """
        ...

    @abstractmethod
    def set_value(self, key: str, value: object) -> None:
        """Persist a single key, preserving the rest of the file."""
        ...


class RealConfigStore(ConfigStore):
    """Config store backed by a TOML file on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path if config_path is not None else default_config_path()

    def path(self) -> Path:
        return self._path

    def load(self) -> FlowConfig:
        if not self._path.exists():
            return FlowConfig()
        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {self._path}: {e}") from e
        return config_from_mapping(data)

    def set_value(self, key: str, value: object) -> None:
        if not self._path.parent.exists():
            self._path.parent.mkdir(parents=True)

        if self._path.exists():
            with self._path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()

        assert isinstance(doc, MutableMapping), f"Expected MutableMapping, got {type(doc)}"
        cast(dict[str, Any], doc)[key] = value

        with self._path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)
