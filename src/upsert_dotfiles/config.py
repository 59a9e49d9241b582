from __future__ import annotations

import copy
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Source of truth for the shared dotfiles
REPO_URL = "https://github.com/Antire-AS/antire-public-dotfiles.git"

# Entries copied under the allow-list policy, in copy order
INCLUDE_ITEMS: List[str] = [
    ".gitignore",
    ".ruff.toml",
    "pyrightconfig.json",
    "pytest.ini",
    ".coveragerc",
]

# Top-level entries never copied under the enumeration policy
EXCLUDE_ITEMS: List[str] = [
    ".git",
    ".github",
    ".releaserc.json",
    "README.md",
]


class ConfigError(ValueError):
    """Raised when the config file holds a value we cannot use."""


class Policy(str, Enum):
    """How the candidate entry list is built from the fetched tree."""

    INCLUDE = "include"
    ENUMERATE = "enumerate"


class Config:
    """Configuration for upsert-dotfiles.

    Built-in defaults, optionally overridden by a YAML file. A missing
    or empty file leaves the defaults untouched.
    """

    DEFAULT_CONFIG = {
        "repo_url": REPO_URL,
        "policy": Policy.INCLUDE.value,
        "include": INCLUDE_ITEMS,
        "exclude": EXCLUDE_ITEMS,
    }

    def __init__(self, config_path: Optional[Path] = None):
        # Use deepcopy to avoid mutating the class-level DEFAULT_CONFIG
        self.data = copy.deepcopy(self.DEFAULT_CONFIG)
        self.path = config_path

        if config_path and config_path.exists():
            with open(config_path, "r") as f:
                try:
                    user_config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigError(f"Could not parse {config_path}: {e}")
            if user_config:
                if not isinstance(user_config, dict):
                    raise ConfigError(
                        f"{config_path} must contain a mapping at top level"
                    )
                self._deep_update(self.data, user_config)

    def _deep_update(self, base: Dict, update: Dict):
        for k, v in update.items():
            if isinstance(v, dict) and k in base and isinstance(base[k], dict):
                self._deep_update(base[k], v)
            else:
                base[k] = v

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a config value by dot-separated path."""
        keys = key_path.split(".")
        value = self.data
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def validate(self) -> None:
        """Check the values used by a run, raising ConfigError if bad."""
        self._name_list("include")
        self._name_list("exclude")
        self._parse_policy()

    @property
    def repo_url(self) -> str:
        return str(self.get("repo_url", REPO_URL))

    @property
    def policy(self) -> Policy:
        return self._parse_policy()

    def _parse_policy(self) -> Policy:
        raw = self.get("policy", Policy.INCLUDE.value)
        try:
            return Policy(str(raw).lower())
        except ValueError:
            choices = ", ".join(p.value for p in Policy)
            raise ConfigError(
                f"Unknown policy '{raw}' (expected one of: {choices})"
            )

    @property
    def include(self) -> List[str]:
        return self._name_list("include")

    @property
    def exclude(self) -> List[str]:
        return self._name_list("exclude")

    def _name_list(self, key: str) -> List[str]:
        value = self.get(key, [])
        if not isinstance(value, list) or not all(
            isinstance(v, str) for v in value
        ):
            raise ConfigError(f"'{key}' must be a list of names")
        for name in value:
            if not _is_plain_name(name):
                raise ConfigError(
                    f"'{key}' entry '{name}' must be a single file or "
                    "directory name"
                )
        return list(value)


def _is_plain_name(name: str) -> bool:
    """True for a single path segment other than . and .."""
    if name in ("", ".", ".."):
        return False
    separators = [s for s in (os.sep, os.altsep, "/") if s]
    return not any(s in name for s in separators)
