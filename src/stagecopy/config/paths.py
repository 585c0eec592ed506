"""Where stagecopy keeps its config file and logs.

Both live beside the checkout: ``config/config.toml`` and
``logs/stagecopy.log`` under the project root. ``STAGECOPY_CONFIG``
points the config file elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


CONFIG_ENV_VAR: Final[str] = "STAGECOPY_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a project marker.

    Falls back to the working directory when none of the ancestors has one.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def resolve_config_path(
    explicit: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Pick the config file: ``explicit``, then ``STAGECOPY_CONFIG``, then the project default.

    A blank environment value counts as unset.
    """

    if explicit is None:
        override = (env if env is not None else os.environ).get(CONFIG_ENV_VAR, "").strip()
        if override:
            explicit = override
    if explicit is None:
        return (_detect_repo_root() / "config" / "config.toml").resolve()
    return Path(explicit).expanduser().resolve()


def default_config_path() -> Path:
    return resolve_config_path()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "stagecopy.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_config_path",
]
