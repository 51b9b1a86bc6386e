"""Layered configuration loading for the greeter.

Sources are merged in the order defaults → app → host → user → dotenv → env,
with ``defaultconfig.toml`` next to this module as the defaults layer.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to use as a path component.

    Args:
        profile: Profile name such as ``production`` or ``staging-v2``.
        max_length: Upper bound on the name length. Defaults to
            ``DEFAULT_MAX_PROFILE_LENGTH``.

    Raises:
        ValueError: For empty, overlong, reserved, or path-traversing names.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One Config per (profile, start_dir) for the lifetime of the process.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration, optionally for a named profile.

    With a profile, lib_layered_config inserts ``profile/<name>/`` into every
    search path (e.g. ``~/.config/greeter/profile/test/config.toml``).

    Args:
        profile: Optional profile name, validated before any lookup.
        start_dir: Directory that seeds ``.env`` discovery. ``None`` means the
            current working directory.

    Returns:
        Immutable Config carrying per-key provenance.

    Example:
        >>> get_config().get("nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget every cached Config so the next call re-reads the layers."""
    _read_layers.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
