"""``--set SECTION.KEY=VALUE`` overrides for the loaded configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Every type :func:`coerce_value` can return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` value addressed by section and key path."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the dotted path; everything after it is the value,
    coerced with :func:`coerce_value`.

    Raises:
        ValueError: Missing ``=``, no dot in the path, or an empty path
            component.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='DEBUG')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").value
        8192
    """
    path, sep, value_str = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping the plain string when that fails.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("DEBUG")
        (True, 42, 'DEBUG')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate dicts.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.

    Example:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> d
        {'s': {'x': {'y': 3}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged in.

    The original Config is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed.

    Example:
        >>> cfg = Config({"s": {"k": 1}}, {})
        >>> apply_overrides(cfg, ("s.k=2",))["s"]["k"]
        2
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
