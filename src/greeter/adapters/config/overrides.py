"""``--set SECTION.KEY=VALUE`` handling for the root command.

Overrides sit on top of every file and environment layer. They only ever
touch configuration sections (logging, mostly); the greetings are not
configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Value types an override string can decode to."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment, split into its parts."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: Missing ``=``, missing dot, or an empty path component.

    Examples:
        >>> parse_override("lib_log_rich.console_level=INFO")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='INFO')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=4096").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=decode_value(text))


def decode_value(text: str) -> OverrideValue:
    """Decode ``text`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> decode_value("false")
        False
        >>> decode_value("7")
        7
        >>> decode_value('{"a": 1}')
        {'a': 1}
        >>> decode_value("WARNING")
        'WARNING'
        >>> decode_value("")
        ''
    """
    if not text:
        return ""
    try:
        return cast(OverrideValue, orjson.loads(text))
    except orjson.JSONDecodeError:
        return text


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` at its key path inside ``tree``.

    Raises:
        TypeError: A key on the path already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, ConfigOverride("s", ("a", "b"), 1))
        >>> tree
        {'s': {'a': {'b': 1}}}
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` assignment merged in.

    The original object is returned untouched when there is nothing to apply.

    Raises:
        ValueError: Any override string is malformed.

    Examples:
        >>> cfg = Config({"lib_log_rich": {"console_level": "WARNING"}}, {})
        >>> apply_overrides(cfg, ("lib_log_rich.console_level=DEBUG",))["lib_log_rich"]["console_level"]
        'DEBUG'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "decode_value",
    "parse_override",
]
