"""Composer configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class ComposerConfig:
    selector_prefix: str = ""
    element_separator: str = "__"
    modifier_separator: str = "--"
    state_prefix: str = "is"
    qualify_state: bool = True  # .x.is-open instead of .x--is-open

    def replace(self, **changes: Any) -> ComposerConfig:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ComposerConfig:
        """Build a config from a plain dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            if key not in known:
                continue
            if key == "qualify_state" and isinstance(value, str):
                value = value.lower() in ("true", "1", "yes")
            values[key] = value
        return cls(**values)
