"""ThemeConfig: a named, sparse set of style overrides."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .attributes import ATTRIBUTES, AttributeKey, OverrideValue, validate_value


@dataclass
class ThemeConfig:
    """A theme as edited and persisted.

    ``overrides`` holds only the keys that are set. A missing key means the
    attribute is inherited from the base style for ``dark_mode``.
    """

    name: str = "Dark"
    dark_mode: bool = True
    overrides: dict[AttributeKey, OverrideValue] = field(default_factory=dict)

    def __post_init__(self):
        self.overrides = {
            key: validate_value(key, value)
            for key, value in self.overrides.items()
            if value is not None
        }

    def get(self, key: AttributeKey) -> Optional[OverrideValue]:
        return self.overrides.get(key)

    def set(self, key: AttributeKey, value: Any) -> None:
        """Set an override. A value of None clears it."""
        if value is None:
            self.clear(key)
            return
        self.overrides[key] = validate_value(key, value)

    def clear(self, key: AttributeKey) -> None:
        self.overrides.pop(key, None)

    def is_set(self, key: AttributeKey) -> bool:
        return key in self.overrides

    def is_empty(self) -> bool:
        return not self.overrides

    def present_keys(self) -> list[AttributeKey]:
        """Set keys, in enumeration order."""
        return [key for key in ATTRIBUTES if key in self.overrides]

    def items(self) -> Iterator[tuple[AttributeKey, OverrideValue]]:
        for key in self.present_keys():
            yield key, self.overrides[key]

    def copy(self) -> ThemeConfig:
        return ThemeConfig(name=self.name, dark_mode=self.dark_mode, overrides=dict(self.overrides))
