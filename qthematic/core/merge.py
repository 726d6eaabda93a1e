"""Project a sparse ThemeConfig onto a complete base style."""

from typing import Iterable, Optional

from .attributes import ATTRIBUTES, AttributeKey, OverrideValue
from .theme_config import ThemeConfig
from .visuals import Visuals, get_path, replace_path, resolve_base


def get_attribute(visuals: Visuals, key: AttributeKey) -> OverrideValue:
    return get_path(visuals, ATTRIBUTES[key].path)


def with_attribute(visuals: Visuals, key: AttributeKey, value: OverrideValue) -> Visuals:
    """Return *visuals* with one attribute replaced."""
    return replace_path(visuals, ATTRIBUTES[key].path, value)


def apply(
    base: Visuals,
    overrides: ThemeConfig,
    order: Optional[Iterable[AttributeKey]] = None,
) -> Visuals:
    """Resolve *overrides* against *base*.

    Every set key is written into the matching field; unset keys keep the
    base value. Writes never read other overridden fields, so *order*
    (defaults to enumeration order) does not affect the result.
    """
    resolved = base
    for key in (ATTRIBUTES if order is None else order):
        value = overrides.get(key)
        if value is not None:
            resolved = with_attribute(resolved, key, value)
    return resolved


def to_visuals(config: ThemeConfig) -> Visuals:
    """Resolve *config* against the base style for its mode."""
    return apply(resolve_base(config.dark_mode), config)
