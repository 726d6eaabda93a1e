"""Theme persistence as JSON documents.

A theme document is a JSON object with a required ``name`` string, a
required ``dark_mode`` boolean and one optional ``override_<id>`` field per
attribute key. Absent fields inherit the base style. Unknown fields are
ignored so older and newer files stay loadable.

Example document::

    {
      "name": "Custom",
      "dark_mode": false,
      "override_window_fill": [10, 20, 30, 255]
    }
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema.exceptions import best_match

from qthematic.logging import get_logger

from .attributes import ATTRIBUTES, AttributeKey, AttributeKind, validate_value
from .errors import DeserializationError, SerializationError, ThemeIOError
from .theme_config import ThemeConfig

logger = get_logger(__name__)

THEME_FILE_SUFFIX = ".theme.json"

_BYTE = {"type": "integer", "minimum": 0, "maximum": 255}

# null is accepted and treated as absent
_KIND_SCHEMAS = {
    AttributeKind.COLOR: {
        "type": ["array", "null"],
        "items": _BYTE,
        "minItems": 4,
        "maxItems": 4,
    },
    AttributeKind.FLOAT: {"type": ["number", "null"]},
    AttributeKind.U8: {"type": ["integer", "null"], "minimum": 0, "maximum": 255},
    AttributeKind.BOOL: {"type": ["boolean", "null"]},
}


def theme_schema() -> Dict[str, Any]:
    """JSON Schema for theme documents, built from the attribute table."""
    properties: Dict[str, Any] = {
        "name": {"type": "string"},
        "dark_mode": {"type": "boolean"},
    }
    for key, spec in ATTRIBUTES.items():
        properties[key.json_name] = dict(_KIND_SCHEMAS[spec.kind])
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "qthematic theme",
        "type": "object",
        "required": ["name", "dark_mode"],
        "properties": properties,
        "additionalProperties": True,
    }


@lru_cache(maxsize=1)
def _validator() -> jsonschema.Draft202012Validator:
    schema = theme_schema()
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def to_dict(config: ThemeConfig) -> Dict[str, Any]:
    """Convert a theme to a JSON-serializable dictionary.

    Keys come out as name, dark_mode, then set overrides in enumeration order.
    """
    data: Dict[str, Any] = {"name": config.name, "dark_mode": config.dark_mode}
    for key, value in config.items():
        if ATTRIBUTES[key].kind is AttributeKind.COLOR:
            data[key.json_name] = value.to_array()
        else:
            data[key.json_name] = value
    return data


def _integral(value: Any) -> Any:
    # JSON Schema counts 3.0 as an integer; store it as 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _coerce(key: AttributeKey, raw: Any) -> Any:
    kind = ATTRIBUTES[key].kind
    if kind is AttributeKind.COLOR:
        return [_integral(c) for c in raw]
    if kind is AttributeKind.U8:
        return _integral(raw)
    return raw


def _raise_validation_error(error: jsonschema.ValidationError) -> None:
    if error.validator == "required" and isinstance(error.instance, dict):
        missing = [k for k in error.validator_value if k not in error.instance]
        raise DeserializationError(error.message, missing[0] if missing else None)
    offending = str(error.path[0]) if error.path else None
    raise DeserializationError(error.message, offending)


def from_dict(data: Any) -> ThemeConfig:
    """Create a theme from a parsed JSON document.

    Raises:
        DeserializationError: required keys missing or a value has the wrong type
    """
    error = best_match(_validator().iter_errors(data))
    if error is not None:
        _raise_validation_error(error)

    name = data["name"]
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise DeserializationError(f"Theme name is not valid Unicode: {e}", "name") from e

    config = ThemeConfig(name=name, dark_mode=data["dark_mode"])
    for field_name, raw in data.items():
        if field_name in ("name", "dark_mode"):
            continue
        key = AttributeKey.from_json_name(field_name)
        if key is None:
            logger.debug(f"Ignoring unknown theme field: {field_name}")
            continue
        if raw is None:
            continue
        try:
            config.overrides[key] = validate_value(key, _coerce(key, raw))
        except (TypeError, ValueError) as e:
            raise DeserializationError(str(e), field_name) from e

    return config


def save(config: ThemeConfig) -> bytes:
    """Encode a theme as UTF-8 JSON."""
    try:
        text = json.dumps(to_dict(config), indent=2, allow_nan=False, ensure_ascii=False)
        return text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode theme {config.name!r}: {e}") from e


def load(data: Union[bytes, str]) -> ThemeConfig:
    """Decode a theme from JSON bytes or text."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"Theme file is not valid UTF-8: {e}") from e
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Malformed JSON: {e}") from e
    return from_dict(parsed)


def save_to_file(config: ThemeConfig, path: Union[str, Path]) -> None:
    """Write a theme to *path*.

    Raises:
        SerializationError: the theme cannot be encoded
        ThemeIOError: the file cannot be written
    """
    data = save(config)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Failed to save theme to {path}: {e}")
        raise ThemeIOError("write", path, str(e)) from e
    logger.debug(f"Saved theme {config.name!r} to {path}")


def load_from_file(path: Union[str, Path]) -> ThemeConfig:
    """Read a theme from *path*.

    Raises:
        ThemeIOError: the file cannot be read
        DeserializationError: the file content is not a valid theme
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Failed to load theme from {path}: {e}")
        raise ThemeIOError("read", path, str(e)) from e

    config = load(data)
    logger.debug(f"Loaded theme {config.name!r} from {path}")
    return config
