"""JSON serialization helpers for plain data and records."""

import json
from dataclasses import dataclass
from typing import Any, TypeVar

import logfire
from pydantic import BaseModel

from objcraft.exceptions import DeserializationError

T = TypeVar('T')


@dataclass
class SerializerConfig:
    """Settings passed to the JSON encoder.

    Attributes:
        indent: Indentation width, or None for a single line. Defaults to None.
        sort_keys: Whether to sort object keys. Defaults to False (insertion order).
        ensure_ascii: Whether to escape non-ASCII characters. Defaults to False.
        compact: Whether to drop whitespace after separators. Defaults to True.
    """

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    compact: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If indent is negative.
        """
        if self.indent is not None and self.indent < 0:
            raise ValueError(f'indent must be non-negative, got {self.indent}')

    def dump_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for ``json.dumps``."""
        kwargs: dict[str, Any] = {
            'indent': self.indent,
            'sort_keys': self.sort_keys,
            'ensure_ascii': self.ensure_ascii,
        }
        if self.compact:
            kwargs['separators'] = (',', ':')
        return kwargs


def _encode_object(obj: Any) -> Any:
    """Convert objects the JSON encoder does not know into plain data."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode='json')
    if hasattr(obj, '__dict__'):
        return {key: value for key, value in vars(obj).items() if not key.startswith('_')}
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


def serialize(value: Any, config: SerializerConfig | None = None) -> str:
    """Return the JSON representation of a value.

    Args:
        value: Plain data, a pydantic model or an object with public attributes
        config: Encoder settings. Defaults to compact output.

    Returns:
        JSON text, e.g. ``'[1,2,3]'`` or ``'{"width":10,"height":20}'``.

    """
    config = config or SerializerConfig()
    return json.dumps(value, default=_encode_object, **config.dump_kwargs())


def deserialize(proto: type[T], text: str) -> T | Any:
    """Parse JSON text and attach the result to a class.

    The parsed fields are not validated against the class; fields the class
    does not declare are kept as they are. Methods of ``proto`` then resolve
    against the parsed data.

    Args:
        proto: Class the parsed value should behave as
        text: JSON text

    Returns:
        An instance of ``proto`` carrying the parsed data, or the parsed
        value itself when it cannot be attached to ``proto``.

    Raises:
        DeserializationError: If the text is not valid JSON.

    Example:
        >>> r = deserialize(Rectangle, '{"width":10,"height":20}')
        >>> r.get_area()
        200

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logfire.error('Failed to parse serialized text', proto=proto.__name__, error=str(e))
        raise DeserializationError(text, str(e)) from e

    if isinstance(data, (list, dict, str)) and issubclass(proto, type(data)):
        return proto(data)

    if not isinstance(data, dict):
        return data

    if issubclass(proto, BaseModel):
        return _construct_model(proto, data)

    instance = proto.__new__(proto)
    try:
        for key, value in data.items():
            setattr(instance, key, value)
    except AttributeError as e:
        logfire.warn('Cannot attach parsed fields', proto=proto.__name__, error=str(e))
        return data
    return instance


def _construct_model(proto: type[BaseModel], data: dict[str, Any]) -> BaseModel:
    """Build a model without validation, keeping fields the model does not declare."""
    instance = proto.model_construct(**data)
    # models that ignore extras drop unknown keys in model_construct
    if instance.__pydantic_extra__ is None:
        extras = {key: value for key, value in data.items() if key not in proto.model_fields}
        if extras:
            object.__setattr__(instance, '__pydantic_extra__', extras)
    return instance
