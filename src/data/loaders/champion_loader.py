"""Champion JSON encoding and decoding."""

import json
from typing import Any, Optional, Union, get_args

from pydantic import BaseModel, ValidationError

from ..models.champion import Champion


class MalformedChampionError(ValueError):
    """Raised when champion JSON is not well-formed or has mistyped fields.

    Attributes:
        errors: pydantic error dicts, each with a ``loc`` tuple of JSON keys
            and list indexes, a ``type`` and a ``msg``.
    """

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "MalformedChampionError":
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        return cls(f"{location}: {first['msg']}", errors)

    @property
    def is_syntax_error(self) -> bool:
        return any(error["type"] == "json_invalid" for error in self.errors)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


# NaN and Infinity are not JSON.
_JSON_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def encode_champion(champion: Champion) -> str:
    """Encode a champion as compact JSON using the camelCase wire keys."""
    return champion.model_dump_json(by_alias=True)


def decode_champion(text: Union[str, bytes]) -> Champion:
    """Decode champion JSON.

    Missing fields take their zero value and unknown fields are ignored.

    Args:
        text: JSON document, as text or raw bytes.

    Returns:
        The decoded Champion.

    Raises:
        MalformedChampionError: If the input is not a JSON object or a field
            has an incompatible JSON type.
    """
    try:
        return Champion.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedChampionError.from_validation_error(exc) from exc


def decode_champion_lenient(
    text: Union[str, bytes],
) -> tuple[Champion, Optional[MalformedChampionError]]:
    """Decode champion JSON, keeping every field that decoded cleanly.

    Mistyped fields are left at their zero value instead of failing the whole
    document. Input that is not a JSON object decodes to an empty Champion.
    Only the first JSON value is read; anything after it is ignored.

    Returns:
        Tuple of (champion, first error or None).
    """
    text = _first_value(text)
    try:
        return decode_champion(text), None
    except MalformedChampionError as error:
        if error.is_syntax_error:
            return Champion(), error
        failure = error

    try:
        raw = _JSON_DECODER.decode(text)
    except ValueError:
        return Champion(), failure
    if not isinstance(raw, dict):
        return Champion(), failure

    for error in failure.errors:
        _prune(raw, tuple(error["loc"]))

    try:
        return Champion.model_validate_json(json.dumps(raw)), failure
    except ValidationError:
        return Champion(), failure


def _first_value(text: Union[str, bytes]) -> Union[str, bytes]:
    """Slice of ``text`` holding its first JSON value.

    Input that does not start with a complete JSON value is returned as is so
    the caller reports the syntax error.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            return text
    start = len(text) - len(text.lstrip(" \t\n\r"))
    try:
        _, end = _JSON_DECODER.raw_decode(text, start)
    except ValueError:
        return text
    return text[:end]


def _matching_keys(node: dict, alias: str) -> list[str]:
    """Non-null keys of a raw JSON object that resolve to the given field alias."""
    return [
        key for key, value in node.items()
        if value is not None and key.lower() == alias.lower()
    ]


def _element_zero(loc: tuple) -> Any:
    """Zero value for the list element addressed by ``loc``."""
    annotation: Any = Champion
    for part in loc:
        if isinstance(part, int):
            annotation = get_args(annotation)[0]
            continue
        for name, field in annotation.model_fields.items():
            if (field.alias or name) == part:
                annotation = field.annotation
                break
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return {}
    return ""


def _prune(raw: dict, loc: tuple) -> None:
    """Drop the value at ``loc`` so that field falls back to its zero value."""
    if not loc:
        return
    node: Any = raw
    for part in loc[:-1]:
        if isinstance(node, dict) and isinstance(part, str):
            keys = _matching_keys(node, part)
            if not keys:
                return
            node = node[keys[-1]]
        elif isinstance(node, list) and isinstance(part, int) and part < len(node):
            node = node[part]
        else:
            return

    last = loc[-1]
    if isinstance(node, dict) and isinstance(last, str):
        keys = _matching_keys(node, last)
        if keys:
            del node[keys[-1]]
    elif isinstance(node, list) and isinstance(last, int) and last < len(node):
        node[last] = _element_zero(loc)
