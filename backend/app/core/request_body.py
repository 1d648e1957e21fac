"""Request Body Decoding: turns raw request bytes into the value the echo endpoint returns.

Invariants:
    - Empty body → None
    - JSON media types (application/json, application/*+json) → any JSON value
    - application/x-www-form-urlencoded → dict (repeated keys become lists,
      bracket keys nest: a[b]=1 → {"a": {"b": "1"}}, a[]=1 → {"a": ["1"]})
    - Any other or missing content type → None (body ignored, size never checked)
    - Size checked only for parsed media types, before decoding; oversize → BodyTooLargeError
    - Undecodable bytes or invalid JSON → MalformedBodyError
"""

import json
import re
from typing import Any
from urllib.parse import parse_qsl

from app.core.errors import BodyTooLargeError, MalformedBodyError

DEFAULT_MAX_BODY_BYTES = 100 * 1024

_JSON = "application/json"
_FORM = "application/x-www-form-urlencoded"

_BRACKET_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


def media_type_of(content_type: str | None) -> str:
    """Strip parameters (charset etc.) and normalize case."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_json_media_type(media_type: str) -> bool:
    return media_type == _JSON or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def is_parsed_content_type(content_type: str | None) -> bool:
    """True when decode_body reads bodies of this content type."""
    media_type = media_type_of(content_type)
    return is_json_media_type(media_type) or media_type == _FORM


def check_body_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise BodyTooLargeError(size, max_bytes)


def decode_body(
    raw: bytes,
    content_type: str | None,
    max_bytes: int = DEFAULT_MAX_BODY_BYTES,
) -> Any:
    """Decode a request body according to its content type."""
    if not raw or not is_parsed_content_type(content_type):
        return None
    check_body_size(len(raw), max_bytes)

    if media_type_of(content_type) == _FORM:
        return _decode_form(raw)
    return _decode_json(raw)


def _decode_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedBodyError(f"body is not valid UTF-8 ({e.reason})") from e


def _decode_json(raw: bytes) -> Any:
    text = _decode_text(raw)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedBodyError(
            f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
        ) from e


# --- Forms --------------------------------------------------------------------

def _decode_form(raw: bytes) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key, value in parse_qsl(_decode_text(raw), keep_blank_values=True):
        if not _insert_nested(fields, split_form_key(key), value):
            _merge_leaf(fields, key, value)
    return fields


def split_form_key(key: str) -> list[str]:
    """Split 'a[b][]' into ['a', 'b', '']; keys without valid brackets stay whole."""
    head, sep, rest = key.partition("[")
    if not sep or not head:
        return [key]
    rest = "[" + rest
    segments = _BRACKET_SEGMENT.findall(rest)
    if "".join(f"[{s}]" for s in segments) != rest:
        return [key]
    return [head, *segments]


def _insert_nested(fields: dict[str, Any], path: list[str], value: str) -> bool:
    """Place value at path. False when the path conflicts with existing data."""
    if len(path) == 1:
        return False
    push = path[-1] == ""
    keys = path[:-1] if push else path
    if "" in keys:
        return False

    node = fields
    for key in keys[:-1]:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            return False
        node = child

    leaf = keys[-1]
    existing = node.get(leaf)
    if isinstance(existing, dict):
        return False
    if push:
        if existing is None:
            node[leaf] = [value]
        elif isinstance(existing, list):
            existing.append(value)
        else:
            node[leaf] = [existing, value]
        return True
    _merge_leaf(node, leaf, value)
    return True


def _merge_leaf(node: dict[str, Any], key: str, value: str) -> None:
    """Single value stays scalar; repeats accumulate into a list."""
    existing = node.get(key)
    if existing is None:
        node[key] = value
    elif isinstance(existing, list):
        existing.append(value)
    else:
        node[key] = [existing, value]
