"""JSON and query-string encoding, and conversion to a thread-safe map."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import quote

from map_toolkit.concurrent import ConcurrentMap
from map_toolkit.errors import ParseError, TypeMismatchError


logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = True


DEFAULT_CODEC_CONFIG = CodecConfig()


def to_json(mapping: Mapping[Any, Any], config: CodecConfig | None = None) -> str:
    """Serialize *mapping* to a JSON object whose member names are ``str(key)``.

    Raises TypeMismatchError when a value is not serializable, or when two
    keys have the same string form (e.g. ``1`` and ``"1"``).
    """
    config = config or DEFAULT_CODEC_CONFIG
    members: dict[str, Any] = {}
    for key, value in mapping.items():
        name = str(key)
        if name in members:
            raise TypeMismatchError(
                f"Key {key!r} collides with another key as member name {name!r}", key=key
            )
        members[name] = value
    try:
        return json.dumps(
            members,
            indent=config.indent,
            sort_keys=config.sort_keys,
            ensure_ascii=config.ensure_ascii,
        )
    except (TypeError, ValueError) as exc:
        raise TypeMismatchError(f"Mapping is not JSON serializable: {exc}") from exc


def _convert_key(name: str, key_type: Callable[[str], K]) -> K:
    try:
        return key_type(name)
    except (TypeError, ValueError) as exc:
        raise TypeMismatchError(
            f"Member name {name!r} cannot be converted with {key_type!r}", key=name
        ) from exc


def _check_value(name: str, value: Any, value_type: type | None) -> Any:
    if value_type is None:
        return value
    # bool is an int subclass, but JSON true/false are never numbers.
    if isinstance(value, bool) and value_type is not bool:
        raise TypeMismatchError(
            f"Member {name!r} is a boolean, expected {value_type.__name__}", key=name
        )
    if value_type is float and isinstance(value, int):
        return float(value)
    try:
        matches = isinstance(value, value_type)
    except TypeError as exc:
        raise TypeMismatchError(
            f"{value_type!r} cannot be used for an instance check", key=name
        ) from exc
    if not matches:
        raise TypeMismatchError(
            f"Member {name!r} is {type(value).__name__}, expected {value_type.__name__}",
            key=name,
        )
    return value


def from_json(
    text: str | bytes,
    key_type: Callable[[str], K] = str,  # type: ignore[assignment]
    value_type: type[V] | None = None,
) -> dict[K, V]:
    """Deserialize a JSON object into a dict.

    Member names are converted with *key_type* (``str`` by default). When
    *value_type* is given, every member value must be an instance of it.

    Raises:
        ParseError: *text* is not valid JSON.
        TypeMismatchError: the document is not an object, or a member does
            not fit *key_type* / *value_type*.
    """
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"JSON bytes are not valid text: {exc}") from exc

    if not isinstance(decoded, dict):
        raise TypeMismatchError(f"Expected a JSON object, got {type(decoded).__name__}")

    result: dict[K, V] = {}
    for name, value in decoded.items():
        result[_convert_key(name, key_type)] = _check_value(name, value, value_type)
    logger.debug("from_json: decoded %d members", len(result))
    return result


def to_query_string(mapping: Mapping[Any, Any]) -> str:
    """Build ``key=value`` segments joined by ``&``.

    Keys and values are converted with ``str()`` and percent-encoded as URI
    components: only the RFC 3986 unreserved characters stay literal, so a
    space becomes ``%20``. No leading ``?`` is added.
    """
    return "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
        for key, value in mapping.items()
    )


def to_concurrent_map(mapping: Mapping[K, V]) -> ConcurrentMap[K, V]:
    """Copy the current pairs into a new ConcurrentMap, independent of *mapping*."""
    return ConcurrentMap(mapping)
