"""Convenience operations over key-value mappings."""

import logging

from map_toolkit.concurrent import ConcurrentMap
from map_toolkit.errors import (
    DuplicateKeyError,
    IncomparableTypeError,
    MapToolkitError,
    ParseError,
    TypeMismatchError,
    UnsupportedValueTypeError,
)
from map_toolkit.insertion import (
    DEFAULT_INCREMENT_SEED,
    add,
    add_if_not_exists,
    add_or_update,
    add_range,
    get_or_add,
    get_or_add_value,
    increment,
    merge,
    try_add,
)
from map_toolkit.interchange import (
    DEFAULT_CODEC_CONFIG,
    CodecConfig,
    from_json,
    to_concurrent_map,
    to_json,
    to_query_string,
)
from map_toolkit.read import (
    KeysForValue,
    as_read_only,
    find_keys_for_value,
    get_keys,
    get_value_or_default,
    get_values,
    has_duplicate_values,
    to_list,
)
from map_toolkit.transform import (
    SupportsClone,
    combine_with,
    deep_copy,
    filter_map,
    for_each,
    invert,
    map_values,
    remove_where,
    sort_by_key,
    sort_by_value,
    transform_values,
)


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CODEC_CONFIG",
    "DEFAULT_INCREMENT_SEED",
    "CodecConfig",
    "ConcurrentMap",
    "DuplicateKeyError",
    "IncomparableTypeError",
    "KeysForValue",
    "MapToolkitError",
    "ParseError",
    "SupportsClone",
    "TypeMismatchError",
    "UnsupportedValueTypeError",
    "add",
    "add_if_not_exists",
    "add_or_update",
    "add_range",
    "as_read_only",
    "combine_with",
    "deep_copy",
    "filter_map",
    "find_keys_for_value",
    "for_each",
    "from_json",
    "get_keys",
    "get_or_add",
    "get_or_add_value",
    "get_value_or_default",
    "get_values",
    "has_duplicate_values",
    "increment",
    "invert",
    "map_values",
    "merge",
    "remove_where",
    "sort_by_key",
    "sort_by_value",
    "to_concurrent_map",
    "to_json",
    "to_list",
    "to_query_string",
    "transform_values",
    "try_add",
]
