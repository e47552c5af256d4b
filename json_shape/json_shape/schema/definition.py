# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Schema definition documents.

A definition document is a JSON-compatible description of a schema, so
schemas can be kept in YAML or JSON files next to the data they describe::

    object:
      name: string
      age: number
      nickname: {optional: string}
      tags: {array: string}
      method: {union: [{literal: GET}, {literal: POST}]}
      position: {tuple: [number, number]}
      parent: {union: [string, "null"]}

Primitive kinds are written as the strings ``null``, ``boolean``,
``number`` and ``string`` (a bare YAML ``null`` is accepted too).
Composite kinds are single-key mappings: ``literal``, ``optional``,
``array``, ``tuple``, ``union`` and ``object``.

Unlike the builders, definitions are untrusted input and are checked
strictly. Every problem is reported as a
:class:`~json_shape.exceptions.SchemaDefinitionError` whose ``path`` is a
JSON Pointer into the document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import shape_config
from ..exceptions import SchemaDefinitionError
from ..models.runtime_type import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    ArrayType,
    BooleanType,
    LiteralType,
    NullType,
    NumberType,
    ObjectType,
    OptionalType,
    RuntimeType,
    StringType,
    TupleType,
    UnionType,
)
from ..utils.json_pointer import JsonPointer, join_path
from ..utils.json_values import to_json_value
from .builders import Schema
from .validator import as_runtime_type

logger = logging.getLogger(__name__)

_PRIMITIVES: Dict[str, RuntimeType] = {
    "null": NULL,
    "boolean": BOOLEAN,
    "number": NUMBER,
    "string": STRING,
}

_PRIMITIVE_NAMES = {
    NullType: "null",
    BooleanType: "boolean",
    NumberType: "number",
    StringType: "string",
}

COMPOSITE_TAGS = ("literal", "optional", "array", "tuple", "union", "object")

# Parsed definitions keyed by (source text, depth limit)
_DEFINITION_CACHE: Dict[Tuple[str, int], Schema[Any]] = {}


def from_definition(document: Any, *, depth_limit: Optional[int] = None) -> Schema[Any]:
    """Build a schema from a decoded definition document.

    Args:
        document: Decoded definition (strings, lists and mappings)
        depth_limit: Maximum nesting depth; defaults to the configured
            ``definition_depth_limit``

    Raises:
        SchemaDefinitionError: If the document is not a valid definition.
    """
    limit = shape_config.definition_depth_limit if depth_limit is None else depth_limit
    return Schema(_build(document, path="", depth=1, limit=limit))


def _build(node: Any, *, path: JsonPointer, depth: int, limit: int) -> RuntimeType:
    if depth > limit:
        raise SchemaDefinitionError(f"Definition nesting exceeds the depth limit of {limit}", path=path)

    if node is None:
        return NULL

    if isinstance(node, str):
        primitive = _PRIMITIVES.get(node)
        if primitive is None:
            raise SchemaDefinitionError(
                f"Unknown type name '{node}'. Expected one of: {', '.join(_PRIMITIVES)}", path=path
            )
        return primitive

    if not isinstance(node, Mapping):
        raise SchemaDefinitionError(
            f"Invalid definition node of type {type(node).__name__}: expected a type name or a mapping",
            path=path,
        )

    if len(node) != 1:
        raise SchemaDefinitionError(
            f"Definition mapping must have exactly one key out of: {', '.join(COMPOSITE_TAGS)}", path=path
        )

    ((tag, payload),) = node.items()
    payload_path = join_path(path, str(tag))

    def child(item: Any, item_path: JsonPointer) -> RuntimeType:
        return _build(item, path=item_path, depth=depth + 1, limit=limit)

    if tag == "literal":
        return LiteralType(to_json_value(payload, path=payload_path))

    if tag == "optional":
        return OptionalType(child(payload, payload_path))

    if tag == "array":
        return ArrayType(child(payload, payload_path))

    if tag == "tuple":
        items = _expect_list(payload, path=payload_path, tag=tag)
        if not items:
            raise SchemaDefinitionError("Tuple must have at least one element", path=payload_path)
        return TupleType(tuple(child(item, join_path(payload_path, idx)) for idx, item in enumerate(items)))

    if tag == "union":
        items = _expect_list(payload, path=payload_path, tag=tag)
        if len(items) < 2:
            raise SchemaDefinitionError("Union must have at least two members", path=payload_path)
        return UnionType(tuple(child(item, join_path(payload_path, idx)) for idx, item in enumerate(items)))

    if tag == "object":
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise SchemaDefinitionError("'object' must map field names to definitions", path=payload_path)
        key_values: Dict[str, RuntimeType] = {}
        for key, field_node in payload.items():
            if not isinstance(key, str):
                raise SchemaDefinitionError(f"Field name must be a string, got {key!r}", path=payload_path)
            key_values[key] = child(field_node, join_path(payload_path, key))
        return ObjectType(key_values)

    raise SchemaDefinitionError(
        f"Unknown definition key '{tag}'. Expected one of: {', '.join(COMPOSITE_TAGS)}", path=path
    )


def _expect_list(payload: Any, *, path: JsonPointer, tag: str) -> list:
    if not isinstance(payload, (list, tuple)):
        raise SchemaDefinitionError(f"'{tag}' must be a list of definitions", path=path)
    return list(payload)


def to_definition(schema: Union[Schema[Any], RuntimeType]) -> Any:
    """Describe ``schema`` as a definition document (inverse of :func:`from_definition`).

    Schemas built in code may hold unions or tuples that the strict loader
    would refuse (for example a one-member union); those are written out
    as they are.
    """
    return _describe(as_runtime_type(schema), path="")


def _describe(runtime_type: RuntimeType, *, path: JsonPointer) -> Any:
    primitive = _PRIMITIVE_NAMES.get(type(runtime_type))
    if primitive is not None:
        return primitive
    if isinstance(runtime_type, LiteralType):
        return {"literal": to_json_value(runtime_type.value, path=join_path(path, "literal"))}
    if isinstance(runtime_type, OptionalType):
        return {"optional": _describe(runtime_type.element, path=join_path(path, "optional"))}
    if isinstance(runtime_type, ArrayType):
        return {"array": _describe(runtime_type.element, path=join_path(path, "array"))}
    if isinstance(runtime_type, TupleType):
        base = join_path(path, "tuple")
        return {"tuple": [_describe(e, path=join_path(base, i)) for i, e in enumerate(runtime_type.elements)]}
    if isinstance(runtime_type, UnionType):
        base = join_path(path, "union")
        return {"union": [_describe(e, path=join_path(base, i)) for i, e in enumerate(runtime_type.elements)]}
    if isinstance(runtime_type, ObjectType):
        base = join_path(path, "object")
        return {
            "object": {
                key: _describe(field_type, path=join_path(base, key))
                for key, field_type in runtime_type.key_values.items()
            }
        }
    raise SchemaDefinitionError(f"Unknown runtime type: {runtime_type!r}", path=path)


def load_definition(text: str) -> Schema[Any]:
    """Parse a YAML (or JSON) definition document and build its schema.

    Raises:
        SchemaDefinitionError: If the text is not YAML or not a valid definition.
    """
    cache_key = (text, shape_config.definition_depth_limit)
    if shape_config.cache_enabled and cache_key in _DEFINITION_CACHE:
        logger.debug("Loading schema definition from cache")
        return _DEFINITION_CACHE[cache_key]

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaDefinitionError(f"Error parsing schema definition: {e}") from e

    schema = from_definition(document, depth_limit=cache_key[1])

    if shape_config.cache_enabled and shape_config.max_cache_size > 0:
        while len(_DEFINITION_CACHE) >= shape_config.max_cache_size:
            # Evict the oldest entry
            _DEFINITION_CACHE.pop(next(iter(_DEFINITION_CACHE)))
        _DEFINITION_CACHE[cache_key] = schema
    return schema


def dump_definition(schema: Union[Schema[Any], RuntimeType]) -> str:
    """Render ``schema`` as YAML definition text."""
    return yaml.safe_dump(to_definition(schema), sort_keys=False, default_flow_style=False)


def clear_cache() -> None:
    """Clear the definition cache. Useful for testing."""
    _DEFINITION_CACHE.clear()
