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

"""Export runtime types as JSON Schema (draft 2020-12) documents.

The exported document accepts the same decoded JSON values as
:func:`~json_shape.schema.validator.is_valid`. Absence has no JSON Schema
counterpart outside of object properties, so an optional schema renders
as its element, and an object property whose schema accepts absence is
left out of ``required``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from ..exceptions import SchemaDefinitionError
from ..models.runtime_type import (
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
    accepts_absent,
)
from ..utils.json_pointer import JsonPointer, join_path
from ..utils.json_values import to_json_value
from .builders import Schema
from .validator import as_runtime_type

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_PRIMITIVE_NAMES = {
    NullType: "null",
    BooleanType: "boolean",
    NumberType: "number",
    StringType: "string",
}


def to_json_schema(schema: Union[Schema[Any], RuntimeType]) -> Dict[str, Any]:
    """Render ``schema`` as a JSON Schema document.

    Raises:
        SchemaDefinitionError: If a literal holds a value with no JSON
            form, or the rendered document fails the metaschema check.
    """
    document: Dict[str, Any] = {"$schema": JSON_SCHEMA_DIALECT}
    document.update(_render(as_runtime_type(schema), path=""))
    try:
        Draft202012Validator.check_schema(document)
    except SchemaError as e:
        raise SchemaDefinitionError(f"Exported JSON Schema is invalid: {e.message}") from e
    return document


def _render(runtime_type: RuntimeType, *, path: JsonPointer) -> Dict[str, Any]:
    primitive = _PRIMITIVE_NAMES.get(type(runtime_type))
    if primitive is not None:
        return {"type": primitive}

    if isinstance(runtime_type, LiteralType):
        return {"const": to_json_value(runtime_type.value, path=path)}

    if isinstance(runtime_type, OptionalType):
        return _render(runtime_type.element, path=path)

    if isinstance(runtime_type, ArrayType):
        return {"type": "array", "items": _render(runtime_type.element, path=join_path(path, "items"))}

    if isinstance(runtime_type, TupleType):
        count = len(runtime_type.elements)
        if not count:
            # prefixItems must be non-empty
            return {"type": "array", "maxItems": 0}
        return {
            "type": "array",
            "prefixItems": [
                _render(element, path=join_path(path, idx)) for idx, element in enumerate(runtime_type.elements)
            ],
            "minItems": count,
            "maxItems": count,
        }

    if isinstance(runtime_type, UnionType):
        if not runtime_type.elements:
            return {"not": {}}
        return {
            "anyOf": [
                _render(member, path=join_path(path, idx)) for idx, member in enumerate(runtime_type.elements)
            ]
        }

    if isinstance(runtime_type, ObjectType):
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for key, field_type in runtime_type.key_values.items():
            properties[key] = _render(field_type, path=join_path(path, key))
            if not accepts_absent(field_type):
                required.append(key)
        rendered: Dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            rendered["required"] = required
        return rendered

    raise SchemaDefinitionError(f"Unknown runtime type: {runtime_type!r}", path=path)

