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

"""Recursive structural validation of decoded values against runtime types."""

from __future__ import annotations

from typing import Any, Union

from ..exceptions import SchemaDefinitionError
from ..models.runtime_type import (
    ABSENT,
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
    is_runtime_type,
)
from ..utils.json_values import is_number, is_record, is_sequence, json_equal
from .builders import Schema


def as_runtime_type(schema: Union[Schema[Any], RuntimeType]) -> RuntimeType:
    if isinstance(schema, Schema):
        return schema.runtime_type
    if not is_runtime_type(schema):
        raise SchemaDefinitionError(f"Expected a Schema or runtime type, got {type(schema).__name__}")
    return schema


def is_valid(schema: Union[Schema[Any], RuntimeType], value: Any) -> bool:
    """Return True if ``value`` conforms to ``schema``.

    ``schema`` may be a :class:`Schema` or a bare runtime type. A mismatch
    of any kind, including a value of the wrong kind at the top level,
    yields False; no exception is raised for any ``value``.

    Raises:
        SchemaDefinitionError: If ``schema`` is not a runtime type at all.
    """
    return _is_valid(as_runtime_type(schema), value)


def _is_valid(runtime_type: RuntimeType, value: Any) -> bool:
    if isinstance(runtime_type, NullType):
        return value is None

    if isinstance(runtime_type, BooleanType):
        return isinstance(value, bool)

    if isinstance(runtime_type, NumberType):
        return is_number(value)

    if isinstance(runtime_type, StringType):
        return isinstance(value, str)

    if isinstance(runtime_type, LiteralType):
        return json_equal(value, runtime_type.value)

    if isinstance(runtime_type, OptionalType):
        return value is ABSENT or _is_valid(runtime_type.element, value)

    if isinstance(runtime_type, ArrayType):
        if not is_sequence(value):
            return False
        return all(_is_valid(runtime_type.element, item) for item in value)

    if isinstance(runtime_type, TupleType):
        if not is_sequence(value) or len(value) != len(runtime_type.elements):
            return False
        return all(_is_valid(element, item) for element, item in zip(runtime_type.elements, value))

    if isinstance(runtime_type, UnionType):
        return any(_is_valid(member, value) for member in runtime_type.elements)

    if isinstance(runtime_type, ObjectType):
        if not is_record(value):
            return False
        # Only declared keys are inspected; extra keys never fail.
        return all(
            _is_valid(field_type, value.get(key, ABSENT))
            for key, field_type in runtime_type.key_values.items()
        )

    raise SchemaDefinitionError(f"Unknown runtime type: {runtime_type!r}")
