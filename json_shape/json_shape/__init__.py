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

"""Describe the shape of JSON data once and check decoded values against it.

Usage:
    from json_shape import object_, string, number, optional, validating_parse, ABSENT

    person = object_({"name": string(), "age": number(), "nickname": optional(string())})

    value = validating_parse(person, '{"name": "jack", "age": 4}')
    if value is ABSENT:
        ...  # does not conform
"""

import logging

__version__ = "0.1.0"

from .exceptions import (
    InvalidConfigError,
    JsonDecodeError,
    JsonShapeError,
    SchemaDefinitionError,
)
from .models import (
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
)
from .schema import (
    Schema,
    array,
    boolean,
    decode_json,
    dump_definition,
    from_definition,
    is_valid,
    literal,
    load_definition,
    null,
    number,
    object_,
    optional,
    string,
    to_definition,
    to_json_schema,
    tuple_,
    union,
    validate,
    validating_parse,
)
from .utils.json_values import json_equal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "ArrayType",
    "BooleanType",
    "InvalidConfigError",
    "JsonDecodeError",
    "JsonShapeError",
    "LiteralType",
    "NullType",
    "NumberType",
    "ObjectType",
    "OptionalType",
    "RuntimeType",
    "Schema",
    "SchemaDefinitionError",
    "StringType",
    "TupleType",
    "UnionType",
    "array",
    "boolean",
    "decode_json",
    "dump_definition",
    "from_definition",
    "is_valid",
    "json_equal",
    "literal",
    "load_definition",
    "null",
    "number",
    "object_",
    "optional",
    "string",
    "to_definition",
    "to_json_schema",
    "tuple_",
    "union",
    "validate",
    "validating_parse",
]
