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

"""Schema builders.

Each builder returns a :class:`Schema` wrapping a freshly built runtime
type. Composite builders reference the runtime types of their arguments
directly; nothing is deep-copied and nothing is ever mutated, so a schema
can safely be reused inside as many parents as needed::

    point = tuple_(number(), number())
    shape = object_({
        "name": string(),
        "closed": optional(boolean()),
        "points": array(point),
        "kind": union(literal("polygon"), literal("polyline")),
    })

Arity and argument types are not checked at runtime. ``union()`` with a
single member behaves like that member and ``union()`` with no members
matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar, Union, overload

from ..models.runtime_type import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    ArrayType,
    LiteralType,
    ObjectType,
    OptionalType,
    RuntimeType,
    TupleType,
    UnionType,
)

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
L = TypeVar("L")


@dataclass(frozen=True)
class Schema(Generic[T]):
    """A runtime type tagged with the Python type of the values it accepts.

    The type parameter only exists for static checkers; at runtime a
    schema is nothing more than its ``runtime_type``.
    """

    runtime_type: RuntimeType

    def is_valid(self, value: Any) -> bool:
        from .validator import is_valid

        return is_valid(self.runtime_type, value)

    def validate(self, value: Any) -> T:
        from .parsing import validate

        return validate(self, value)

    def parse(self, text: Union[str, bytes, bytearray]) -> T:
        from .parsing import validating_parse

        return validating_parse(self, text)


_NULL_SCHEMA: Schema[None] = Schema(NULL)
_BOOLEAN_SCHEMA: Schema[bool] = Schema(BOOLEAN)
_NUMBER_SCHEMA: Schema[Union[int, float]] = Schema(NUMBER)
_STRING_SCHEMA: Schema[str] = Schema(STRING)


def null() -> Schema[None]:
    return _NULL_SCHEMA


def boolean() -> Schema[bool]:
    return _BOOLEAN_SCHEMA


def number() -> Schema[Union[int, float]]:
    return _NUMBER_SCHEMA


def string() -> Schema[str]:
    return _STRING_SCHEMA


def literal(value: L) -> Schema[L]:
    """Match only values structurally equal to ``value``."""
    return Schema(LiteralType(value))


def optional(element: Schema[T]) -> Schema[Optional[T]]:
    """Match an absent field, or a present value matching ``element``.

    A present ``None`` is not "absent": ``optional(string())`` rejects it.
    """
    return Schema(OptionalType(element.runtime_type))


def array(element: Schema[T]) -> Schema[List[T]]:
    return Schema(ArrayType(element.runtime_type))


@overload
def tuple_(e1: Schema[T1]) -> Schema[Tuple[T1]]: ...
@overload
def tuple_(e1: Schema[T1], e2: Schema[T2]) -> Schema[Tuple[T1, T2]]: ...
@overload
def tuple_(e1: Schema[T1], e2: Schema[T2], e3: Schema[T3]) -> Schema[Tuple[T1, T2, T3]]: ...
@overload
def tuple_(*elements: Schema[Any]) -> Schema[Tuple[Any, ...]]: ...


def tuple_(*elements):
    """Match a sequence of exactly ``len(elements)`` items, position by position."""
    return Schema(TupleType(tuple(e.runtime_type for e in elements)))


@overload
def union(e1: Schema[T1], e2: Schema[T2]) -> Schema[Union[T1, T2]]: ...
@overload
def union(e1: Schema[T1], e2: Schema[T2], e3: Schema[T3]) -> Schema[Union[T1, T2, T3]]: ...
@overload
def union(
    e1: Schema[T1], e2: Schema[T2], e3: Schema[T3], e4: Schema[T4]
) -> Schema[Union[T1, T2, T3, T4]]: ...
@overload
def union(*elements: Schema[Any]) -> Schema[Any]: ...


def union(*elements):
    """Match a value accepted by any of ``elements``. Member order is kept."""
    return Schema(UnionType(tuple(e.runtime_type for e in elements)))


def object_(
    fields: Optional[Mapping[str, Schema[Any]]] = None,
    **named_fields: Schema[Any],
) -> Schema[Dict[str, Any]]:
    """Match a mapping whose listed fields match their schemas.

    Fields can be given as a mapping, as keyword arguments, or both (keyword
    arguments win on collision). Keys not listed are ignored during
    validation and kept as they are.
    """
    merged: Dict[str, Schema[Any]] = dict(fields or {})
    merged.update(named_fields)
    return Schema(ObjectType({key: value.runtime_type for key, value in merged.items()}))
