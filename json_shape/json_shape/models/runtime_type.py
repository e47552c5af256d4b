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

"""Runtime representation of a schema shape.

A runtime type is a closed, recursive set of immutable nodes:

    - NullType, BooleanType, NumberType, StringType: primitive kinds
    - LiteralType: one concrete JSON value
    - OptionalType: the element, or an absent field
    - ArrayType: homogeneous sequence
    - TupleType: fixed-length sequence, one runtime type per position
    - UnionType: any of its members
    - ObjectType: keyed record checked field by field

Nodes never reference their parents, so a sub-tree may be shared by any
number of parents. Nodes compare by value. LiteralType and ObjectType are
not hashable, so hash() raises TypeError for any tree containing one;
memoize by identity (id()) instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union


class _Absent:
    """Marker for a field that is not present at all (distinct from None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Absent, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


ABSENT = _Absent()


@dataclass(frozen=True)
class NullType:
    pass


@dataclass(frozen=True)
class BooleanType:
    pass


@dataclass(frozen=True)
class NumberType:
    pass


@dataclass(frozen=True)
class StringType:
    pass


@dataclass(frozen=True)
class LiteralType:
    value: Any

    __hash__ = None  # value may be a list or dict


@dataclass(frozen=True)
class OptionalType:
    element: "RuntimeType"


@dataclass(frozen=True)
class ArrayType:
    element: "RuntimeType"


@dataclass(frozen=True)
class TupleType:
    elements: Tuple["RuntimeType", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class UnionType:
    elements: Tuple["RuntimeType", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class ObjectType:
    key_values: Mapping[str, "RuntimeType"]

    __hash__ = None

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot leak in.
        object.__setattr__(self, "key_values", MappingProxyType(dict(self.key_values)))


RuntimeType = Union[
    NullType,
    BooleanType,
    NumberType,
    StringType,
    LiteralType,
    OptionalType,
    ArrayType,
    TupleType,
    UnionType,
    ObjectType,
]

RUNTIME_TYPES = (
    NullType,
    BooleanType,
    NumberType,
    StringType,
    LiteralType,
    OptionalType,
    ArrayType,
    TupleType,
    UnionType,
    ObjectType,
)

NULL = NullType()
BOOLEAN = BooleanType()
NUMBER = NumberType()
STRING = StringType()


def is_runtime_type(candidate: Any) -> bool:
    return isinstance(candidate, RUNTIME_TYPES)


def accepts_absent(runtime_type: RuntimeType) -> bool:
    """Return True if an absent field satisfies ``runtime_type``."""
    if isinstance(runtime_type, OptionalType):
        return True
    if isinstance(runtime_type, UnionType):
        return any(accepts_absent(member) for member in runtime_type.elements)
    return False
