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

"""Helpers for classifying decoded JSON values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..exceptions import SchemaDefinitionError
from .json_pointer import JsonPointer, join_path


def is_number(value: Any) -> bool:
    # bool subclasses int but is its own JSON kind
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def json_kind(value: Any) -> Optional[str]:
    """Return the JSON kind name of ``value`` or None if it has no JSON form."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_sequence(value):
        return "array"
    if is_record(value):
        return "object"
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality between two JSON-like values.

    Both sides must be of the same JSON kind; ``True`` never equals ``1``
    and ``[1]`` never equals ``{"0": 1}``. Numbers compare by value, so
    ``1`` equals ``1.0``. Values without a JSON kind fall back to ``==``.
    """
    kind = json_kind(left)
    if kind != json_kind(right):
        return False

    if kind == "array":
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if kind == "object":
        if set(left.keys()) != set(right.keys()):
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    return left == right


def to_json_value(value: Any, *, path: JsonPointer = "") -> Any:
    """Return ``value`` with tuples as lists and mappings as plain dicts.

    Raises:
        SchemaDefinitionError: If ``value`` (or anything nested in it) has
            no JSON form, or a mapping has a non-string key.
    """
    kind = json_kind(value)
    if kind is None:
        raise SchemaDefinitionError(f"Value of type {type(value).__name__} has no JSON form", path=path)
    if kind == "array":
        return [to_json_value(item, path=join_path(path, idx)) for idx, item in enumerate(value)]
    if kind == "object":
        converted = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise SchemaDefinitionError(f"Object keys must be strings, got {key!r}", path=path)
            converted[key] = to_json_value(item, path=join_path(path, key))
        return converted
    return value
