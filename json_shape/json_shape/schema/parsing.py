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

"""Validating parse: decode JSON text and check it against a schema in one step."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar, Union

from ..exceptions import JsonDecodeError
from ..models.runtime_type import ABSENT
from .builders import Schema
from .validator import is_valid

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant '{name}'")


def decode_json(text: Union[str, bytes, bytearray]) -> Any:
    """Decode JSON text with the standard decoder.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not JSON and are rejected.

    Raises:
        JsonDecodeError: If ``text`` is not well-formed JSON or is nested
            deeper than the decoder can follow.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to decode JSON text: {e}")
        raise JsonDecodeError(f"Invalid JSON: {e.msg}", e.doc, e.pos) from e
    except ValueError as e:
        # UnicodeDecodeError and the rejected constants land here
        logger.debug(f"Failed to decode JSON text: {e}")
        raise JsonDecodeError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        logger.debug("Failed to decode JSON text: nesting too deep")
        raise JsonDecodeError("Invalid JSON: nesting too deep") from e


def validate(schema: Schema[T], value: Any) -> T:
    """Return ``value`` itself if it conforms to ``schema``, otherwise ``ABSENT``.

    The value is neither copied nor transformed; undeclared object fields
    are passed through untouched.
    """
    if is_valid(schema, value):
        return value
    logger.debug("Value rejected by schema")
    return ABSENT


def validating_parse(schema: Schema[T], text: Union[str, bytes, bytearray]) -> T:
    """Decode ``text`` and validate the result against ``schema``.

    Returns the decoded value, or ``ABSENT`` if it does not conform.

    Raises:
        JsonDecodeError: If ``text`` is not JSON. This is never turned
            into a validation failure.
    """
    return validate(schema, decode_json(text))
