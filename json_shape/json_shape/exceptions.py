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

"""Custom exceptions for json_shape.

Validation mismatches are never raised; they surface as ``False`` from
``is_valid`` or as ``ABSENT`` from ``validate``. The exceptions below cover
the remaining failure kinds.
"""

from typing import Optional


class JsonShapeError(Exception):
    """Base exception for json_shape related errors."""
    pass


class JsonDecodeError(JsonShapeError, ValueError):
    """Exception raised when text cannot be decoded as JSON at all."""

    def __init__(self, message: str, doc: str = "", pos: int = 0):
        self.doc = doc
        self.pos = pos
        super().__init__(message)


class SchemaDefinitionError(JsonShapeError):
    """Exception raised for malformed schemas or schema definition documents."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (at '{path}')"
        elif path is not None:
            message = f"{message} (at document root)"
        super().__init__(message)


class InvalidConfigError(JsonShapeError):
    """Exception raised when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")
