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

"""JSON Pointer (RFC 6901) path building."""

from typing import Optional, Union

JsonPointer = str


def escape_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: Union[str, int]) -> JsonPointer:
    token = escape_token(str(token))
    if not base:
        return f"/{token}"
    return f"{base}/{token}"
