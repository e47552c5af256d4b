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

"""Schema construction and validation.

This package depends only on the runtime type models, so validation stays
independent of how a schema was produced (builders or definition documents).
"""

from .builders import (
    Schema,
    array,
    boolean,
    literal,
    null,
    number,
    object_,
    optional,
    string,
    tuple_,
    union,
)
from .definition import dump_definition, from_definition, load_definition, to_definition
from .json_schema import to_json_schema
from .parsing import decode_json, validate, validating_parse
from .validator import is_valid
