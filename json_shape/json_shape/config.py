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

"""Configuration management for json_shape."""

import os
import sys
import logging
from dataclasses import dataclass

from .exceptions import InvalidConfigError

_ENV_PREFIX = "JSON_SHAPE_"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfigError(f"{_ENV_PREFIX + name} must be an integer, got '{raw}'")


@dataclass
class ShapeConfig:
    """Configuration class for schema definition loading and logging."""
    log_level: str = "WARNING"
    definition_depth_limit: int = 64
    cache_enabled: bool = True
    max_cache_size: int = 128

    @classmethod
    def from_env(cls) -> 'ShapeConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(_ENV_PREFIX + 'LOG_LEVEL', 'WARNING'),
            definition_depth_limit=_env_int('DEFINITION_DEPTH_LIMIT', 64),
            cache_enabled=os.getenv(_ENV_PREFIX + 'CACHE_ENABLED', 'true').lower() == 'true',
            max_cache_size=_env_int('MAX_CACHE_SIZE', 128),
        )

    def set_logging(self) -> logging.Logger:
        """Attach a stderr handler to the package logger at the configured level."""
        level = getattr(logging, self.log_level.upper(), None)
        if not isinstance(level, int):
            raise InvalidConfigError(f"Unknown log level '{self.log_level}'")

        logger = logging.getLogger('json_shape')
        for handler in list(logger.handlers):
            if getattr(handler, '_json_shape_stream', False):
                logger.removeHandler(handler)

        handler = logging.StreamHandler(stream=sys.stderr)
        handler._json_shape_stream = True
        handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(handler)
        logger.setLevel(level)
        return logger


# Global configuration instance
shape_config = ShapeConfig.from_env()
