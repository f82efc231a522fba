"""Engine configuration.

Settings are kept in a small JSON file, for example::

    {
        "api_version": "v1",
        "subdomain": "myorg",
        "strict": false,
        "debug": true
    }

A missing file yields the defaults.
"""

# Bracket Graph
# Copyright (C) 2025  Bracket Graph developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bracketgraph.constants import API_VERSION
from bracketgraph.exceptions import InvalidConfigurationException
from bracketgraph.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class EngineConfig:
    """Configuration settings for a session.

    Attributes:
        api_version: Service API version, used as the route prefix
        subdomain: Default organization sub-domain for list/create calls
        strict: Raise on the first consistency error instead of collecting
        debug: Enable debug logging for the package
    """

    api_version: str = API_VERSION
    subdomain: str = ""
    strict: bool = False
    debug: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "api_version": self.api_version,
            "subdomain": self.subdomain,
            "strict": self.strict,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )

        unknown = set(data) - {"api_version", "subdomain", "strict", "debug"}
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", sorted(unknown))

        config = cls(
            api_version=data.get("api_version", API_VERSION),
            subdomain=data.get("subdomain") or "",
            strict=data.get("strict", False),
            debug=data.get("debug", False),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not isinstance(self.api_version, str) or not self.api_version:
            raise InvalidConfigurationException(
                f"api_version must be a non-empty string: {self.api_version!r}"
            )
        if not isinstance(self.subdomain, str):
            raise InvalidConfigurationException(
                f"subdomain must be a string: {self.subdomain!r}"
            )
        for name in ("strict", "debug"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigurationException(f"{name} must be true or false")


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """Load configuration from a JSON file.

    Args:
        path: Config file; ``None`` or a missing file gives the defaults

    Raises:
        InvalidConfigurationException: If the file is not valid JSON or
            holds invalid values
    """
    if path is None:
        return EngineConfig()

    path = Path(path).expanduser()
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return EngineConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(f"Invalid JSON in {path}: {e}") from e

    return EngineConfig.from_dict(data)
