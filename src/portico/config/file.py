# Copyright 2026 Firefly Software Solutions Inc.
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
"""Top-level server configuration file.

Reads ``server.toml`` (or an explicit path), parses it, and validates the
result into an immutable :class:`ConfigFile`. TOML is the default format;
files ending in ``.yaml`` or ``.yml`` are parsed as YAML against the same
schema.

Example ``server.toml``::

    host = "192.168.0.1"
    port = 7878
    verbose = true
    root_dir = "~/Desktop"

    [tls]
    cert = "cert.pem"
    key = "key.pem"
    key_algorithm = "rsa"

    [cors]
    allow_origin = "https://example.com"
    allow_methods = ["GET", "POST"]
    max_age = 5400
"""

from __future__ import annotations

import logging
import tomllib
from ipaddress import IPv4Address, IPv6Address
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, StrictBool, StrictInt, ValidationError, field_validator

from portico.config.cors import CorsConfig, CorsConfigFile
from portico.config.tls import TlsConfigFile
from portico.kernel.exceptions import PARSE_ERROR_PREFIX, ConfigFileReadException, ConfigParseException

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("server.toml")
_YAML_SUFFIXES = (".yaml", ".yml")


class ConfigFile(BaseModel):
    """Validated server configuration.

    ``host``, ``port`` and ``verbose`` are required. ``root_dir``, ``tls`` and
    ``cors`` stay ``None`` when their keys are absent. Unknown keys are
    ignored.
    """

    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress
    port: StrictInt = Field(ge=0, le=65535)
    verbose: StrictBool
    root_dir: Path | None = None
    tls: TlsConfigFile | None = None
    cors: CorsConfigFile | None = None

    @field_validator("host", mode="before")
    @classmethod
    def host_is_literal(cls, value: Any) -> Any:
        if not isinstance(value, (str, IPv4Address, IPv6Address)):
            raise ValueError(f"expected an IP address string, got {type(value).__name__}")
        return value

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> ConfigFile:
        """Read and parse the configuration file at *path*.

        *path* defaults to ``server.toml`` in the current working directory.
        A missing or unreadable file is an error; no defaults are substituted.

        Raises:
            ConfigFileReadException: If the file cannot be opened, read, or
                decoded as UTF-8.
            ConfigParseException: If the contents are malformed or do not
                match the schema.
        """
        file_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigFileReadException(
                f"Failed to read config file '{file_path}'. {exc}",
                path=str(file_path),
            ) from exc

        logger.debug("Read config file %s (%d characters)", file_path, len(content))

        if file_path.suffix.lower() in _YAML_SUFFIXES:
            return cls.parse_yaml(content)
        return cls.parse_toml(content)

    @classmethod
    def parse_toml(cls, content: str) -> ConfigFile:
        """Parse TOML text into a :class:`ConfigFile`."""
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            logger.warning("Config file is not valid TOML: %s", exc)
            raise ConfigParseException(f"{PARSE_ERROR_PREFIX}{exc}") from exc
        return cls._from_mapping(data)

    @classmethod
    def parse_yaml(cls, content: str) -> ConfigFile:
        """Parse YAML text into a :class:`ConfigFile`."""
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            logger.warning("Config file is not valid YAML: %s", exc)
            raise ConfigParseException(f"{PARSE_ERROR_PREFIX}{exc}") from exc
        return cls._from_mapping(data)

    @classmethod
    def _from_mapping(cls, data: Any) -> ConfigFile:
        try:
            config = cls.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors()
            fields = [_location(error) for error in errors]
            logger.warning("Config file failed validation: %s", ", ".join(fields))
            message = "; ".join(_describe(error) for error in errors)
            raise ConfigParseException(f"{PARSE_ERROR_PREFIX}{message}", fields=fields) from exc

        # Reject a [cors] table that cannot be converted before the server starts.
        if config.cors is not None:
            config.cors.check()

        logger.debug(
            "Parsed config: host=%s port=%d tls=%s cors=%s",
            config.host,
            config.port,
            config.tls is not None,
            config.cors is not None,
        )
        return config

    @property
    def address(self) -> tuple[str, int]:
        """The ``(host, port)`` pair to bind."""
        return str(self.host), self.port

    def cors_config(self) -> CorsConfig | None:
        """Return the converted ``[cors]`` table, or ``None`` when it is absent."""
        if self.cors is None:
            return None
        return CorsConfig.from_file_config(self.cors)


def _location(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error["loc"]) or "<document>"


def _describe(error: Mapping[str, Any]) -> str:
    if error["type"] == "missing":
        return f"missing field `{_location(error)}`"
    return f"invalid value for field `{_location(error)}`: {error['msg']}"

