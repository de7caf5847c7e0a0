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
"""Unified exception hierarchy for Portico.

Every error raised while loading server configuration inherits from
PorticoException, so callers can catch one type at the process entry point
and decide whether to abort startup.

Categories:
- ValidationException: configuration text that is malformed or has the wrong shape
- InfrastructureException: the configuration file could not be read
"""

from __future__ import annotations

PARSE_ERROR_PREFIX = "Failed to parse config from file. "


# =============================================================================
# Base Exception
# =============================================================================


class PorticoException(Exception):
    """Base exception for all Portico errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONFIG_PARSE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(PorticoException):
    """Input validation failures."""


class ConfigParseException(ValidationException):
    """Configuration text is malformed, misses a required field, or has a wrong type.

    ``context["fields"]`` lists the offending field locations when the
    underlying parser reports them.

    For schema errors the location is the dotted field path (e.g.
    ``tls.key``) rather than a line and column. Syntax errors keep the
    decoder's line and column text.
    """

    def __init__(
        self,
        message: str,
        fields: list[str] | None = None,
        context: dict | None = None,
    ) -> None:
        merged = dict(context or {})
        merged["fields"] = list(fields or [])
        super().__init__(message, code="CONFIG_PARSE", context=merged)

    @property
    def fields(self) -> list[str]:
        return self.context["fields"]


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PorticoException):
    """Infrastructure failures: filesystem and I/O."""


class ConfigFileReadException(InfrastructureException):
    """The configuration file could not be opened, read, or decoded as UTF-8."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message, code="CONFIG_READ", context={"path": path})

    @property
    def path(self) -> str:
        return self.context["path"]
