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
"""CORS (Cross-Origin Resource Sharing) configuration for the HTTP/S server.

:class:`CorsConfig` holds the values a consuming server uses to emit the
following headers:

- ``Access-Control-Allow-Credentials``
- ``Access-Control-Allow-Headers``
- ``Access-Control-Allow-Methods``
- ``Access-Control-Allow-Origin``
- ``Access-Control-Expose-Headers``
- ``Access-Control-Max-Age``
- ``Access-Control-Request-Headers``
- ``Access-Control-Request-Method``

A field set to ``None`` means the header is omitted entirely. An empty tuple
still emits the header, with no values.

Example::

    cors = (
        CorsConfig.builder()
        .allow_origin("https://example.com")
        .allow_methods(["GET", "POST"])
        .allow_credentials()
        .max_age(timedelta(hours=1))
        .build()
    )
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictStr

from portico.kernel.exceptions import PARSE_ERROR_PREFIX, ConfigParseException

_ALLOW_ALL_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD")
_ALLOW_ALL_HEADERS = ("Origin", "Content-Length", "Content-Type")
_ALLOW_ALL_MAX_AGE = timedelta(seconds=43200)


@dataclass(frozen=True)
class CorsConfig:
    """Immutable CORS policy.

    Build instances with :meth:`builder` or :meth:`allow_all`. Sequences are
    ordered: two configs listing the same headers in a different order are
    not equal.

    Attributes:
        allow_credentials: Whether to send ``Access-Control-Allow-Credentials: true``.
            The only valid header value is ``true``; when ``False`` the header
            is omitted.
        allow_headers: Headers the actual request may use, answering a
            preflight's ``Access-Control-Request-Headers``.
        allow_methods: Methods allowed when answering a preflight request.
        allow_origin: The single origin (or ``"*"``) the response may be
            shared with.
        expose_headers: Response headers made readable to scripts beyond the
            CORS-safelisted ones.
        max_age: How long a preflight result may be cached.
        request_headers: Mirror of a preflight's
            ``Access-Control-Request-Headers``.
        request_method: Mirror of a preflight's ``Access-Control-Request-Method``.
    """

    allow_credentials: bool = False
    allow_headers: tuple[str, ...] | None = None
    allow_methods: tuple[str, ...] | None = None
    allow_origin: str | None = None
    expose_headers: tuple[str, ...] | None = None
    max_age: timedelta | None = None
    request_headers: tuple[str, ...] | None = None
    request_method: str | None = None

    @classmethod
    def builder(cls) -> CorsConfigBuilder:
        """Return a builder seeded with every field at its default."""
        return CorsConfigBuilder()

    @classmethod
    def allow_all(cls) -> CorsConfig:
        """Permissive preset: any origin, common methods and headers, 12h max age."""
        return cls(
            allow_origin="*",
            allow_methods=_ALLOW_ALL_METHODS,
            allow_headers=_ALLOW_ALL_HEADERS,
            allow_credentials=False,
            max_age=_ALLOW_ALL_MAX_AGE,
        )

    @classmethod
    def from_file_config(cls, file_config: CorsConfigFile) -> CorsConfig:
        """Convert the ``[cors]`` table into a :class:`CorsConfig`.

        Only fields present in *file_config* are applied. ``allow_credentials``
        is applied only when it is ``True``. ``max_age`` seconds keep their
        fractional part.

        Raises:
            ConfigParseException: If a field fails :meth:`CorsConfigFile.check`.
        """
        file_config.check()

        builder = cls.builder()

        if file_config.allow_credentials:
            builder = builder.allow_credentials()

        if file_config.allow_headers is not None:
            builder = builder.allow_headers(file_config.allow_headers)

        if file_config.allow_methods is not None:
            builder = builder.allow_methods(file_config.allow_methods)

        if file_config.allow_origin is not None:
            builder = builder.allow_origin(file_config.allow_origin)

        if file_config.expose_headers is not None:
            builder = builder.expose_headers(file_config.expose_headers)

        if file_config.max_age is not None:
            builder = builder.max_age(timedelta(seconds=file_config.max_age))

        if file_config.request_headers is not None:
            builder = builder.request_headers(file_config.request_headers)

        if file_config.request_method is not None:
            builder = builder.request_method(file_config.request_method)

        return builder.build()


class CorsConfigBuilder:
    """Fluent builder for :class:`CorsConfig`.

    Every setter overwrites one field and returns the builder. Calling a
    setter twice keeps the last value. :meth:`build` cannot fail.
    """

    def __init__(self) -> None:
        self._config = CorsConfig()

    def _set(self, **changes: object) -> CorsConfigBuilder:
        self._config = dataclasses.replace(self._config, **changes)
        return self

    # ── Fluent setters ────────────────────────────────────────

    def allow_origin(self, origin: str) -> CorsConfigBuilder:
        return self._set(allow_origin=origin)

    def allow_methods(self, methods: Iterable[str]) -> CorsConfigBuilder:
        return self._set(allow_methods=tuple(methods))

    def allow_headers(self, headers: Iterable[str]) -> CorsConfigBuilder:
        return self._set(allow_headers=tuple(headers))

    def allow_credentials(self) -> CorsConfigBuilder:
        """Send ``Access-Control-Allow-Credentials: true``. There is no way to unset it."""
        return self._set(allow_credentials=True)

    def max_age(self, duration: timedelta) -> CorsConfigBuilder:
        return self._set(max_age=duration)

    def expose_headers(self, headers: Iterable[str]) -> CorsConfigBuilder:
        return self._set(expose_headers=tuple(headers))

    def request_headers(self, headers: Iterable[str]) -> CorsConfigBuilder:
        return self._set(request_headers=tuple(headers))

    def request_method(self, method: str) -> CorsConfigBuilder:
        return self._set(request_method=method)

    # ── Build ─────────────────────────────────────────────────

    def build(self) -> CorsConfig:
        return self._config


class CorsConfigFile(BaseModel):
    """The ``[cors]`` table as written in the configuration file.

    Every field except ``allow_credentials`` may be absent. ``max_age`` is a
    number of seconds, not a duration. This model is only a conversion
    source; servers consume :class:`CorsConfig`.
    """

    model_config = ConfigDict(frozen=True)

    allow_credentials: StrictBool = False
    allow_headers: list[StrictStr] | None = None
    allow_methods: list[StrictStr] | None = None
    allow_origin: StrictStr | None = None
    expose_headers: list[StrictStr] | None = None
    max_age: StrictFloat | None = None
    request_headers: list[StrictStr] | None = None
    request_method: StrictStr | None = None

    def check(self) -> None:
        """Field-level validation run before conversion.

        Only values with no duration equivalent are rejected. Negative
        ``max_age``, a wildcard origin combined with credentials, and
        arbitrary method or header names are accepted as written.

        Raises:
            ConfigParseException: If ``max_age`` is NaN, infinite, or out of
                ``timedelta`` range.
        """
        if self.max_age is None:
            return
        try:
            timedelta(seconds=self.max_age)
        except (OverflowError, ValueError) as exc:
            raise ConfigParseException(
                f"{PARSE_ERROR_PREFIX}invalid value for field `cors.max_age`: "
                f"{self.max_age!r} seconds cannot be represented as a duration",
                fields=["cors.max_age"],
            ) from exc

    def into_cors_config(self) -> CorsConfig:
        """Shorthand for :meth:`CorsConfig.from_file_config`."""
        return CorsConfig.from_file_config(self)
