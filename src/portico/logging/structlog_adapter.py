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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from portico.config.file import ConfigFile


class StructlogAdapter:
    """Default logging adapter backed by structlog.

    Module loggers created with ``logging.getLogger(__name__)`` are rendered
    through the same processors once :meth:`configure` has run.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"

    def configure(self, level: str = "INFO", fmt: str = "console") -> None:
        """Configure structlog and stdlib logging.

        Args:
            level: Root log level name, e.g. ``"DEBUG"``.
            fmt: ``"console"`` for human-readable output, ``"json"`` for one
                JSON object per line.
        """
        self._root_level = level.upper()
        self._format = fmt.lower()
        self._setup_structlog()

    def configure_for(self, config: ConfigFile) -> None:
        """Log at DEBUG when the server config is verbose, INFO otherwise."""
        self.configure(level="DEBUG" if config.verbose else "INFO", fmt=self._format)

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def _setup_structlog(self) -> None:
        """Configure structlog processors and route stdlib records through them."""
        log_level = getattr(logging, self._root_level, logging.INFO)

        shared_processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        renderer: structlog.types.Processor
        if self._format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared_processors],
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )

        logging.basicConfig(
            handlers=[handler],
            level=log_level,
            force=True,
        )
