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
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

import pytest

from portico.config.file import ConfigFile
from portico.logging.structlog_adapter import StructlogAdapter


def _config(verbose: bool) -> ConfigFile:
    return ConfigFile.parse_toml(f'host = "127.0.0.1"\nport = 8080\nverbose = {str(verbose).lower()}\n')


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure()

        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert logging.getLogger().level == logging.INFO

    def test_configure_reads_level(self):
        adapter = StructlogAdapter()
        adapter.configure(level="debug")

        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(fmt="JSON")
        assert adapter._format == "json"


class TestStructlogAdapterConfigureFor:
    def test_verbose_config_logs_debug(self):
        adapter = StructlogAdapter()
        adapter.configure_for(_config(verbose=True))

        assert adapter._root_level == "DEBUG"

    def test_quiet_config_logs_info(self):
        adapter = StructlogAdapter()
        adapter.configure_for(_config(verbose=False))

        assert adapter._root_level == "INFO"

    def test_configure_for_keeps_format(self):
        adapter = StructlogAdapter()
        adapter.configure(fmt="json")
        adapter.configure_for(_config(verbose=True))

        assert adapter._format == "json"


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure()
        logger = adapter.get_logger("portico.test")
        assert logger is not None
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_module_level(self):
        adapter = StructlogAdapter()
        adapter.configure()
        adapter.set_level("portico.config", "DEBUG")

        assert logging.getLogger("portico.config").level == logging.DEBUG


class TestStructlogAdapterOutput:
    def test_json_output_includes_stdlib_records(self, capsys: pytest.CaptureFixture[str]):
        adapter = StructlogAdapter()
        adapter.configure(level="DEBUG", fmt="json")

        _config(verbose=True)

        out = capsys.readouterr().out
        assert '"logger": "portico.config.file"' in out
        assert "Parsed config" in out
