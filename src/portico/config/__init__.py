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
"""Server configuration: typed CORS model, TLS section and file loader."""

from portico.config.cors import CorsConfig, CorsConfigBuilder, CorsConfigFile
from portico.config.file import DEFAULT_CONFIG_PATH, ConfigFile
from portico.config.tls import PrivateKeyAlgorithm, TlsConfigFile

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigFile",
    "CorsConfig",
    "CorsConfigBuilder",
    "CorsConfigFile",
    "PrivateKeyAlgorithm",
    "TlsConfigFile",
]
