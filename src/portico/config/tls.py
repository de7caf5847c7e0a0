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
"""TLS section of the server configuration file.

The loader only deserializes this table and hands it to the TLS subsystem
unchanged. Key and certificate paths are not opened here.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class PrivateKeyAlgorithm(str, Enum):
    """Encoding of the private key referenced by ``TlsConfigFile.key``."""

    RSA = "rsa"
    PKCS8 = "pkcs8"


class TlsConfigFile(BaseModel):
    """The ``[tls]`` table (portico ``tls.*``)."""

    model_config = ConfigDict(frozen=True)

    cert: Path
    key: Path
    key_algorithm: PrivateKeyAlgorithm
