# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Optional, Protocol, TypeAlias, Union

Buffer: TypeAlias = Union[bytes, bytearray, memoryview]


class SupportsWrite(Protocol):
    """Anything that looks like a binary file opened for writing: `io.BytesIO`, `open(..., 'wb')`, raw files."""

    def write(self, data: bytes, /) -> Optional[int]:
        ...


class SupportsRead(Protocol):
    """Anything that looks like a binary file opened for reading: `io.BytesIO`, `open(..., 'rb')`, raw files."""

    def read(self, n: int, /) -> Optional[bytes]:
        ...
