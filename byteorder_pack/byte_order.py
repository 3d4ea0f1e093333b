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

from enum import Enum, unique
from typing import Literal


@unique
class ByteOrder(Enum):
    """ The order in which the bytes of a multi-byte value are written.

    There is intentionally no "native" member, every call site has to pick one of these explicitly.

    >>> ByteOrder.BIG.struct_prefix
    '>'
    >>> ByteOrder.LITTLE.byteorder
    'little'
    """

    BIG = 'big'
    LITTLE = 'little'

    @property
    def byteorder(self) -> Literal['big', 'little']:
        """Value to be passed as the `byteorder` argument of `int.to_bytes`/`int.from_bytes`."""
        return 'big' if self is ByteOrder.BIG else 'little'

    @property
    def struct_prefix(self) -> str:
        """Prefix used on `struct` format strings, it also disables native alignment."""
        return '>' if self is ByteOrder.BIG else '<'
