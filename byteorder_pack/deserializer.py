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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Union

from .types import Buffer, SupportsRead

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer
    from .stream_deserializer import StreamDeserializer


class Deserializer(ABC):
    """ The byte source side of the serialization system.

    Reads are sequential and never look ahead, so a deserializer can sit on top of a channel that can't be rewound.
    """

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_stream_deserializer(source: SupportsRead) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(source)

    @staticmethod
    def from_source(source: Union[Deserializer, SupportsRead]) -> Deserializer:
        """Use the given deserializer as is, or wrap a readable channel so it can be used as a deserializer."""
        if isinstance(source, Deserializer):
            return source
        if not callable(getattr(source, 'read', None)):
            raise TypeError(f'expected a Deserializer or a readable binary channel, got {type(source).__name__}')
        return Deserializer.build_stream_deserializer(source)

    @abstractmethod
    def cur_pos(self) -> int:
        """Amount of bytes consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Buffer:
        """Read exactly n bytes, raises OutOfDataError if there isn't enough data."""
        # XXX: this is a blanket implementation that is an example of the behavior, this implementation has to be
        #      explicitly used if needed, it is not atomic: bytes read before the error are lost
        def iter_bytes() -> Iterator[int]:
            for _ in range(n):
                yield self.read_byte()
        return bytes(iter_bytes())

    @abstractmethod
    def read_all(self) -> Buffer:
        """Read all bytes until the source is exhausted."""
        raise NotImplementedError

    def read_struct(self, format: str) -> tuple[Any, ...]:
        size = struct.calcsize(format)
        data = self.read_bytes(size)
        return struct.unpack_from(format, data)
