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
from typing import TYPE_CHECKING, Any, Union

from .types import Buffer, SupportsWrite

if TYPE_CHECKING:
    from .bytes_serializer import BytesSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    """ The byte sink side of the serialization system.

    Encoders only ever talk to this interface, the actual destination is either memory (`BytesSerializer`) or an
    externally owned channel (`StreamSerializer`).
    """

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def write_struct(self, data: tuple[Any, ...], format: str) -> None:
        data_bytes = struct.pack(format, *data)
        self.write_bytes(data_bytes)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_stream_serializer(sink: SupportsWrite) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(sink)

    @staticmethod
    def from_sink(sink: Union[Serializer, SupportsWrite]) -> Serializer:
        """Use the given serializer as is, or wrap a writable channel so it can be used as a serializer."""
        if isinstance(sink, Serializer):
            return sink
        if not callable(getattr(sink, 'write', None)):
            raise TypeError(f'expected a Serializer or a writable binary channel, got {type(sink).__name__}')
        return Serializer.build_stream_serializer(sink)
