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

from structlog import get_logger
from typing_extensions import override

from .exceptions import SinkWriteError
from .serializer import Serializer
from .types import Buffer, SupportsWrite

logger = get_logger()


class StreamSerializer(Serializer):
    """ Serializer that writes straight into an externally owned binary channel.

    The channel is never closed or flushed by this class, it belongs to the caller. A write that is only partially
    accepted (like raw files and pipes may do) is completed by writing the remainder. A write that returns `None`
    (non-blocking channel that would block) or that accepts 0 bytes is reported as a `SinkWriteError`, as is any
    `OSError` raised by the channel.
    """

    def __init__(self, sink: SupportsWrite) -> None:
        self._sink = sink
        self._pos: int = 0
        self.log = logger.new(sink=type(sink).__name__)

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, 1, 'big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        total = len(view)
        written = 0
        while written < total:
            try:
                count = self._sink.write(view[written:])
            except OSError as e:
                self.log.debug('sink write failed', pos=self._pos + written, error=repr(e))
                raise SinkWriteError(f'sink failed after {written} of {total} bytes') from e
            if count is None:
                self.log.debug('sink would block', pos=self._pos + written)
                raise SinkWriteError(f'sink would block after {written} of {total} bytes')
            if count <= 0:
                self.log.debug('sink accepted no bytes', pos=self._pos + written)
                raise SinkWriteError(f'sink accepted no bytes after {written} of {total} bytes')
            written += count
        self._pos += written
