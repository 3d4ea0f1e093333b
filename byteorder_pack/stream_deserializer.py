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

from typing import Optional

from structlog import get_logger
from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SourceReadError
from .types import SupportsRead

logger = get_logger()


class StreamDeserializer(Deserializer):
    """ Deserializer that reads straight from an externally owned binary channel.

    Short reads are retried until the requested amount is gathered, the channel signaling the end of the data (an
    empty read) or having nothing available on a non-blocking read (`None`) results in an `OutOfDataError`. There is
    no look-ahead: nothing is read from the channel beyond what was asked for. An `OSError` from the channel, or a read
    returning more bytes than requested, is reported as a `SourceReadError`.

    Bytes gathered before a failure are not given back to the channel, so after an error the position of the channel
    should not be relied upon.
    """

    def __init__(self, source: SupportsRead) -> None:
        self._source = source
        self._pos: int = 0
        self.log = logger.new(source=type(source).__name__)

    def _read_chunk(self, n: int) -> Optional[bytes]:
        try:
            return self._source.read(n)
        except OSError as e:
            self.log.debug('source read failed', pos=self._pos, error=repr(e))
            raise SourceReadError(f'source failed reading at position {self._pos}') from e

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def read_byte(self) -> int:
        data = self.read_bytes(1)
        return data[0]

    @override
    def read_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        parts: list[bytes] = []
        missing = n
        while missing > 0:
            chunk = self._read_chunk(missing)
            if chunk is None:
                self.log.debug('source would block', pos=self._pos, requested=n, missing=missing)
                raise OutOfDataError(f'source has no data available: needed {n}, got {n - missing}')
            if not chunk:
                self.log.debug('source exhausted', pos=self._pos, requested=n, missing=missing)
                raise OutOfDataError(f'not enough bytes to read: needed {n}, got {n - missing}')
            if len(chunk) > missing:
                self.log.debug('source over-read', pos=self._pos, requested=missing, returned=len(chunk))
                raise SourceReadError(f'source returned {len(chunk)} bytes when {missing} were requested')
            parts.append(bytes(chunk))
            missing -= len(chunk)
        self._pos += n
        return b''.join(parts)

    @override
    def read_all(self) -> bytes:
        """ Read until the source signals the end of the data with an empty read.

        A non-blocking source with nothing available (`None`) can't tell whether more data is coming, so it is reported
        as an `OutOfDataError` like in `read_bytes`, the bytes gathered up to that point are lost.
        """
        parts: list[bytes] = []
        while True:
            chunk = self._read_chunk(-1)
            if chunk is None:
                self.log.debug('source would block', pos=self._pos)
                raise OutOfDataError('source has no data available before the end of the data')
            if not chunk:
                break
            parts.append(bytes(chunk))
        data = b''.join(parts)
        self._pos += len(data)
        return data
