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

"""
This module exports the types and functions that make the public API: the byte order, the serializer/deserializer
channels, the pack types and the entry points.
"""

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import (
    BadDataError,
    OutOfDataError,
    PackTypeDefinitionError,
    SerializationError,
    SerializationTypeError,
    SerializationValueError,
    SinkWriteError,
    SourceReadError,
)
from byteorder_pack.serializer import Serializer
from byteorder_pack.version import __version__

from byteorder_pack.pack_types import (  # isort: skip
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNIT,
    ArrayPackType,
    BoolPackType,
    PackType,
    RecordPackType,
    TuplePackType,
    record_pack_type,
)
from byteorder_pack.api import (  # isort: skip
    pack_be,
    pack_le,
    pack_multiple_to,
    pack_to,
    pack_to_be,
    pack_to_le,
    unpack_be,
    unpack_from,
    unpack_from_be,
    unpack_from_le,
    unpack_le,
    unpack_multiple_from,
    width_of,
)

__all__ = [
    '__version__',
    'ByteOrder',
    'Serializer',
    'Deserializer',
    'SerializationError',
    'OutOfDataError',
    'SinkWriteError',
    'SourceReadError',
    'BadDataError',
    'SerializationTypeError',
    'SerializationValueError',
    'PackTypeDefinitionError',
    'PackType',
    'ArrayPackType',
    'BoolPackType',
    'TuplePackType',
    'RecordPackType',
    'record_pack_type',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'F32',
    'F64',
    'BOOL',
    'UNIT',
    'width_of',
    'pack_to',
    'pack_to_be',
    'pack_to_le',
    'unpack_from',
    'unpack_from_be',
    'unpack_from_le',
    'pack_be',
    'pack_le',
    'unpack_be',
    'unpack_le',
    'pack_multiple_to',
    'unpack_multiple_from',
]
