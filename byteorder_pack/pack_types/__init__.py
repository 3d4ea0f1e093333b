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

from byteorder_pack.pack_types.array_pack_type import ArrayPackType
from byteorder_pack.pack_types.bool_pack_type import BoolPackType
from byteorder_pack.pack_types.float_pack_type import Float32PackType, Float64PackType
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.pack_types.record_pack_type import RecordPackType, record_pack_type
from byteorder_pack.pack_types.sized_int_pack_type import (
    Int8PackType,
    Int16PackType,
    Int32PackType,
    Int64PackType,
    Int128PackType,
    Uint8PackType,
    Uint16PackType,
    Uint32PackType,
    Uint64PackType,
    Uint128PackType,
)
from byteorder_pack.pack_types.tuple_pack_type import TuplePackType

I8 = Int8PackType()
I16 = Int16PackType()
I32 = Int32PackType()
I64 = Int64PackType()
I128 = Int128PackType()

U8 = Uint8PackType()
U16 = Uint16PackType()
U32 = Uint32PackType()
U64 = Uint64PackType()
U128 = Uint128PackType()

F32 = Float32PackType()
F64 = Float64PackType()

BOOL = BoolPackType()

# the empty tuple, packs to nothing
UNIT = TuplePackType()

SCALAR_PACK_TYPES: tuple[PackType, ...] = (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, F32, F64, BOOL)

__all__ = [
    'PackType',
    'ArrayPackType',
    'BoolPackType',
    'Float32PackType',
    'Float64PackType',
    'Int8PackType',
    'Int16PackType',
    'Int32PackType',
    'Int64PackType',
    'Int128PackType',
    'RecordPackType',
    'TuplePackType',
    'Uint8PackType',
    'Uint16PackType',
    'Uint32PackType',
    'Uint64PackType',
    'Uint128PackType',
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
    'SCALAR_PACK_TYPES',
]
