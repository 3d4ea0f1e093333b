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
This PackType class makes it easy to give a fixed binary layout to a user-defined record, either a dataclass or a
NamedTuple. Each field declares its layout with `Annotated`:

    @dataclass(frozen=True)
    class Header:
        magic: Annotated[int, U32]
        version: Annotated[int, U16]
        scale: Annotated[float, F32]
        flags: Annotated[list[bool], ArrayPackType(BOOL, 4)]

    HEADER = record_pack_type(Header)

The fields are laid out in declaration order, exactly like a tuple of the same pack types would be. The annotations
are only looked at once, when the pack type is built.
"""

from __future__ import annotations

import dataclasses
from typing import Annotated, Any, TypeVar, get_args, get_origin, get_type_hints

from typing_extensions import override

from byteorder_pack.byte_order import ByteOrder
from byteorder_pack.deserializer import Deserializer
from byteorder_pack.exceptions import PackTypeDefinitionError, SerializationTypeError
from byteorder_pack.pack_types.pack_type import PackType
from byteorder_pack.serializer import Serializer

R = TypeVar('R')


def record_pack_type(class_: type[R]) -> RecordPackType[R]:
    """ Helper function to build a PackType for the given dataclass or NamedTuple.
    """
    if dataclasses.is_dataclass(class_):
        field_names = []
        for field in dataclasses.fields(class_):
            if not field.init:
                raise PackTypeDefinitionError(f'{class_.__name__}.{field.name}: fields with init=False are not supported')
            field_names.append(field.name)
    elif isinstance(class_, type) and issubclass(class_, tuple) and hasattr(class_, '_fields'):
        field_names = list(class_._fields)
    else:
        raise PackTypeDefinitionError(f'expected a dataclass or a NamedTuple, got {class_!r}')

    hints = get_type_hints(class_, include_extras=True)
    fields_: dict[str, PackType[Any]] = {}
    for field_name in field_names:
        fields_[field_name] = _pack_type_from_annotation(class_, field_name, hints.get(field_name))
    return RecordPackType(class_, fields_)


def _pack_type_from_annotation(class_: type, field_name: str, annotation: Any) -> PackType[Any]:
    if get_origin(annotation) is Annotated:
        _, *metadata = get_args(annotation)
        pack_types = [i for i in metadata if isinstance(i, PackType)]
        if len(pack_types) == 1:
            return pack_types[0]
        if len(pack_types) > 1:
            raise PackTypeDefinitionError(f'{class_.__name__}.{field_name}: more than one PackType in annotation')
    raise PackTypeDefinitionError(f'{class_.__name__}.{field_name}: expected Annotated[<type>, <PackType>]')


class RecordPackType(PackType[R]):
    __slots__ = ('_fields', '_class')

    _fields: dict[str, PackType[Any]]
    _class: type[R]

    def __init__(self, class_: type[R], fields_: dict[str, PackType[Any]]) -> None:
        for field_name, field_pack_type in fields_.items():
            if not isinstance(field_pack_type, PackType):
                raise PackTypeDefinitionError(f'{field_name}: expected a PackType, got {field_pack_type!r}')
        self._class = class_
        self._fields = dict(fields_)
        self._width = sum(field_pack_type.width for field_pack_type in self._fields.values())

    def __repr__(self) -> str:
        return f'RecordPackType({self._class.__name__})'

    @property
    def fields(self) -> dict[str, PackType[Any]]:
        return dict(self._fields)

    @override
    def _check_value(self, value: R, /) -> None:
        if not isinstance(value, self._class):
            raise SerializationTypeError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        for field_name, field_pack_type in self._fields.items():
            field_pack_type._check_value(getattr(value, field_name))

    @override
    def _pack(self, serializer: Serializer, value: R, order: ByteOrder, /) -> None:
        for field_name, field_pack_type in self._fields.items():
            field_pack_type._pack(serializer, getattr(value, field_name), order)

    @override
    def _unpack(self, deserializer: Deserializer, order: ByteOrder, /) -> R:
        kwargs: dict[str, Any] = {}
        for field_name, field_pack_type in self._fields.items():
            kwargs[field_name] = field_pack_type._unpack(deserializer, order)
        return self._class(**kwargs)
