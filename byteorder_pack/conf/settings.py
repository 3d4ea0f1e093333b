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

from pathlib import Path
from typing import Union

from pydantic import field_validator

from byteorder_pack.utils import pydantic


class PackSettings(pydantic.BaseModel):
    # Largest number of elements accepted when declaring a TuplePackType (the empty tuple is always accepted).
    MAX_TUPLE_ARITY: int = 12

    # Largest length accepted when declaring an ArrayPackType, protects against accidentally huge declarations.
    MAX_ARRAY_LENGTH: int = 65536

    # When True only 0x00 and 0x01 are valid booleans, otherwise any non-zero byte decodes to True.
    STRICT_BOOL: bool = True

    @field_validator('MAX_TUPLE_ARITY', 'MAX_ARRAY_LENGTH')
    @classmethod
    def _check_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError('value cannot be negative')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'PackSettings':
        """Takes a filepath to a yaml file and returns a validated PackSettings instance."""
        from byteorder_pack.utils.yaml import dict_from_extended_yaml
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
