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


class SerializationError(Exception):
    """Base class for every error raised while packing or unpacking a value."""
    pass


class OutOfDataError(SerializationError):
    """ The source could not provide the amount of bytes requested.

    This covers both the end of the data and a non-blocking source that had nothing to offer at the time of the read.
    """
    pass


class SinkWriteError(SerializationError):
    """ The sink rejected a write or could only accept part of it.

    When the failure comes from the underlying channel the original exception is chained as `__cause__`.
    """
    pass


class SourceReadError(SerializationError):
    """ The source failed a read or broke the read contract, for example by returning more bytes than requested.

    When the failure comes from the underlying channel the original exception is chained as `__cause__`.
    """
    pass


class BadDataError(SerializationError, ValueError):
    """The bytes read do not correspond to a valid value of the expected type."""
    pass


class SerializationTypeError(SerializationError, TypeError):
    """The value given for packing does not have a Python type compatible with the pack type."""
    pass


class SerializationValueError(SerializationError, ValueError):
    """The value given for packing cannot be represented, for example an int outside of the range of its width."""
    pass


class PackTypeDefinitionError(TypeError):
    """ A pack type was declared in an invalid way.

    This is a programmer error, not a data error: it is raised when building the pack type, never while packing or
    unpacking a value.
    """
    pass
