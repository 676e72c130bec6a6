# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime classification of decoded values.

Values reach the validator already decoded (JSON, YAML, ...), so they are
plain Python objects. Every check looks at them through :func:`classify`,
which maps an object onto a single :class:`ValueKind`.
"""

from __future__ import annotations

import math
from collections import UserString
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any


class _Undefined:
    """Marker for an absent value, as opposed to JSON null (``None``)."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class ValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    UNDEFINED = "undefined"
    UNKNOWN = "unknown"

    @property
    def is_defined(self) -> bool:
        return self is not ValueKind.UNDEFINED


_REAL_TYPES = (float, Decimal, Fraction)


def classify(value: Any) -> ValueKind:
    """Return the kind of a decoded value.

    ``bool`` is tested before ``int`` because booleans are never integers
    here. Floats stay ``NUMBER`` even when their value is integral.
    """
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, _REAL_TYPES):
        return ValueKind.NUMBER
    if isinstance(value, (str, UserString)):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.ARRAY
    return ValueKind.UNKNOWN


def is_integer(value: Any) -> bool:
    return classify(value) is ValueKind.INTEGER


def is_real_number(value: Any) -> bool:
    return classify(value) in (ValueKind.INTEGER, ValueKind.NUMBER)


def is_non_negative_integer(value: Any) -> bool:
    return is_integer(value) and value >= 0


def is_nan(value: Any) -> bool:
    """True for float and Decimal NaN (quiet or signalling)."""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False
