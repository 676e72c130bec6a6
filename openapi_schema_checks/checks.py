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

"""Compiled check tree.

A compiled schema is a tree of frozen check nodes. Each node verifies one
keyword's constraint against a value and reports failures against the path
it was built with. Nodes never change after construction, so one tree can be
shared by any number of callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from .exceptions import ValidationFailedError
from .values import UNDEFINED, ValueKind, classify, is_integer, is_nan, is_non_negative_integer, is_real_number


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    reason: str

    @property
    def message(self) -> str:
        return f"Validation failed for {self.path}: {self.reason}"


@dataclass(frozen=True)
class Check(ABC):
    """A constraint against a value, together with the path it reports."""

    path: str

    @abstractmethod
    def iter_issues(self, value: Any = UNDEFINED) -> Iterator[ValidationIssue]:
        """Yield failures lazily, in evaluation order."""

    @abstractmethod
    def describe(self) -> str:
        pass

    def check(self, value: Any = UNDEFINED) -> None:
        """Raise ValidationFailedError for the first failure, if any."""
        issue = next(self.iter_issues(value), None)
        if issue is not None:
            raise ValidationFailedError.from_issue(issue)

    def is_valid(self, value: Any = UNDEFINED) -> bool:
        return next(self.iter_issues(value), None) is None


@dataclass(frozen=True)
class _LeafCheck(Check):
    """A check producing at most one failure."""

    def iter_issues(self, value: Any = UNDEFINED) -> Iterator[ValidationIssue]:
        reason = self.failure_reason(value)
        if reason is not None:
            yield ValidationIssue(path=self.path, reason=reason)

    @abstractmethod
    def failure_reason(self, value: Any) -> Optional[str]:
        """Return why ``value`` fails, or None when it passes."""


@dataclass(frozen=True)
class AllCheck(Check):
    """Passes when every child passes; children run in compiled order."""

    checks: Tuple[Check, ...]

    def iter_issues(self, value: Any = UNDEFINED) -> Iterator[ValidationIssue]:
        for child in self.checks:
            yield from child.iter_issues(value)

    def describe(self) -> str:
        return "all(" + ", ".join(child.describe() for child in self.checks) + ")"


# type name -> (accepted kinds, failure reason)
_TYPE_RULES: Dict[str, Tuple[Tuple[ValueKind, ...], str]] = {
    "string": ((ValueKind.STRING,), "Not a string"),
    "number": ((ValueKind.INTEGER, ValueKind.NUMBER), "Not a number"),
    "integer": ((ValueKind.INTEGER,), "Not an integer"),
    "boolean": ((ValueKind.BOOLEAN,), "Not a boolean"),
    "array": ((ValueKind.ARRAY,), "Not an array"),
    "object": ((ValueKind.OBJECT,), "Not an object"),
}

TYPE_NAMES: Tuple[str, ...] = tuple(_TYPE_RULES)


@dataclass(frozen=True)
class TypeCheck(_LeafCheck):
    type_name: str

    def __post_init__(self) -> None:
        if self.type_name not in _TYPE_RULES:
            raise ValueError(f"Unknown type name: {self.type_name}")

    def failure_reason(self, value: Any) -> Optional[str]:
        kinds, reason = _TYPE_RULES[self.type_name]
        # UNDEFINED is never among the accepted kinds
        if classify(value) not in kinds:
            return reason
        return None

    def describe(self) -> str:
        return f"type={self.type_name}"


@dataclass(frozen=True)
class MultipleOfCheck(_LeafCheck):
    multiple: int

    def failure_reason(self, value: Any) -> Optional[str]:
        if not is_non_negative_integer(value):
            return "Not a positive integer"
        if self.multiple == 0:
            divisible = value == 0
        else:
            divisible = value % self.multiple == 0
        if not divisible:
            return f"Integer is not multiple of {self.multiple}"
        return None

    def describe(self) -> str:
        return f"multipleOf={self.multiple}"


@dataclass(frozen=True)
class MinLengthCheck(_LeafCheck):
    """Only applies to strings; other values pass."""

    min_length: int

    def failure_reason(self, value: Any) -> Optional[str]:
        if classify(value) is ValueKind.STRING and len(value) < self.min_length:
            return f"String is shorter than {self.min_length} characters"
        return None

    def describe(self) -> str:
        return f"minLength={self.min_length}"


@dataclass(frozen=True)
class MaxLengthCheck(_LeafCheck):
    """Only applies to strings; other values pass."""

    max_length: int

    def failure_reason(self, value: Any) -> Optional[str]:
        if classify(value) is ValueKind.STRING and len(value) > self.max_length:
            return f"String is longer than {self.max_length} characters"
        return None

    def describe(self) -> str:
        return f"maxLength={self.max_length}"


def _bound_type_reason(value: Any, allow_real: bool) -> Optional[str]:
    if allow_real:
        return None if is_real_number(value) else "Not a number"
    return None if is_integer(value) else "Not an integer"


@dataclass(frozen=True)
class MaximumCheck(_LeafCheck):
    maximum: int
    exclusive: bool = False
    allow_real: bool = False

    def failure_reason(self, value: Any) -> Optional[str]:
        reason = _bound_type_reason(value, self.allow_real)
        if reason is not None:
            return reason
        # NaN never lies within a bound
        within = not is_nan(value) and (value < self.maximum if self.exclusive else value <= self.maximum)
        if not within:
            return f"Number is more than {self.maximum}"
        return None

    def describe(self) -> str:
        return f"maximum{'<' if self.exclusive else '<='}{self.maximum}"


@dataclass(frozen=True)
class MinimumCheck(_LeafCheck):
    minimum: int
    exclusive: bool = False
    allow_real: bool = False

    def failure_reason(self, value: Any) -> Optional[str]:
        reason = _bound_type_reason(value, self.allow_real)
        if reason is not None:
            return reason
        within = not is_nan(value) and (value > self.minimum if self.exclusive else value >= self.minimum)
        if not within:
            # same reason text as MaximumCheck
            return f"Number is more than {self.minimum}"
        return None

    def describe(self) -> str:
        return f"minimum{'>' if self.exclusive else '>='}{self.minimum}"
