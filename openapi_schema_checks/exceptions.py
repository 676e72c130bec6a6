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

"""Custom exceptions for schema compilation and value validation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .checks import ValidationIssue


class SchemaCheckError(Exception):
    """Base exception for errors carrying a path and a reason."""

    template = "{path}: {reason}"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return self.template.format(path=self.path, reason=self.reason)


class BadSchemaError(SchemaCheckError):
    """Exception raised when a schema cannot be compiled."""

    template = "Schema invalid at {path}: {reason}"


class ValidationFailedError(SchemaCheckError):
    """Exception raised when a value does not satisfy a compiled check."""

    template = "Validation failed for {path}: {reason}"

    @classmethod
    def from_issue(cls, issue: "ValidationIssue") -> "ValidationFailedError":
        return cls(issue.path, issue.reason)

    @property
    def issue(self) -> "ValidationIssue":
        from .checks import ValidationIssue

        return ValidationIssue(path=self.path, reason=self.reason)


class ConfigurationError(SchemaCheckError):
    """Exception raised for invalid compiler configuration."""

    template = "Configuration invalid at {path}: {reason}"
