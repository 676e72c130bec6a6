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

"""Validate decoded values against an OpenAPI schema keyword subset."""

__version__ = "0.1.0"

from .checks import (
    AllCheck,
    Check,
    MaxLengthCheck,
    MaximumCheck,
    MinLengthCheck,
    MinimumCheck,
    MultipleOfCheck,
    TypeCheck,
    ValidationIssue,
)
from .compiler import KEYWORDS, compile_check
from .config import CompilerConfig
from .exceptions import BadSchemaError, ConfigurationError, SchemaCheckError, ValidationFailedError
from .validator import Validator, compile_schema
from .values import UNDEFINED, ValueKind, classify

__all__ = [
    "AllCheck",
    "BadSchemaError",
    "Check",
    "CompilerConfig",
    "ConfigurationError",
    "KEYWORDS",
    "MaxLengthCheck",
    "MaximumCheck",
    "MinLengthCheck",
    "MinimumCheck",
    "MultipleOfCheck",
    "SchemaCheckError",
    "TypeCheck",
    "UNDEFINED",
    "ValidationFailedError",
    "ValidationIssue",
    "Validator",
    "ValueKind",
    "classify",
    "compile_check",
    "compile_schema",
]
