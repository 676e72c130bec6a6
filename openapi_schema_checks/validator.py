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

"""Validator facade: compile once, validate many values."""

from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Optional

from .checks import Check, ValidationIssue
from .compiler import compile_check
from .config import DEFAULT_CONFIG, CompilerConfig
from .values import UNDEFINED


class Validator:
    """A compiled schema.

    Construction compiles the schema and raises BadSchemaError when it is
    malformed. The compiled tree is immutable, so a validator can be shared
    between threads.
    """

    __slots__ = ("_check", "_config", "_path")

    def __init__(
        self,
        schema: Mapping[str, Any],
        *,
        path: Optional[str] = None,
        config: Optional[CompilerConfig] = None,
    ):
        config = config if config is not None else DEFAULT_CONFIG
        path = path if path is not None else config.root_path
        self._check = compile_check(schema, path=path, config=config)
        self._config = config
        self._path = path

    @property
    def check(self) -> Check:
        return self._check

    @property
    def config(self) -> CompilerConfig:
        return self._config

    @property
    def schema_path(self) -> str:
        return self._path

    def validate(self, value: Any = UNDEFINED) -> bool:
        """Validate a value, raising ValidationFailedError on the first failure."""
        self._check.check(value)
        return True

    def is_valid(self, value: Any = UNDEFINED) -> bool:
        return self._check.is_valid(value)

    def iter_errors(self, value: Any = UNDEFINED) -> Iterator[ValidationIssue]:
        """Yield every failure rather than stopping at the first one."""
        return self._check.iter_issues(value)

    def errors(self, value: Any = UNDEFINED) -> List[ValidationIssue]:
        return list(self.iter_errors(value))

    def __repr__(self) -> str:
        return f"Validator({self._path}: {self._check.describe()})"


def compile_schema(
    schema: Mapping[str, Any],
    *,
    path: Optional[str] = None,
    config: Optional[CompilerConfig] = None,
) -> Validator:
    """Compile ``schema`` into a :class:`Validator`."""
    return Validator(schema, path=path, config=config)
