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

"""Schema compilation.

A schema node is compiled by walking a fixed, ordered table of keyword rules.
Each rule looks at its own keyword only and contributes zero or one check,
so the order of the table is the order checks run at validation time.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Tuple

from .checks import (
    TYPE_NAMES,
    AllCheck,
    Check,
    MaxLengthCheck,
    MaximumCheck,
    MinLengthCheck,
    MinimumCheck,
    MultipleOfCheck,
    TypeCheck,
)
from .config import DEFAULT_CONFIG, CompilerConfig
from .exceptions import BadSchemaError
from .values import ValueKind, classify, is_integer, is_non_negative_integer

logger = logging.getLogger(__name__)


KeywordRule = Callable[[Mapping[str, Any], str, CompilerConfig], Optional[Check]]


def _present(schema: Mapping[str, Any], keyword: str) -> bool:
    # JSON null counts as absent
    return schema.get(keyword) is not None


def _read_exclusive(schema: Mapping[str, Any], keyword: str, path: str) -> bool:
    if not _present(schema, keyword):
        return False
    raw = schema[keyword]
    if not isinstance(raw, bool):
        raise BadSchemaError(path, f"The {keyword} property must be a boolean")
    return raw


def _compile_type(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
    raw = schema.get("type")
    if not isinstance(raw, str):
        raise BadSchemaError(path, "The type property must be a string")
    if raw not in TYPE_NAMES:
        raise BadSchemaError(path, f"Unrecognized type '{raw}'")
    return TypeCheck(path=path, type_name=raw)


def _compile_multiple_of(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
    if not _present(schema, "multipleOf"):
        return None
    raw = schema["multipleOf"]
    if not is_non_negative_integer(raw):
        raise BadSchemaError(path, "The multipleOf property must be a non-negative integer")
    return MultipleOfCheck(path=path, multiple=raw)


def _compile_maximum(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
    if not _present(schema, "maximum"):
        return None
    raw = schema["maximum"]
    if not is_integer(raw):
        raise BadSchemaError(path, "The maximum property must be an integer")
    return MaximumCheck(
        path=path,
        maximum=raw,
        exclusive=_read_exclusive(schema, "exclusiveMaximum", path),
        allow_real=config.real_number_bounds,
    )


def _compile_minimum(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
    if not _present(schema, "minimum"):
        return None
    raw = schema["minimum"]
    if not is_integer(raw):
        raise BadSchemaError(path, "The minimum property must be an integer")
    return MinimumCheck(
        path=path,
        minimum=raw,
        exclusive=_read_exclusive(schema, "exclusiveMinimum", path),
        allow_real=config.real_number_bounds,
    )


def _exclusive_flag(keyword: str) -> KeywordRule:
    """Validate an exclusivity flag that contributes no check of its own."""

    def _rule(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
        _read_exclusive(schema, keyword, path)
        return None

    return _rule


def _length_rule(keyword: str, check_type: Callable[..., Check]) -> KeywordRule:
    def _rule(schema: Mapping[str, Any], path: str, config: CompilerConfig) -> Optional[Check]:
        if not _present(schema, keyword):
            return None
        raw = schema[keyword]
        if not is_non_negative_integer(raw):
            raise BadSchemaError(path, f"The {keyword} property must be a non-negative integer")
        return check_type(path, raw)

    return _rule


# Table order is evaluation order. Extend by appending.
KEYWORD_RULES: Tuple[Tuple[str, KeywordRule], ...] = (
    ("type", _compile_type),
    ("multipleOf", _compile_multiple_of),
    ("maximum", _compile_maximum),
    ("exclusiveMaximum", _exclusive_flag("exclusiveMaximum")),
    ("minimum", _compile_minimum),
    ("exclusiveMinimum", _exclusive_flag("exclusiveMinimum")),
    ("minLength", _length_rule("minLength", MinLengthCheck)),
    ("maxLength", _length_rule("maxLength", MaxLengthCheck)),
)

KEYWORDS: Tuple[str, ...] = tuple(keyword for keyword, _ in KEYWORD_RULES)


def compile_check(
    schema: Mapping[str, Any],
    path: Optional[str] = None,
    config: Optional[CompilerConfig] = None,
) -> Check:
    """Compile one schema node into a check.

    Args:
        schema: Mapping of keyword to value. Unrecognized keys are ignored.
        path: Location reported by failures; defaults to ``config.root_path``.
        config: Compiler options; defaults to :data:`DEFAULT_CONFIG`.

    Returns:
        The single check produced, or an :class:`AllCheck` wrapping several
        checks in keyword order.

    Raises:
        BadSchemaError: If any keyword has an invalid value. No partial tree
            is returned.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if path is None:
        path = config.root_path

    if classify(schema) is not ValueKind.OBJECT:
        raise BadSchemaError(path, "The schema must be an object")

    checks: List[Check] = []
    for keyword, rule in KEYWORD_RULES:
        check = rule(schema, path, config)
        if check is not None:
            checks.append(check)

    if len(checks) == 1:
        compiled = checks[0]
    else:
        compiled = AllCheck(path=path, checks=tuple(checks))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Compiled schema at {path}: {compiled.describe()}")
    return compiled
