# Copyright 2025 Roger Cibrian
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

"""Classification of option values.

Option values are untyped Python objects, but the merge and resolve logic
only ever cares which of five shapes a value has. option_kind() maps a
value to one of those shapes so callers branch on a single tag instead of
probing for __getitem__.

Strings and bytes are scalars even though they are sequences to Python.
Classes and functions are callables. Anything that fits none of the
categories (an arbitrary object) counts as a scalar: it is replaced on
merge and passes through resolution untouched.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

OptionKind = Literal["absent", "scalar", "map", "sequence", "callable"]

_SCALAR_TYPES = (bool, int, float, str, bytes)


def option_kind(value: Any) -> OptionKind:
    """Return the kind tag for an option value.

    Args:
        value: Any value stored in a configuration.

    Returns:
        "absent" for None, "map" for mappings, "sequence" for non-string
            sequences, "callable" for functions and classes, otherwise
            "scalar".

    Example:
        ```python
        option_kind({"Fl": "Filter.FlateDecode"})  # "map"
        option_kind(["ImageLoader.JPEG"])          # "sequence"
        option_kind("A4")                          # "scalar"
        ```
    """
    if value is None:
        return "absent"
    if isinstance(value, _SCALAR_TYPES):
        return "scalar"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, Sequence):
        return "sequence"
    if callable(value):
        return "callable"
    return "scalar"


def is_map(value: Any) -> bool:
    """Return True if value is merged key-by-key rather than replaced."""
    return option_kind(value) == "map"
