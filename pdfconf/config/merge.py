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

"""One-level merging of option mappings.

Merge Behavior:
    The merge uses "overlay wins" semantics, but only one level deep:

    - **Maps on both sides**: Unioned key-by-key (overlay keys win, base-only
      keys are kept). Maps nested inside are replaced, NOT merged further.
    - **Everything else**: Overlay value replaces the base value (scalars,
      lists, callables, or a map on only one side).
    - **Name on one side only**: Value is carried over as-is.

Merging one level deep lets a document swap a single entry of a capability
map, such as the Fl filter, without restating the other entries, while
arbitrarily nested user data is never deep-merged.

Example:
    ```python
    base = {"filter.map": {"Fl": "Filter.FlateDecode", "LZW": "Filter.LZWDecode"}}
    overlay = {"filter.map": {"Fl": "Filter.FastFlate"}}

    merge_options(base, overlay)["filter.map"]
    # {"Fl": "Filter.FastFlate", "LZW": "Filter.LZWDecode"}
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .kinds import is_map


def merge_options(
    base: Mapping[str, Any], overlay: Mapping[str, Any]
) -> dict[str, Any]:
    """Merge two option mappings one level deep with "overlay wins".

    Rules:
      - map + map -> new dict with the keys of both (overlay wins per key)
      - anything else -> overlay replaces base

    This function does not mutate inputs; returns a new dict. Values that
    are not in conflict are shared with the inputs, not copied.

    Args:
        base: Options to start from (e.g., document defaults).
        overlay: Options that take precedence (e.g., user overrides).

    Returns:
        A new dict holding every option name from both inputs.
    """
    result: dict[str, Any] = dict(base)
    for name, value in overlay.items():
        if name in result and is_map(result[name]) and is_map(value):
            result[name] = {**result[name], **value}
        else:
            result[name] = value
    return result
