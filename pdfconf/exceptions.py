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

"""Exception hierarchy for pdfconf.

Looking up or resolving an option never raises: a missing option, an
unknown implementation name and an unavailable optional implementation all
come back as None. The exceptions below exist for the two places where
failing loudly is the caller's explicit choice:

- Parsing override text that is not a valid mapping of option names.
- A collaborator requiring a capability that cannot be resolved.

All exceptions inherit from PdfConfError, so a single except clause
catches everything this package raises.

Example:
    Surfacing a missing mandatory capability:
        ```python
        from pdfconf import global_configuration, resolve_required
        from pdfconf.exceptions import CapabilityError

        try:
            codec = resolve_required(global_configuration(), "filter.map", "CCF")
        except CapabilityError as e:
            print(f"Unsupported filter: {e}")
        ```
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PdfConfError",
    "ConfigError",
    "CapabilityError",
]


class PdfConfError(Exception):
    """Base exception for all pdfconf errors."""

    pass


class ConfigError(PdfConfError):
    """Raised for malformed configuration input.

    This exception is raised when there are problems with:

    - YAML parse errors in override text
    - Override text whose top level is not a mapping
    - Option names that are not strings

    The underlying parser error, if any, is chained as __cause__.
    """

    pass


class CapabilityError(PdfConfError):
    """Raised when a mandatory capability has no usable implementation.

    Only collaborator-side helpers such as resolve_required() raise this;
    resolve() itself returns None instead.

    Attributes:
        option: The option name that was resolved (e.g., "filter.map").
        key: The sub-key within that option (e.g., "CCF"), or None when the
            option was resolved without one.
    """

    def __init__(self, option: str, key: Any = None) -> None:
        self.option = option
        self.key = key
        if key is None:
            message = f"No implementation available for option {option!r}"
        else:
            message = f"No implementation available for {key!r} in option {option!r}"
        super().__init__(message)
