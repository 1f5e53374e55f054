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

"""Resolution of options to live implementations.

resolve() is the single integration point for pluggable subsystems: a
filter, security handler, color space, image loader, object wrapper or task
asks for its namespace and key and receives the implementation, or None.

Resolution Steps:
    1. Read the option value (None when never set).
    2. With a key, index into the value if it is a map or a sequence.
       Any other value is left as it is.
    3. A string value is looked up in the implementation table. A name
       that is unknown or unavailable becomes None.
    4. If the value is None and a fallback was given, return
       fallback(name) instead.

An entry explicitly set to None ("recognized but not implemented") is
indistinguishable from a missing entry here. Non-string values such as a
class stored directly in a capability map are returned untouched.

Error Handling:
    resolve() never raises on missing configuration. Collaborators that
    need the capability use resolve_required(), or pass a fallback that
    raises their own error.

Example:
    ```python
    from pdfconf import global_configuration, resolve

    config = global_configuration()
    codec = resolve(config, "filter.map", "Fl")
    handler = resolve(
        config, "encryption.filter_map", "Adobe.PubSec",
        fallback=lambda name: None,
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pdfconf.exceptions import CapabilityError
from pdfconf.implementations import lookup_implementation
from pdfconf.logging import get_global_logger

from .kinds import option_kind

if TYPE_CHECKING:
    from .store import Configuration


class _Unset:
    """Marker type for "no key given" (None is a valid key)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def _index(data: Any, key: Any) -> Any:
    """Apply a sub-key to a value, tolerating values that cannot be indexed."""
    kind = option_kind(data)
    if kind == "map":
        return data.get(key)
    if kind == "sequence":
        # bool is an int subclass but never a meaningful index
        if isinstance(key, bool) or not isinstance(key, int):
            return None
        return data[key] if -len(data) <= key < len(data) else None
    return data


def _describe(name: str, key: Any) -> str:
    return name if key is UNSET else f"{name}[{key!r}]"


def resolve(
    config: Configuration,
    name: str,
    key: Any = UNSET,
    fallback: Callable[[str], Any] | None = None,
) -> Any:
    """Resolve an option (or an entry of it) to a live implementation.

    Args:
        config: Store to read the option from.
        name: Option name (e.g., "filter.map", "encryption.aes").
        key: Entry to select when the option holds a map or a sequence
            (e.g., "Fl", or 0 for the first image loader). Ignored for
            values that cannot be indexed.
        fallback: Called with the option name when nothing usable was
            found; its result is returned.

    Returns:
        The implementation, the fallback's result, or None.

    """
    logger = get_global_logger()

    data = config.get(name)
    if key is not UNSET:
        data = _index(data, key)

    if isinstance(data, str):
        result = lookup_implementation(data)
        if not result.found:
            logger.debug(
                "RESOLVE", f"{_describe(name, key)}: no implementation named {data!r}"
            )
        data = result.value

    if data is None and fallback is not None:
        logger.debug("RESOLVE", f"{_describe(name, key)}: using fallback")
        data = fallback(name)

    return data


def resolve_required(config: Configuration, name: str, key: Any = UNSET) -> Any:
    """Resolve a capability that the caller cannot work without.

    Raises:
        CapabilityError: If the option does not resolve to an
            implementation. The error names the option and key.

    """

    def _missing(option: str) -> Any:
        raise CapabilityError(option, None if key is UNSET else key)

    return resolve(config, name, key, fallback=_missing)


def resolve_all(config: Configuration, name: str) -> list[Any]:
    """Resolve every entry of a sequence option, in order.

    Used for search lists such as "image_loader", where each entry is
    tried in turn. Entries that do not resolve are dropped. A value that
    is not a sequence is resolved as a single entry.

    Returns:
        The resolved implementations, possibly empty.

    """
    data = config.get(name)
    if option_kind(data) != "sequence":
        single = resolve(config, name)
        return [] if single is None else [single]
    return [
        impl
        for impl in (resolve(config, name, index) for index in range(len(data)))
        if impl is not None
    ]
