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

"""The option store.

A Configuration maps dotted option names (e.g., "io.chunk_size") to
arbitrary values. The dots are a naming convention only: the store looks
names up by exact string match and never walks into nested values.

Stores are customized by deriving new ones with merge(); set() exists for
building a store up, but the shared registries must never be set into.

Example:
    ```python
    from pdfconf.config import Configuration

    config = Configuration({"io.chunk_size": 4096})
    config.has("io.chunk_size")  # True
    config.get("io.missing")     # None

    doc = config.merge({"io.chunk_size": 1024})
    doc.get("io.chunk_size")     # 1024
    config.get("io.chunk_size")  # 4096 (unchanged)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from pdfconf.logging import get_global_logger

from .loader import parse_overrides
from .merge import merge_options
from .resolver import UNSET, resolve


class Configuration:
    """Dot-namespaced option store.

    The store owns its top-level option dict; neither the constructor
    argument nor a merge input is ever aliased. Option values are treated
    as immutable by convention, so a merge shares non-conflicting values
    with its inputs.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        """Create a store from an option mapping.

        Args:
            options: Mapping of option names to values. It is copied at
                the top level; set() never changes the caller's mapping.
        """
        self._options: dict[str, Any] = dict(options) if options is not None else {}

    @classmethod
    def from_yaml(cls, text: str) -> Configuration:
        """Create a store from YAML text mapping option names to values.

        Raises:
            ConfigError: If the text is not valid YAML or not a mapping.
        """
        return cls(parse_overrides(text))

    # -------------------------------
    # Point access
    # -------------------------------

    def has(self, name: str) -> bool:
        """Return True if the option was set, even if set to None."""
        return name in self._options

    def get(self, name: str) -> Any:
        """Return the value of the option, or None if it was never set."""
        return self._options.get(name)

    def set(self, name: str, value: Any) -> None:
        """Set the option on this store only."""
        self._options[name] = value

    __contains__ = has
    __getitem__ = get
    __setitem__ = set

    # -------------------------------
    # Derivation
    # -------------------------------

    def merge(self, other: Configuration | Mapping[str, Any]) -> Configuration:
        """Return a new store with the options of other merged onto these.

        Options holding maps on both sides are unioned one level deep, all
        other options of other replace ours. Neither store is modified.

        Args:
            other: A Configuration or a plain mapping of option names.

        Returns:
            A new Configuration.
        """
        overlay = other._options if isinstance(other, Configuration) else other
        result = Configuration()
        result._options = merge_options(self._options, overlay)
        get_global_logger().debug(
            "CONFIG", f"Merged {len(overlay)} option(s) onto {len(self._options)}"
        )
        return result

    def resolve(
        self,
        name: str,
        key: Any = UNSET,
        fallback: Callable[[str], Any] | None = None,
    ) -> Any:
        """Resolve the option to a live implementation. See resolver.resolve()."""
        return resolve(self, name, key, fallback)

    # -------------------------------
    # Introspection
    # -------------------------------

    def names(self) -> list[str]:
        """Return the option names in insertion order."""
        return list(self._options)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the options."""
        return dict(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._options == other._options

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Configuration({len(self._options)} options)"
