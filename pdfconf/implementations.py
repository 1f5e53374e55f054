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

"""Implementation table for pdfconf.

Capability maps in the registries store implementation *names* such as
"Filter.FlateDecode". This module is the table that turns such a name into
a live object. Filter codecs, security handlers, color spaces, image
loaders, object wrappers and tasks live outside pdfconf; each registers
itself here under its name, typically at module import time.

Design Philosophy:
    - Registration is explicit (no importing by dotted path)
    - The table is a simple dict keyed by name
    - Lookup never raises; it returns a Lookup result whose found flag
      says whether a usable implementation exists
    - Optional implementations (e.g., a native accelerated AES) register a
      lazy loader; a loader raising ImportError means "unavailable", which
      is a miss like any other

Example:
    Registering a filter implementation:
        ```python
        from pdfconf.implementations import implementation

        @implementation("Filter.FlateDecode")
        class FlateDecode:
            ...
        ```

    Registering an optional accelerated implementation:
        ```python
        from pdfconf.implementations import register_lazy_implementation

        def _load_fast_aes():
            from fastaes import AES  # may not be installed
            return AES

        register_lazy_implementation("Encryption.FastAES", _load_fast_aes)
        ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import threading
from typing import Any, TypeVar

from pdfconf.logging import get_global_logger

T = TypeVar("T")

# -------------------------------
# Lookup result
# -------------------------------


@dataclass(frozen=True)
class Lookup:
    """Outcome of looking up an implementation name.

    Attributes:
        found: True if a usable implementation exists for the name.
        value: The implementation when found, otherwise None.

    """

    found: bool
    value: Any = None


MISSING = Lookup(found=False)

# -------------------------------
# Implementation table
# -------------------------------

_IMPLEMENTATIONS: dict[str, Any] = {}
_LAZY_LOADERS: dict[str, Callable[[], Any]] = {}

# Reentrant: a loader may itself look up other implementations
_LOAD_LOCK = threading.RLock()


def register_implementation(name: str, implementation: Any) -> None:
    """Register a live implementation under a symbolic name.

    Registering the same name twice overwrites the previous registration,
    including a pending lazy loader.

    Args:
        name: Implementation name as stored in capability maps
            (e.g., "Filter.FlateDecode"). Case-sensitive.
        implementation: The class, function or object to hand out.

    """
    _LAZY_LOADERS.pop(name, None)
    _IMPLEMENTATIONS[name] = implementation
    get_global_logger().verbose("REGISTRY", f"Registered implementation {name}")


def register_lazy_implementation(name: str, loader: Callable[[], Any]) -> None:
    """Register a loader that produces the implementation on first lookup.

    The loader is called at most once. Threads looking the name up while
    it runs wait for its result. If it raises, the name is treated as
    unavailable and every lookup misses. ImportError is the expected case
    (an optional dependency is not installed); other exceptions are
    reported through the logger as load failures.

    Args:
        name: Implementation name as stored in capability maps.
        loader: Zero-argument callable returning the implementation.

    """
    _IMPLEMENTATIONS.pop(name, None)
    _LAZY_LOADERS[name] = loader
    get_global_logger().verbose("REGISTRY", f"Registered lazy implementation {name}")


def implementation(name: str) -> Callable[[T], T]:
    """Class/function decorator form of register_implementation().

    Example:
        ```python
        @implementation("Task.Optimize")
        def optimize(document, **options):
            ...
        ```
    """

    def decorator(obj: T) -> T:
        register_implementation(name, obj)
        return obj

    return decorator


def unregister_implementation(name: str) -> None:
    """Remove a name from the table. Unknown names are ignored."""
    _IMPLEMENTATIONS.pop(name, None)
    _LAZY_LOADERS.pop(name, None)


def _run_loader(name: str, loader: Callable[[], Any]) -> bool:
    """Run a lazy loader under _LOAD_LOCK and install its result.

    The loader stays registered until the result is stored, so concurrent
    readers wait on the lock instead of seeing the name as unknown.

    Returns:
        False if the loader raised and the name is now unavailable.
    """
    try:
        value = loader()
    except ImportError as err:
        _LAZY_LOADERS.pop(name, None)
        get_global_logger().debug(
            "REGISTRY", f"Implementation {name} is unavailable: {err}"
        )
        return False
    except Exception as err:
        _LAZY_LOADERS.pop(name, None)
        get_global_logger().verbose(
            "REGISTRY",
            f"Loading implementation {name} failed: {type(err).__name__}: {err}",
        )
        return False

    _IMPLEMENTATIONS[name] = value
    _LAZY_LOADERS.pop(name, None)
    return True


def lookup_implementation(name: str) -> Lookup:
    """Look up an implementation by name.

    Args:
        name: Implementation name (e.g., "ColorSpace.DeviceRGB").

    Returns:
        Lookup(found=True, value=impl) when a usable implementation is
            registered, otherwise MISSING. A name registered with None, or
            whose lazy loader raised, is a miss. Never raises.

    """
    if name in _LAZY_LOADERS:
        with _LOAD_LOCK:
            # Another reader may have finished the load while we waited
            loader = _LAZY_LOADERS.get(name)
            if loader is not None:
                if not _run_loader(name, loader):
                    return MISSING

    value = _IMPLEMENTATIONS.get(name)
    if value is None:
        return MISSING
    return Lookup(found=True, value=value)


def registered_names() -> list[str]:
    """Return all registered implementation names, sorted."""
    return sorted(set(_IMPLEMENTATIONS) | set(_LAZY_LOADERS))
