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

"""Logging interface for pdfconf.

Library modules report what they do through a small logger interface
instead of printing directly. The global logger is silent by default, so
importing pdfconf never produces output; an application opts in by
installing a louder logger.

The logger supports two output levels:
- Verbose: registry initialization, merges, implementation registration
- Debug: every resolution miss and fallback invocation (implies verbose)

Prefixes used by the library:
- CONFIG: merging stores and parsing override text
- REGISTRY: building the registries and the implementation table
- RESOLVE: resolution misses and fallbacks

Example:
    Configure the global logger:
        ```python
        from pdfconf.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        ```

    Use in library code:
        ```python
        from pdfconf.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("REGISTRY", "Initialized process-wide registry")
        logger.debug("RESOLVE", "filter.map[CCF] has no implementation")
        ```
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Anything with verbose() and debug() taking a prefix and a message."""

    def verbose(self, prefix: str, message: str) -> None:
        """Report a notable event, such as a registry being built.

        Args:
            prefix: Subsystem tag (e.g., "CONFIG", "REGISTRY").
            message: Text of the event.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Report a fine-grained event, such as a resolution miss."""
        ...


class DefaultLogger:
    """Logger that prints to stdout as "[PREFIX] message".

    Messages are filtered by the verbose and debug flags given at
    construction time.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Choose which events get printed.

        Args:
            verbose: Print registry and merge events.
            debug: Also print resolution misses; turns verbose on too.
        """
        self._verbose = verbose or debug
        self._debug = debug

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def verbose(self, prefix: str, message: str) -> None:
        """Discard the message."""

    def debug(self, prefix: str, message: str) -> None:
        """Discard the message."""


# Installed at import so library code never has to check for None
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Return a DefaultLogger printing at the given levels."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger pdfconf modules report to (a SilentLogger by default)."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Route all pdfconf logging to the given logger.

    Example:
        Trace resolution misses while debugging a document:
            ```python
            from pdfconf.logging import get_logger, set_global_logger

            set_global_logger(get_logger(debug=True))
            ```
    """
    global _global_logger
    _global_logger = logger
