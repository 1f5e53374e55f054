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

"""Parsing of option overrides written as YAML.

Applications often keep per-document settings as text, for example in a
settings file or an environment variable. parse_overrides() turns such text
into the plain mapping expected by Configuration.merge() and
with_defaults(). The top level maps option names to values:

    io.chunk_size: 4096
    document.auto_decrypt: false
    filter.map:
      Fl: Filter.FastFlate

Reading the text is left to the caller; this module never touches files.

Error Handling:
    - ConfigError: YAML parse errors, a top level that is not a mapping,
      or option names that are not strings
    - Parser errors are chained with "from err" for better debugging
"""

from __future__ import annotations

from typing import Any

import yaml

from pdfconf.exceptions import ConfigError
from pdfconf.logging import get_global_logger


def parse_overrides(text: str) -> dict[str, Any]:
    """Parse YAML text into a mapping of option names to values.

    Args:
        text: YAML document. Empty or whitespace-only text means "no
            overrides".

    Returns:
        A new dict of option overrides.

    Raises:
        ConfigError: On YAML parse errors, a non-mapping top level, or
            non-string option names.

    Example:
        ```python
        overrides = parse_overrides("io.chunk_size: 4096\\n")
        doc_config = with_defaults(overrides)
        ```
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing option overrides: {err}") from err

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            "top-level YAML must be a mapping of option names, "
            f"got {type(data).__name__}"
        )

    bad_names = [name for name in data if not isinstance(name, str)]
    if bad_names:
        raise ConfigError(f"option names must be strings: {bad_names!r}")

    get_global_logger().verbose("CONFIG", f"Parsed {len(data)} option override(s)")
    return data
