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

"""Option store, merging and resolution for pdfconf.

Public API:

- Configuration: Dot-namespaced option store with has/get/set/merge
- merge_options: One-level "overlay wins" merge of two option mappings
- resolve: Turn an option (or one entry of it) into a live implementation
- resolve_required: resolve() that raises CapabilityError on a miss
- resolve_all: Resolve every entry of a sequence option in order
- parse_overrides: Parse YAML text into an overrides mapping
- option_kind: Classify an option value

Example:
    ```python
    from pdfconf.config import Configuration, resolve

    config = Configuration({"filter.map": {"Fl": "Filter.FlateDecode"}})
    codec = resolve(config, "filter.map", "Fl")
    ```
"""

from .kinds import OptionKind, option_kind
from .loader import parse_overrides
from .merge import merge_options
from .resolver import UNSET, resolve, resolve_all, resolve_required
from .store import Configuration

__all__ = [
    "Configuration",
    "OptionKind",
    "UNSET",
    "merge_options",
    "option_kind",
    "parse_overrides",
    "resolve",
    "resolve_all",
    "resolve_required",
]
