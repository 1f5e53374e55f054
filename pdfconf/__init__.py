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

"""pdfconf - configuration substrate for PDF processing

pdfconf holds the options of a PDF library in dot-namespaced stores and
doubles as its capability registry: filter codecs, security handlers,
color spaces, image loaders, object wrappers and tasks are looked up by
name, so they can be swapped, extended or left unimplemented without
touching the code that uses them.

pdfconf provides:

- Process-wide and per-document option registries
- One-level merging of document overrides onto the defaults
- Resolution of stored names to live implementations, with fallbacks
- An explicit implementation table that subsystems register into
- YAML parsing of option overrides

Quick Start:
Create the options of a document:

    from pdfconf import with_defaults

    doc_config = with_defaults({"io.chunk_size": 4096})
    doc_config.get("io.chunk_size")  # 4096

Resolve a filter implementation:

    from pdfconf import global_configuration, resolve

    codec = resolve(global_configuration(), "filter.map", "Fl")

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Option store and capability registry for PDF processing"

# Re-export commonly used functions for convenience
from pdfconf.config import (
    Configuration,
    merge_options,
    parse_overrides,
    resolve,
    resolve_all,
    resolve_required,
)
from pdfconf.exceptions import CapabilityError, ConfigError, PdfConfError
from pdfconf.implementations import (
    implementation,
    lookup_implementation,
    register_implementation,
    register_lazy_implementation,
)
from pdfconf.registries import (
    default_document_configuration,
    global_configuration,
    init_registries,
    with_defaults,
    with_global,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "Configuration",
    "merge_options",
    "parse_overrides",
    "resolve",
    "resolve_all",
    "resolve_required",
    "implementation",
    "lookup_implementation",
    "register_implementation",
    "register_lazy_implementation",
    "default_document_configuration",
    "global_configuration",
    "init_registries",
    "with_defaults",
    "with_global",
    "PdfConfError",
    "ConfigError",
    "CapabilityError",
]
