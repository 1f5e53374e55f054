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

"""The process-wide and per-document-defaults registries.

Two Configuration instances are shared by the whole process:

1. **Process-wide registry** (global_configuration)
   - Capability maps for pluggable subsystems, keyed by namespace
   - Needed where no document is at hand (e.g., choosing a codec class)

2. **Per-document defaults** (default_document_configuration)
   - Behavioral switches a single document may override
   - Every document store is derived from it with with_defaults()

Both are built by init_registries() from the seed data below, merged with
optional overrides, and are never set into afterwards. Changing a default
for the whole process means calling init_registries() again; changing it
for one document means merging overrides onto it.

Process-wide Options:
    color_space.map
        Color space family name -> color space implementation.
    encryption.aes / encryption.arc4
        Cipher implementation used by the security handlers.
    encryption.filter_map
        /Filter name of an encryption dictionary -> security handler.
    encryption.sub_filter_map
        /SubFilter name -> compatible security handler, consulted when no
        handler is registered for the /Filter name.
    filter.flate_compression
        Compression level for FlateDecode, 0 (none) to 9 (best, default).
    filter.map
        Stream filter name (long and abbreviated form) -> filter
        implementation. CCITTFaxDecode, JBIG2Decode and Crypt are
        recognized but have no implementation (None).
    image_loader
        Image loader implementations, tried in order.
    object.type_map / object.subtype_map
        /Type or /Subtype value -> object wrapper class. Tags starting
        with "XX" are internal and used for dictionaries without /Type.
    task.map
        Task name -> task implementation.

Per-document Options:
    document.auto_decrypt
        Decrypt the document automatically when it is parsed.
    graphic_object.map
        Graphic object name -> graphic object factory.
    graphic_object.arc.max_curves
        Maximum number of Bezier curves approximating a full ellipse.
        Values below 4 give visibly wrong ellipses.
    image_loader.pdf.use_stringio
        Read PDF images given by file name fully into memory.
    io.chunk_size
        Chunk size in bytes for reading stream data.
    page.default_media_box
        Media box for new pages without one; a paper size name or a
        rectangle.
    parser.on_correctable_error
        Called as hook(document, message, position) when the parser meets
        a correctable error; returns True if the error should be raised.
    sorted_tree.max_leaf_node_size
        Maximum number of entries in a leaf node of a name or number tree.

Example:
    ```python
    from pdfconf.registries import with_defaults, global_configuration

    doc_config = with_defaults({"io.chunk_size": 4096})
    codec = global_configuration().resolve("filter.map", "Fl")
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pdfconf.config import Configuration
from pdfconf.logging import get_global_logger

# -------------------------------
# Seed data
# -------------------------------


def _never_raise(document: Any, message: str, position: int) -> bool:
    """Default correctable-error hook: always try to recover."""
    return False


def _global_seed() -> dict[str, Any]:
    return {
        "encryption.aes": "Encryption.FastAES",
        "encryption.arc4": "Encryption.FastARC4",
        "encryption.filter_map": {
            "Standard": "Encryption.StandardSecurityHandler",
        },
        "encryption.sub_filter_map": {},
        "filter.flate_compression": 9,
        "filter.map": {
            "ASCIIHexDecode": "Filter.ASCIIHexDecode",
            "AHx": "Filter.ASCIIHexDecode",
            "ASCII85Decode": "Filter.ASCII85Decode",
            "A85": "Filter.ASCII85Decode",
            "LZWDecode": "Filter.LZWDecode",
            "LZW": "Filter.LZWDecode",
            "FlateDecode": "Filter.FlateDecode",
            "Fl": "Filter.FlateDecode",
            "RunLengthDecode": "Filter.RunLengthDecode",
            "RL": "Filter.RunLengthDecode",
            "CCITTFaxDecode": None,
            "CCF": None,
            "JBIG2Decode": None,
            "DCTDecode": "Filter.DCTDecode",
            "DCT": "Filter.DCTDecode",
            "JPXDecode": "Filter.JPXDecode",
            "Crypt": None,
            "Encryption": "Filter.Encryption",
        },
        "color_space.map": {
            "DeviceRGB": "ColorSpace.DeviceRGB",
            "DeviceCMYK": "ColorSpace.DeviceCMYK",
            "DeviceGray": "ColorSpace.DeviceGray",
        },
        "image_loader": [
            "ImageLoader.JPEG",
            "ImageLoader.PNG",
            "ImageLoader.PDF",
        ],
        "object.type_map": {
            "XRef": "Type.XRefStream",
            "ObjStm": "Type.ObjectStream",
            "Catalog": "Type.Catalog",
            "Pages": "Type.PageTreeNode",
            "Page": "Type.Page",
            "Filespec": "Type.FileSpecification",
            "EmbeddedFile": "Type.EmbeddedFile",
            "ExtGState": "Type.GraphicsStateParameter",
            "XXEmbeddedFileParameters": "Type.EmbeddedFile.Parameters",
            "XXEmbeddedFileParametersMacInfo": "Type.EmbeddedFile.MacInfo",
            "XXFilespecEFDictionary": "Type.FileSpecification.EFDictionary",
            "XXInfo": "Type.Info",
            "XXNames": "Type.Names",
            "XXResources": "Type.Resources",
            "XXTrailer": "Type.Trailer",
            "XXViewerPreferences": "Type.ViewerPreferences",
        },
        "object.subtype_map": {
            "Image": "Type.Image",
            "Form": "Type.Form",
        },
        "task.map": {
            "set_min_pdf_version": "Task.SetMinPDFVersion",
            "optimize": "Task.Optimize",
            "dereference": "Task.Dereference",
        },
    }


def _document_seed() -> dict[str, Any]:
    return {
        "document.auto_decrypt": True,
        "graphic_object.map": {
            "arc": "GraphicObject.Arc",
            "endpoint_arc": "GraphicObject.EndpointArc",
            "solid_arc": "GraphicObject.SolidArc",
        },
        "graphic_object.arc.max_curves": 6,
        "image_loader.pdf.use_stringio": True,
        "io.chunk_size": 2**16,
        "page.default_media_box": "A4",
        "parser.on_correctable_error": _never_raise,
        "sorted_tree.max_leaf_node_size": 64,
    }


# -------------------------------
# Installed registries
# -------------------------------

_global_configuration: Configuration | None = None
_default_document_configuration: Configuration | None = None


def init_registries(
    global_overrides: Mapping[str, Any] | None = None,
    document_overrides: Mapping[str, Any] | None = None,
) -> tuple[Configuration, Configuration]:
    """Build both registries and install them for the whole process.

    Each registry is built from fresh seed data merged one level deep with
    the given overrides, so overriding one entry of a capability map keeps
    its sibling entries. Calling this again replaces the installed
    registries; stores already derived from the old ones are unaffected.

    Args:
        global_overrides: Options merged onto the process-wide seed.
        document_overrides: Options merged onto the per-document seed.

    Returns:
        The installed (process-wide, per-document) registries.

    Example:
        Use an accelerated Flate codec everywhere:
            ```python
            init_registries(global_overrides={"filter.map": {"Fl": FastFlate}})
            ```
    """
    global _global_configuration, _default_document_configuration

    global_config = Configuration(_global_seed()).merge(global_overrides or {})
    document_config = Configuration(_document_seed()).merge(document_overrides or {})
    _global_configuration = global_config
    _default_document_configuration = document_config

    get_global_logger().verbose(
        "REGISTRY",
        f"Initialized registries ({len(global_config)} process-wide, "
        f"{len(document_config)} per-document options)",
    )
    return global_config, document_config


def global_configuration() -> Configuration:
    """Return the process-wide registry, initializing it on first use."""
    if _global_configuration is None:
        return init_registries()[0]
    return _global_configuration


def default_document_configuration() -> Configuration:
    """Return the per-document defaults, initializing them on first use."""
    if _default_document_configuration is None:
        return init_registries()[1]
    return _default_document_configuration


def with_defaults(
    overrides: Configuration | Mapping[str, Any] | None = None,
) -> Configuration:
    """Create a document store: the per-document defaults plus overrides.

    Args:
        overrides: User-supplied document options.

    Returns:
        A new Configuration; the defaults registry is not modified.
    """
    return default_document_configuration().merge(overrides or {})


def with_global(
    overrides: Configuration | Mapping[str, Any] | None = None,
) -> Configuration:
    """Create a capability store: the process-wide registry plus overrides.

    Used when a document overrides a namespace that lives in the
    process-wide registry, e.g. its own "filter.map" entries.
    """
    return global_configuration().merge(overrides or {})
