"""
Tests for pdfconf.config.resolver module.

Tests resolution of options to implementations including:
- Pass-through of live implementations
- String resolution through the implementation table
- Tolerance of unresolvable names and explicit None entries
- Fallback invocation
- resolve_required and resolve_all helpers
- Readers sharing one store across threads
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import threading
import time

import pytest

from pdfconf.config import Configuration, resolve, resolve_all, resolve_required
from pdfconf.exceptions import CapabilityError, PdfConfError
from pdfconf.implementations import register_implementation, register_lazy_implementation


class FlateImpl:
    """Stand-in filter implementation."""


class TestResolve:
    """Tests for resolve()."""

    def test_live_implementation_passes_through(self):
        """Test that a stored class is returned unchanged."""
        config = Configuration({"filter.map": {"Fl": FlateImpl}})

        assert resolve(config, "filter.map", "Fl") is FlateImpl

    def test_string_resolves_through_table(self):
        """Test that a stored name resolves to the registered implementation."""
        register_implementation("NamespaceX.FlateImpl", FlateImpl)
        config = Configuration({"filter.map": {"Fl": "NamespaceX.FlateImpl"}})

        assert resolve(config, "filter.map", "Fl") is FlateImpl

    def test_option_without_key(self):
        """Test resolving a plain string option such as encryption.aes."""
        register_implementation("Encryption.RubyAES", FlateImpl)
        config = Configuration({"encryption.aes": "Encryption.RubyAES"})

        assert resolve(config, "encryption.aes") is FlateImpl

    def test_unknown_name_returns_none(self):
        """Test that an unregistered name yields None instead of raising."""
        config = Configuration({"filter.map": {"Fl": "NamespaceX.Missing"}})

        assert resolve(config, "filter.map", "Fl") is None

    def test_unknown_name_uses_fallback(self):
        """Test that the fallback's result replaces an unresolvable name."""
        config = Configuration({"filter.map": {"Fl": "NamespaceX.Missing"}})

        result = resolve(config, "filter.map", "Fl", fallback=lambda name: "fallback")

        assert result == "fallback"

    def test_fallback_receives_option_name(self):
        """Test that the fallback is called with the option name."""
        seen = []
        config = Configuration()

        resolve(config, "task.map", "optimize", fallback=seen.append)

        assert seen == ["task.map"]

    def test_explicit_none_without_fallback(self):
        """Test that a recognized-but-unimplemented entry yields None."""
        config = Configuration({"filter.map": {"CCF": None}})

        assert resolve(config, "filter.map", "CCF") is None

    def test_explicit_none_uses_fallback(self):
        """Test that explicit None triggers the fallback like a missing entry."""
        config = Configuration({"filter.map": {"CCF": None}})

        result = resolve(config, "filter.map", "CCF", fallback=lambda name: FlateImpl)

        assert result is FlateImpl

    def test_missing_option_uses_fallback(self):
        """Test that a never-set option triggers the fallback."""
        result = resolve(Configuration(), "color_space.map", "Lab", fallback=lambda n: 42)

        assert result == 42

    def test_fallback_not_called_when_resolved(self):
        """Test that the fallback is ignored once a value was found."""
        config = Configuration({"filter.map": {"Fl": FlateImpl}})

        def fail(name):
            raise AssertionError("fallback must not be called")

        assert resolve(config, "filter.map", "Fl", fallback=fail) is FlateImpl

    def test_key_on_scalar_is_ignored(self):
        """Test that a key is tolerated when the value cannot be indexed."""
        register_implementation("Encryption.FastAES", FlateImpl)
        config = Configuration({"encryption.aes": "Encryption.FastAES"})

        assert resolve(config, "encryption.aes", "anything") is FlateImpl

    def test_key_on_missing_option(self):
        """Test that a key on a never-set option yields None."""
        assert resolve(Configuration(), "filter.map", "Fl") is None

    def test_key_missing_from_map(self):
        """Test that a key absent from the map yields None."""
        config = Configuration({"filter.map": {"Fl": FlateImpl}})

        assert resolve(config, "filter.map", "LZW") is None

    def test_sequence_index(self):
        """Test that an integer key selects an entry of a sequence."""
        register_implementation("ImageLoader.PNG", FlateImpl)
        config = Configuration({"image_loader": ["ImageLoader.JPEG", "ImageLoader.PNG"]})

        assert resolve(config, "image_loader", 1) is FlateImpl

    @pytest.mark.parametrize("key", [5, "first", True])
    def test_sequence_bad_index(self, key):
        """Test that out-of-range or non-integer keys yield None."""
        register_implementation("ImageLoader.PNG", FlateImpl)
        config = Configuration({"image_loader": ["ImageLoader.JPEG", "ImageLoader.PNG"]})

        assert resolve(config, "image_loader", key) is None

    def test_none_is_a_valid_key(self):
        """Test that None can be used as a map key."""
        config = Configuration({"m": {None: FlateImpl}})

        assert resolve(config, "m", None) is FlateImpl

    def test_unavailable_lazy_implementation(self):
        """Test that an optional implementation failing to import is a miss."""

        def load():
            raise ImportError("no native AES")

        register_lazy_implementation("Encryption.FastAES", load)
        config = Configuration({"encryption.aes": "Encryption.FastAES"})

        assert resolve(config, "encryption.aes") is None
        assert resolve(config, "encryption.aes", fallback=lambda n: "ruby") == "ruby"

    def test_configuration_resolve_method(self):
        """Test that Configuration.resolve delegates to resolve()."""
        config = Configuration({"filter.map": {"Fl": FlateImpl}})

        assert config.resolve("filter.map", "Fl") is FlateImpl
        assert config.resolve("filter.map", "X", lambda n: 1) == 1


class TestResolveRequired:
    """Tests for resolve_required()."""

    def test_returns_implementation(self):
        """Test that a resolvable capability is returned."""
        config = Configuration({"filter.map": {"Fl": FlateImpl}})

        assert resolve_required(config, "filter.map", "Fl") is FlateImpl

    def test_raises_for_unimplemented_entry(self):
        """Test that a None entry raises CapabilityError naming the entry."""
        config = Configuration({"filter.map": {"CCF": None}})

        with pytest.raises(CapabilityError, match="CCF") as exc_info:
            resolve_required(config, "filter.map", "CCF")

        assert exc_info.value.option == "filter.map"
        assert exc_info.value.key == "CCF"

    def test_raises_for_missing_option(self):
        """Test that a never-set option raises without a key."""
        with pytest.raises(CapabilityError) as exc_info:
            resolve_required(Configuration(), "encryption.aes")

        assert exc_info.value.key is None
        assert isinstance(exc_info.value, PdfConfError)


class TestResolveAll:
    """Tests for resolve_all()."""

    def test_resolves_in_order_dropping_misses(self, register_fakes):
        """Test that registered loaders come back in list order."""
        impls = register_fakes("ImageLoader.JPEG", "ImageLoader.PDF")
        config = Configuration(
            {"image_loader": ["ImageLoader.JPEG", "ImageLoader.PNG", "ImageLoader.PDF"]}
        )

        assert resolve_all(config, "image_loader") == [
            impls["ImageLoader.JPEG"],
            impls["ImageLoader.PDF"],
        ]

    def test_live_entries_pass_through(self):
        """Test that classes stored in the list are kept."""
        config = Configuration({"image_loader": [FlateImpl, None]})

        assert resolve_all(config, "image_loader") == [FlateImpl]

    def test_single_value(self):
        """Test that a non-sequence option is resolved as one entry."""
        config = Configuration({"image_loader": FlateImpl})

        assert resolve_all(config, "image_loader") == [FlateImpl]

    def test_missing_option(self):
        """Test that a never-set option gives an empty list."""
        assert resolve_all(Configuration(), "image_loader") == []


class TestConcurrentResolve:
    """Tests for resolving from one shared store on several threads."""

    def test_reader_during_slow_load_gets_implementation(self):
        """Test that a resolve racing a slow lazy load still resolves."""
        started = threading.Event()
        calls = []

        def load():
            calls.append(1)
            started.set()
            time.sleep(0.2)
            return FlateImpl

        register_lazy_implementation("Filter.FastFlate", load)
        config = Configuration({"filter.map": {"Fl": "Filter.FastFlate"}})
        results = []

        thread = threading.Thread(
            target=lambda: results.append(resolve(config, "filter.map", "Fl"))
        )
        thread.start()
        assert started.wait(timeout=1)

        results.append(resolve(config, "filter.map", "Fl"))
        thread.join(timeout=5)

        assert results == [FlateImpl, FlateImpl]
        assert calls == [1]

    def test_concurrent_readers_agree(self, register_fakes):
        """Test that parallel resolves of every entry give the same answers."""
        impls = register_fakes("Filter.FlateDecode", "Filter.LZWDecode")
        register_lazy_implementation("Filter.FastFlate", lambda: FlateImpl)
        config = Configuration(
            {
                "filter.map": {
                    "Fl": "Filter.FlateDecode",
                    "LZW": "Filter.LZWDecode",
                    "Fast": "Filter.FastFlate",
                    "CCF": None,
                },
            }
        )
        expected = {
            "Fl": impls["Filter.FlateDecode"],
            "LZW": impls["Filter.LZWDecode"],
            "Fast": FlateImpl,
            "CCF": None,
        }

        def read_all(_):
            return {key: resolve(config, "filter.map", key) for key in expected}

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(read_all, range(64)))

        assert all(result == expected for result in results)
