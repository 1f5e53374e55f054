"""
Pytest configuration and shared fixtures for pdfconf tests.

This module provides reusable fixtures and test utilities used across
the test suite. Process-wide state (the implementation table, the
registries and the global logger) is isolated per test.
"""

from __future__ import annotations

from typing import Any

import pytest

from pdfconf import implementations, logging, registries
from pdfconf.config import Configuration


@pytest.fixture(autouse=True)
def isolated_implementations(monkeypatch):
    """
    Give every test its own copy of the implementation table.

    Registrations made during a test are discarded afterwards.
    """
    monkeypatch.setattr(
        implementations, "_IMPLEMENTATIONS", dict(implementations._IMPLEMENTATIONS)
    )
    monkeypatch.setattr(
        implementations, "_LAZY_LOADERS", dict(implementations._LAZY_LOADERS)
    )


@pytest.fixture(autouse=True)
def fresh_registries(monkeypatch):
    """Force the registries to be rebuilt from seed data within each test."""
    monkeypatch.setattr(registries, "_global_configuration", None)
    monkeypatch.setattr(registries, "_default_document_configuration", None)


@pytest.fixture(autouse=True)
def silent_global_logger(monkeypatch):
    """Restore the silent global logger after each test."""
    monkeypatch.setattr(logging, "_global_logger", logging.SilentLogger())


@pytest.fixture
def sample_options() -> dict[str, Any]:
    """
    Provide a small option set covering every kind of value.

    Returns a fresh dict for each test.
    """
    return {
        "io.chunk_size": 4096,
        "document.auto_decrypt": True,
        "filter.map": {
            "Fl": "Filter.FlateDecode",
            "LZW": "Filter.LZWDecode",
            "CCF": None,
        },
        "image_loader": ["ImageLoader.JPEG", "ImageLoader.PNG"],
        "page.default_media_box": "A4",
    }


@pytest.fixture
def sample_config(sample_options) -> Configuration:
    """Provide a Configuration built from sample_options."""
    return Configuration(sample_options)


@pytest.fixture
def register_fakes():
    """
    Factory fixture registering a fake class under each given name.

    Usage:
        impls = register_fakes("Filter.FlateDecode", "Filter.LZWDecode")
        impls["Filter.FlateDecode"]  # the registered class
    """
    def _register(*names: str) -> dict[str, type]:
        created: dict[str, type] = {}
        for name in names:
            fake = type(name.replace(".", "_"), (), {"registered_name": name})
            implementations.register_implementation(name, fake)
            created[name] = fake
        return created

    return _register
