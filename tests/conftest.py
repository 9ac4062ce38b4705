"""Shared test fixtures for pyStdCodes tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from stdcodes.iso import ISO3166_1, ISO4217, ISO6391, ISO15924
from stdcodes.registry import CodeRegistry
from stdcodes.unece.uncefact import MeasureCode, MeasureName, MeasureSymbol, PackageCode, PackageName
from stdcodes.unstats import UNM49

ALL_REGISTRIES: list[type[CodeRegistry]] = [
    ISO15924,
    ISO3166_1,
    ISO4217,
    ISO6391,
    MeasureCode,
    MeasureName,
    MeasureSymbol,
    PackageCode,
    PackageName,
    UNM49,
]


@pytest.fixture(autouse=True)
def reset_registry_caches() -> Generator[None]:
    """Start and finish every test with empty registry caches."""
    for registry in ALL_REGISTRIES:
        registry.reset_caches()
    yield
    for registry in ALL_REGISTRIES:
        registry.reset_caches()
