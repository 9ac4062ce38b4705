"""Unit tests for the CodeRegistry contract and its lookup cache."""

from __future__ import annotations

import threading
from types import MappingProxyType

import pytest

from stdcodes import CodeRegistry, StdCodesError, UnknownConstantError
from stdcodes.registry import _CACHE, _RegistryCache

# =============================================================================
# Test Registries
# =============================================================================


class _Colour(CodeRegistry):
    RED = "R"
    GREEN = "G"
    BLUE = "B"
    CRIMSON = "R"  # Alias of RED


class _ColourName(CodeRegistry):
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    CRIMSON = "Red"


# =============================================================================
# Registry Contract Tests
# =============================================================================


class TestCodeRegistry:
    """Tests for the shared lookup methods."""

    def test_get_all_keeps_declaration_order_and_aliases(self) -> None:
        """Test that get_all lists every member, aliases included."""
        assert dict(_Colour.get_all()) == {"RED": "R", "GREEN": "G", "BLUE": "B", "CRIMSON": "R"}
        assert list(_Colour.get_all()) == ["RED", "GREEN", "BLUE", "CRIMSON"]

    def test_get_all_is_read_only(self) -> None:
        """Test that the cached mapping cannot be modified."""
        mapping = _Colour.get_all()
        assert isinstance(mapping, MappingProxyType)
        with pytest.raises(TypeError):
            mapping["PINK"] = "P"  # type: ignore[index]

    def test_get_all_is_cached(self) -> None:
        """Test that repeated calls return the same mapping object."""
        assert _Colour.get_all() is _Colour.get_all()

    def test_enums_keeps_duplicates(self) -> None:
        """Test that enums returns declared codes without deduplication."""
        assert _Colour.enums() == ["R", "G", "B", "R"]

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("R", True), ("B", True), ("X", False), ("r", False), ("", False), (None, False), (1, False)],
        ids=["red", "blue", "unknown", "wrong_case", "empty", "none", "int"],
    )
    def test_includes(self, code: object, expected: bool) -> None:
        """Test membership for declared, undeclared and non-string values."""
        assert _Colour.includes(code) is expected

    def test_includes_member(self) -> None:
        """Test that enum members are accepted as their code."""
        assert _Colour.includes(_Colour.GREEN)

    def test_get_returns_code_unchanged(self) -> None:
        """Test that get is an identity lookup gated on membership."""
        assert _Colour.get("G") == "G"
        assert _Colour.get("X") is None
        assert _Colour.get("X", "fallback") == "fallback"

    def test_get_constant_first_declaration_wins(self) -> None:
        """Test that a shared code resolves to the first declaring member."""
        assert _Colour.get_constant("R") == "RED"
        assert _Colour.get_constant("B") == "BLUE"

    @pytest.mark.parametrize("value", ["X", "", None, 42], ids=["unknown", "empty", "none", "int"])
    def test_get_constant_unknown(self, value: object) -> None:
        """Test that unknown values give None instead of raising."""
        assert _Colour.get_constant(value) is None

    def test_validate_accepts_declared_code(self) -> None:
        """Test that validate returns None for a declared code."""
        assert _Colour.validate("G") is None

    def test_validate_rejects_unknown_code(self) -> None:
        """Test that validate raises UnknownConstantError carrying the value."""
        with pytest.raises(UnknownConstantError, match="Unknown _Colour constant: 'X'") as exc_info:
            _Colour.validate("X")
        assert exc_info.value.value == "X"
        assert exc_info.value.registry == "_Colour"

    def test_unknown_constant_error_hierarchy(self) -> None:
        """Test that UnknownConstantError is both a library and a value error."""
        assert issubclass(UnknownConstantError, StdCodesError)
        assert issubclass(UnknownConstantError, ValueError)

    def test_members_are_strings(self) -> None:
        """Test that members compare equal to their code."""
        assert _Colour.RED == "R"
        assert f"{_Colour.BLUE}" == "B"


# =============================================================================
# Paired Lookup Tests
# =============================================================================


class TestPairedLookup:
    """Tests for translating values between registries sharing member names."""

    def test_lookup_paired(self) -> None:
        """Test translation through the shared member name."""
        assert _Colour._lookup_paired(_ColourName, "G") == "Green"
        assert _ColourName._lookup_paired(_Colour, "Blue") == "B"

    def test_lookup_paired_alias_uses_first_member(self) -> None:
        """Test that an alias code translates through the first declared member."""
        assert _Colour._lookup_paired(_ColourName, "R") == "Red"

    def test_lookup_paired_unknown(self) -> None:
        """Test that unknown values translate to None."""
        assert _Colour._lookup_paired(_ColourName, "X") is None
        assert _Colour._lookup_paired(_ColourName, None) is None

    def test_paired_map_cached_until_reset(self) -> None:
        """Test that the paired map is cached per registry and dropped by reset_caches."""
        _Colour._lookup_paired(_ColourName, "G")
        cached = _CACHE.fetch(_Colour, _ColourName, lambda: {})
        assert cached["GREEN"] == "Green"

        _Colour.reset_caches()

        rebuilt = _CACHE.fetch(_Colour, _ColourName, lambda: {})
        assert dict(rebuilt) == {}
        _Colour.reset_caches()


# =============================================================================
# Cache Tests
# =============================================================================


class TestRegistryCache:
    """Tests for the lock-guarded lookup cache."""

    def test_fetch_builds_once(self) -> None:
        """Test that the build callback runs only on the first fetch."""
        cache = _RegistryCache()
        calls: list[int] = []

        def build() -> dict[str, str]:
            calls.append(1)
            return {"A": "a"}

        first = cache.fetch(_Colour, "kind", build)
        second = cache.fetch(_Colour, "kind", build)
        assert first is second
        assert len(calls) == 1

    def test_clear_only_drops_owner(self) -> None:
        """Test that clearing one owner keeps other owners' maps."""
        cache = _RegistryCache()
        colour = cache.fetch(_Colour, "kind", lambda: {"A": "a"})
        name = cache.fetch(_ColourName, "kind", lambda: {"B": "b"})

        cache.clear(_Colour)

        assert cache.fetch(_Colour, "kind", lambda: {"C": "c"}) is not colour
        assert cache.fetch(_ColourName, "kind", lambda: {"D": "d"}) is name

    def test_reset_caches_rebuilds_get_all(self) -> None:
        """Test that get_all returns a fresh mapping after reset_caches."""
        before = _Colour.get_all()
        _Colour.reset_caches()
        after = _Colour.get_all()
        assert before is not after
        assert before == after

    def test_concurrent_fetch_publishes_single_map(self) -> None:
        """Test that racing threads all observe the same published map."""
        cache = _RegistryCache()
        barrier = threading.Barrier(8)
        results: list[object] = []

        def worker() -> None:
            barrier.wait()
            results.append(cache.fetch(_Colour, "kind", lambda: {"A": "a"}))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
