"""Code registry base type and lookup cache.

Every registry in this package (ISO 15924, ISO 3166-1, ISO 4217, ISO 639-1,
UN/CEFACT measures and packages, UN M49) is a ``StrEnum`` deriving from
``CodeRegistry``. Members map a symbolic name to the canonical code string, so
``ISO3166_1.FR == "FR"`` and members can be used anywhere a string is expected.

``CodeRegistry`` adds the lookup contract shared by all registries:

- get_all(): name -> code mapping, declaration order, aliases included
- get(code, default): identity lookup gated on the code being declared
- includes(code) / validate(code): membership test and its raising form
- enums(): all declared codes, duplicates kept
- get_constant(value): reverse lookup code -> declaring member name
- reset_caches(): drop the maps memoized for this registry

Registries that have a paired registry (UN/CEFACT codes, names and symbols)
resolve cross lookups through the member name both registries share.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from .exceptions import UnknownConstantError

_LOGGER = logging.getLogger(__name__)

# =============================================================================
# Lookup Cache
# =============================================================================


class _RegistryCache:
    """Lazily built, read-only lookup maps keyed by (owner registry, kind).

    Maps are built outside the lock and published with ``setdefault``: readers
    only ever see complete maps, and two threads racing on the same key build
    identical maps, one of which is dropped.
    """

    _lock: threading.Lock
    _maps: dict[tuple[type, Hashable], Mapping[Any, str]]

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._maps = {}

    def fetch(self, owner: type, kind: Hashable, build: Callable[[], Mapping[Any, str]]) -> Mapping[Any, str]:
        """Return the cached map for (owner, kind), building it on first use."""
        key = (owner, kind)
        cached = self._maps.get(key)
        if cached is not None:
            return cached

        mapping = MappingProxyType(dict(build()))
        _LOGGER.debug("Built %s lookup for %s (%d entries)", kind, owner.__name__, len(mapping))

        with self._lock:
            return self._maps.setdefault(key, mapping)

    def clear(self, owner: type) -> None:
        """Drop every map owned by ``owner``."""
        with self._lock:
            for key in [key for key in self._maps if key[0] is owner]:
                del self._maps[key]
        _LOGGER.debug("Reset lookup caches of %s", owner.__name__)


_CACHE = _RegistryCache()

_MEMBERS = "members"
_REVERSE = "reverse"


# =============================================================================
# Registry Base
# =============================================================================


class CodeRegistry(StrEnum):
    """Base class for closed sets of standardized string codes.

    Subclasses only declare members; the lookup methods are shared.

    Examples:
        >>> ISO3166_1.get("FR")
        'FR'
        >>> ISO3166_1.get("XX", "ZZ")
        'ZZ'
        >>> ISO3166_1.get_constant("FR")
        'FR'
    """

    @classmethod
    def get_all(cls) -> Mapping[str, str]:
        """Return every declared member as a read-only name -> code mapping.

        The mapping keeps declaration order and includes aliases (members
        declared with a code already used by an earlier member).
        """
        return _CACHE.fetch(cls, _MEMBERS, lambda: {name: str(member) for name, member in cls.__members__.items()})

    @classmethod
    def get(cls, code: Any, default: Any = None) -> Any:
        """Return ``code`` unchanged if it is declared by this registry, else ``default``."""
        return code if cls.includes(code) else default

    @classmethod
    def includes(cls, code: Any) -> bool:
        """True if ``code`` is one of the codes declared by this registry."""
        return isinstance(code, str) and code in cls._reverse()

    @classmethod
    def enums(cls) -> list[str]:
        """Return all declared codes in declaration order, duplicates included."""
        return list(cls.get_all().values())

    @classmethod
    def validate(cls, code: Any) -> None:
        """Check that ``code`` is declared by this registry.

        Raises:
            UnknownConstantError: If the code is not declared
        """
        if not cls.includes(code):
            raise UnknownConstantError(code, cls.__name__)

    @classmethod
    def get_constant(cls, value: Any) -> str | None:
        """Return the name of the member declaring ``value``, or None.

        When several members share a code the first declared one wins.
        """
        if not isinstance(value, str):
            return None
        return cls._reverse().get(value)

    @classmethod
    def reset_caches(cls) -> None:
        """Forget the maps memoized for this registry, including paired registry maps."""
        _CACHE.clear(cls)

    @classmethod
    def _reverse(cls) -> Mapping[str, str]:
        def build() -> dict[str, str]:
            reverse: dict[str, str] = {}
            for name, code in cls.get_all().items():
                reverse.setdefault(code, name)
            return reverse

        return _CACHE.fetch(cls, _REVERSE, build)

    @classmethod
    def _lookup_paired(cls, paired: type[CodeRegistry], value: Any) -> str | None:
        """Translate ``value`` into the paired registry through the shared member name.

        Args:
            paired: Registry declaring the same member names with other values
            value: A value declared by this registry

        Returns:
            The paired registry's value for the same member, or None
        """
        constant = cls.get_constant(value)
        if constant is None:
            return None
        return _CACHE.fetch(cls, paired, paired.get_all).get(constant)
