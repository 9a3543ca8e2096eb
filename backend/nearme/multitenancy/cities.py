from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from nearme.multitenancy.states import full_state_name


UNKNOWN_STATE = 'Unknown State'

_SEPARATORS = re.compile(r'[\s_]+')


def normalize_city_key(value: str) -> str:
    key = _SEPARATORS.sub('-', value.strip().lower())
    return re.sub(r'-{2,}', '-', key).strip('-')


@dataclass(frozen=True)
class CityStateEntry:
    city: str
    state: str
    aliases: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def create(cls, city: str, state: str, aliases: Iterable[str] = ()) -> CityStateEntry:
        key = normalize_city_key(city)
        if not key:
            raise ValueError('City key must not be empty')
        normalized_aliases: list[str] = []
        for alias in aliases:
            alias_key = normalize_city_key(alias)
            # An alias repeating the canonical key adds nothing to the lookup.
            if not alias_key or alias_key == key or alias_key in normalized_aliases:
                continue
            normalized_aliases.append(alias_key)
        return cls(city=key, state=full_state_name(state), aliases=tuple(normalized_aliases))


class CityStateRegistry:
    """Canonical city keys mapped to their state, with flat aliases.

    Reads go through a single snapshot attribute. ``register_city`` builds new
    tables and swaps the snapshot in one assignment, so request handlers never
    see a half-applied registration.
    """

    def __init__(self, entries: Iterable[CityStateEntry] = ()) -> None:
        self._snapshot: tuple[dict[str, CityStateEntry], dict[str, str]] = ({}, {})
        for entry in entries:
            self.register_city(entry)

    def __len__(self) -> int:
        return len(self._snapshot[0])

    def __contains__(self, city: object) -> bool:
        return isinstance(city, str) and self.is_known_city(city)

    def __iter__(self) -> Iterator[CityStateEntry]:
        return iter(list(self._snapshot[0].values()))

    def canonical_city(self, city: str) -> str | None:
        return self._snapshot[1].get(normalize_city_key(city))

    def lookup_state(self, city: str) -> str:
        entries, lookup = self._snapshot
        canonical = lookup.get(normalize_city_key(city))
        if canonical is None:
            return UNKNOWN_STATE
        return entries[canonical].state

    def is_known_city(self, city: str) -> bool:
        return normalize_city_key(city) in self._snapshot[1]

    def get_entry(self, city: str) -> CityStateEntry | None:
        entries, lookup = self._snapshot
        canonical = lookup.get(normalize_city_key(city))
        return entries.get(canonical) if canonical else None

    def cities_for_state(self, state: str) -> list[str]:
        target = full_state_name(state).lower()
        return sorted(entry.city for entry in self._snapshot[0].values() if entry.state.lower() == target)

    def all_states(self) -> list[str]:
        return sorted({entry.state for entry in self._snapshot[0].values()})

    def all_cities(self) -> list[str]:
        return sorted(self._snapshot[0])

    def search_cities(self, query: str) -> list[CityStateEntry]:
        needle = normalize_city_key(query)
        if not needle:
            return []
        matches = [
            entry
            for entry in self._snapshot[0].values()
            if needle in entry.city or any(needle in alias for alias in entry.aliases)
        ]
        return sorted(matches, key=lambda entry: entry.city)

    def register_city(self, entry: CityStateEntry) -> CityStateEntry:
        """Insert or replace a canonical city together with all of its aliases.

        Raises ``ValueError`` when the city key or one of its aliases already
        belongs to a different canonical city.
        """
        entry = CityStateEntry.create(entry.city, entry.state, entry.aliases)
        entries, lookup = self._snapshot

        for key in (entry.city, *entry.aliases):
            owner = lookup.get(key)
            if owner is not None and owner != entry.city:
                raise ValueError(f'{key!r} already resolves to {owner!r}')

        new_entries = dict(entries)
        new_entries[entry.city] = entry
        new_lookup = {key: canonical for key, canonical in lookup.items() if canonical != entry.city}
        new_lookup[entry.city] = entry.city
        for alias in entry.aliases:
            new_lookup[alias] = entry.city

        self._snapshot = (new_entries, new_lookup)
        return entry
