from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from nearme.multitenancy.hostname import normalize_host


class VerticalKind(str, Enum):
    SERVICES = 'services'
    WATER_REFILL = 'water_refill'
    SENIOR_CARE = 'senior_care'


class LocationSource(str, Enum):
    SUBDOMAIN = 'subdomain'
    PATH = 'path'


@dataclass(frozen=True)
class VerticalEntry:
    hostname: str
    category: str
    label: str
    kind: VerticalKind
    location_source: LocationSource = LocationSource.SUBDOMAIN
    description: str = ''

    @property
    def is_path_based(self) -> bool:
        return self.location_source is LocationSource.PATH


class VerticalRegistry:
    """Hand-registered verticals keyed by their exact hostname."""

    def __init__(self, entries: Iterable[VerticalEntry] = ()) -> None:
        self._entries: dict[str, VerticalEntry] = {}
        for entry in entries:
            self.register_vertical(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def find_vertical(self, hostname: str) -> VerticalEntry | None:
        return self._entries.get(normalize_host(hostname))

    def entries(self) -> list[VerticalEntry]:
        return sorted(self._entries.values(), key=lambda entry: entry.hostname)

    def categories(self) -> list[str]:
        return sorted({entry.category for entry in self._entries.values()})

    def register_vertical(self, entry: VerticalEntry) -> VerticalEntry:
        hostname = normalize_host(entry.hostname)
        if not hostname:
            raise ValueError('Vertical hostname must not be empty')
        entry = VerticalEntry(
            hostname=hostname,
            category=entry.category.strip().lower(),
            label=entry.label.strip(),
            kind=VerticalKind(entry.kind),
            location_source=LocationSource(entry.location_source),
            description=entry.description,
        )
        entries = dict(self._entries)
        entries[hostname] = entry
        self._entries = entries
        return entry

    def unregister_vertical(self, hostname: str) -> bool:
        hostname = normalize_host(hostname)
        if hostname not in self._entries:
            return False
        entries = dict(self._entries)
        del entries[hostname]
        self._entries = entries
        return True


class Blocklist:
    """Reserved hostnames that never resolve to a tenant.

    A host is blocked when it equals a listed hostname or sits below one on a
    label boundary (``x.admin.near-me.us`` but not ``myadmin.near-me.us``).
    """

    def __init__(self, hosts: Iterable[str] = ()) -> None:
        self._hosts: frozenset[str] = frozenset()
        for host in hosts:
            self.block(host)

    def __len__(self) -> int:
        return len(self._hosts)

    def hosts(self) -> list[str]:
        return sorted(self._hosts)

    def is_blocked(self, hostname: str) -> bool:
        host = normalize_host(hostname)
        if not host:
            return False
        hosts = self._hosts
        labels = host.split('.')
        return any('.'.join(labels[index:]) in hosts for index in range(len(labels)))

    def block(self, hostname: str) -> str:
        host = normalize_host(hostname)
        if not host:
            raise ValueError('Blocked hostname must not be empty')
        self._hosts = self._hosts | {host}
        return host

    def unblock(self, hostname: str) -> bool:
        host = normalize_host(hostname)
        if host not in self._hosts:
            return False
        self._hosts = self._hosts - {host}
        return True
