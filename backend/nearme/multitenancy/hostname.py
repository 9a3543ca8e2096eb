from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import unquote


@dataclass(frozen=True)
class ParsedHost:
    host: str
    labels: tuple[str, ...] = field(default_factory=tuple)
    base_domain: str | None = None
    had_www: bool = False
    canonical_host: str = ''

    @property
    def category_label(self) -> str | None:
        return self.labels[0] if self.labels else None

    @property
    def city_label(self) -> str | None:
        return self.labels[1] if len(self.labels) > 1 else None


def strip_port(host: str) -> str:
    host = host.strip().lower()
    if host.startswith('['):
        # IPv6 literal, e.g. [::1]:8080
        return host.split(']', 1)[0] + ']'
    return host.split(':', 1)[0]


def normalize_host(host: str | None) -> str:
    if not host:
        return ''
    return strip_port(host).rstrip('.')


def valid_slug(slug: str) -> bool:
    if not slug:
        return False
    if len(slug) < 2 or len(slug) > 63:
        return False
    if slug[0] == '-' or slug[-1] == '-':
        return False
    for ch in slug:
        if not (ch.isascii() and (ch.isalnum() or ch == '-')):
            return False
    return True


def _match_base_domain(host: str, base_domains: Iterable[str]) -> str | None:
    best: str | None = None
    for base in base_domains:
        base = base.lower()
        if host == base or host.endswith(f'.{base}'):
            if best is None or len(base) > len(best):
                best = base
    return best


def parse_hostname(host: str | None, root_domain: str, extra_root_domains: Iterable[str] = ()) -> ParsedHost:
    """Split ``host`` into at most two labels (``[category, city]``) under a known root.

    Never raises; anything that does not fit the ``category.city.root`` shape
    parses to zero labels.
    """
    normalized = normalize_host(host)
    root_domain = root_domain.lower()
    base_domain = _match_base_domain(normalized, [root_domain, *extra_root_domains])
    if not base_domain:
        return ParsedHost(host=normalized, canonical_host=normalized)

    # Drop exactly one separator so an empty label ('a..near-me.us') stays visible.
    subdomain = normalized[: -len(base_domain) - 1] if normalized != base_domain else ''
    labels = subdomain.split('.') if subdomain else []
    had_www = bool(labels) and labels[0] == 'www'
    if had_www:
        labels = labels[1:]

    canonical_host = '.'.join([*(['www'] if had_www else []), *labels, root_domain])
    if len(labels) > 2 or not all(valid_slug(label) for label in labels):
        return ParsedHost(host=normalized, base_domain=base_domain, had_www=had_www, canonical_host=canonical_host)

    return ParsedHost(
        host=normalized,
        labels=tuple(labels),
        base_domain=base_domain,
        had_www=had_www,
        canonical_host=canonical_host,
    )


def first_path_segment(path: str | None) -> str | None:
    if not path:
        return None
    path = path.split('?', 1)[0].split('#', 1)[0]
    for part in path.split('/'):
        segment = unquote(part).strip().lower()
        if segment:
            return segment
    return None
