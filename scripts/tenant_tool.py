#!/usr/bin/env python3
"""Operator helpers for the tenant registries.

Examples:
    python scripts/tenant_tool.py resolve nail-salons.dallas.near-me.us
    python scripts/tenant_tool.py resolve water-refill.near-me.us --path /austin
    python scripts/tenant_tool.py cities --state TX
    python scripts/tenant_tool.py hostnames --category nail-salons
    python scripts/tenant_tool.py validate-layouts
"""
import argparse
import json
import logging

from nearme.core.config import get_settings
from nearme.modules.layouts import LayoutSelector
from nearme.multitenancy.tenant_resolution import TenantResolver
from nearme.services import directory_service
from nearme.services.bootstrap_service import RegistrySeedError, build_registries


def _resolve(resolver: TenantResolver, args: argparse.Namespace) -> int:
    ctx = resolver.resolve(args.host, args.path)
    payload = {
        'host': ctx.host,
        'blocked': ctx.blocked,
        'category': ctx.category,
        'raw_category': ctx.raw_category,
        'city': ctx.city,
        'raw_city': ctx.raw_city,
        'state': ctx.state,
        'kind': ctx.kind.value if ctx.kind else None,
    }
    print(json.dumps(payload, indent=2))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description='Inspect near-me tenant resolution.')
    parser.add_argument('--verbose', action='store_true', help='Log registry loading at DEBUG level.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    resolve_parser = subparsers.add_parser('resolve', help='Resolve a hostname to its tenant.')
    resolve_parser.add_argument('host')
    resolve_parser.add_argument('--path', default=None)

    cities_parser = subparsers.add_parser('cities', help='List registered cities.')
    cities_parser.add_argument('--state', default=None)

    hostnames_parser = subparsers.add_parser('hostnames', help='Enumerate crawlable tenant URLs.')
    hostnames_parser.add_argument('--category', default=None)

    subparsers.add_parser('validate-layouts', help='Report vertical categories without a dedicated layout.')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = get_settings()
    try:
        registries = build_registries(settings)
    except RegistrySeedError as exc:
        raise SystemExit(str(exc)) from exc

    if args.command == 'resolve':
        resolver = TenantResolver(registries, settings.ROOT_DOMAIN, settings.extra_root_domains)
        return _resolve(resolver, args)

    if args.command == 'cities':
        cities = registries.cities
        keys = cities.cities_for_state(args.state) if args.state else cities.all_cities()
        for key in keys:
            print(f'{key:<20} {cities.lookup_state(key)}')
        return 0

    if args.command == 'hostnames':
        for link in directory_service.tenant_links(registries, settings.ROOT_DOMAIN):
            if args.category and link.category != args.category:
                continue
            print(link.url)
        return 0

    missing = LayoutSelector().validate(registries.verticals.categories())
    print('All vertical categories have a dedicated layout.' if not missing else '\n'.join(missing))
    return 1 if missing else 0


if __name__ == '__main__':
    raise SystemExit(main())
