import pytest

from nearme.multitenancy.cities import UNKNOWN_STATE
from nearme.multitenancy.seed_data import RESERVED_PATH_SEGMENTS
from nearme.multitenancy.tenant_resolution import NATIONWIDE, TenantContext, TenantRegistries, TenantResolver
from nearme.multitenancy.verticals import LocationSource, VerticalEntry, VerticalKind
from nearme.services.directory_service import known_combinations, tenant_hostname, tenant_links


ROOT = 'near-me.us'


def test_single_label_falls_back_to_services(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('dallas.near-me.us')
    assert ctx.category == 'services'
    assert ctx.raw_category == 'dallas'
    assert ctx.city is None
    assert ctx.state == NATIONWIDE
    assert ctx.kind is VerticalKind.SERVICES
    assert ctx.blocked is False


def test_category_and_city(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('nail-salons.dallas.near-me.us')
    assert ctx.category == 'nail-salons'
    assert ctx.city == 'dallas'
    assert ctx.state == 'Texas'
    assert ctx.kind is None
    assert ctx.category_label == 'Nail Salons'
    assert ctx.city_label == 'Dallas'


def test_path_based_vertical_takes_city_from_path(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('water-refill.near-me.us', path='/austin')
    assert ctx.category == 'water-refill'
    assert ctx.city == 'austin'
    assert ctx.state == 'Texas'
    assert ctx.kind is VerticalKind.WATER_REFILL
    assert ctx.is_path_based
    assert ctx.category_label == 'Water Refill Stations'


def test_blocked_host(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('admin.near-me.us')
    assert ctx.blocked is True
    assert ctx.category == ''
    assert ctx.city is None
    assert ctx.kind is None
    assert ctx == TenantContext.blocked_context('admin.near-me.us')


def test_unknown_city_keeps_city_with_sentinel_state(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('nail-salons.atlantis.near-me.us')
    assert ctx.category == 'nail-salons'
    assert ctx.city == 'atlantis'
    assert ctx.state == UNKNOWN_STATE
    assert ctx.kind is None


def test_alias_city_resolves_to_canonical_key(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('nail-salons.nyc.near-me.us')
    assert ctx.city == 'new-york'
    assert ctx.raw_city == 'nyc'
    assert ctx.state == 'New York'


@pytest.mark.parametrize('host', ['near-me.us', 'localhost', 'localhost:5173', '127.0.0.1', '', None, 'example.org'])
def test_zero_label_hosts_fall_back_to_services(resolver: TenantResolver, host: str | None) -> None:
    ctx = resolver.resolve(host)
    assert ctx.category == 'services'
    assert ctx.city is None
    assert ctx.kind is VerticalKind.SERVICES
    assert ctx.raw_category == ''


def test_malformed_hosts_fall_back_to_services(resolver: TenantResolver) -> None:
    for host in ['a.b.c.near-me.us', 'nail_salons.dallas.near-me.us', '...', ':::', 'near-me.us:abc']:
        ctx = resolver.resolve(host)
        assert ctx.category == 'services'
        assert ctx.blocked is False


def test_blocked_regardless_of_port_or_extra_labels(resolver: TenantResolver, registries: TenantRegistries) -> None:
    for blocked in registries.blocklist.hosts():
        assert resolver.resolve(blocked).blocked
        assert resolver.resolve(f'{blocked}:8443').blocked
        assert resolver.resolve(f'eu.{blocked}').blocked
        assert resolver.resolve(f'a.b.{blocked}').blocked


def test_blocklist_has_precedence_over_verticals(resolver: TenantResolver, registries: TenantRegistries) -> None:
    registries.blocklist.block('water-refill.near-me.us')
    assert resolver.resolve('water-refill.near-me.us', '/austin').blocked


def test_blocklist_does_not_match_substrings(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('myadmin.dallas.near-me.us')
    assert not ctx.blocked
    assert ctx.category == 'myadmin'


def test_www_root_is_blocked_but_www_tenants_resolve(resolver: TenantResolver) -> None:
    assert resolver.resolve('www.near-me.us').blocked
    ctx = resolver.resolve('www.nail-salons.dallas.near-me.us')
    assert not ctx.blocked
    assert (ctx.category, ctx.city) == ('nail-salons', 'dallas')


def test_path_changes_city_but_not_vertical(resolver: TenantResolver) -> None:
    seen = set()
    for path in ['/austin', '/denver', '/new-york/', '/nyc']:
        ctx = resolver.resolve('water-refill.near-me.us', path)
        assert ctx.category == 'water-refill'
        assert ctx.kind is VerticalKind.WATER_REFILL
        seen.add(ctx.city)
    assert seen == {'austin', 'denver', 'new-york'}


def test_path_vertical_without_path_has_no_city(resolver: TenantResolver) -> None:
    for path in [None, '', '/']:
        ctx = resolver.resolve('senior-care.near-me.us', path)
        assert ctx.kind is VerticalKind.SENIOR_CARE
        assert ctx.city is None
        assert ctx.state == NATIONWIDE


@pytest.mark.parametrize('path', ['/about', '/contact/', '/login?next=/austin', '/Resources'])
def test_path_vertical_site_pages_are_not_cities(resolver: TenantResolver, path: str) -> None:
    ctx = resolver.resolve('water-refill.near-me.us', path)
    assert ctx.category == 'water-refill'
    assert ctx.city is None
    assert ctx.raw_city is None
    assert ctx.state == NATIONWIDE


def test_site_page_segments_do_not_shadow_cities(registries: TenantRegistries) -> None:
    assert not RESERVED_PATH_SEGMENTS & set(registries.cities.all_cities())


def test_path_vertical_ignores_subdomain_city(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('water-refill.dallas.near-me.us', '/austin')
    assert ctx.kind is VerticalKind.WATER_REFILL
    assert ctx.city == 'austin'


def test_subdomain_vertical_takes_city_from_second_label(resolver: TenantResolver) -> None:
    ctx = resolver.resolve('services.dallas.near-me.us', '/austin')
    assert ctx.category == 'services'
    assert ctx.kind is VerticalKind.SERVICES
    assert ctx.city == 'dallas'
    assert ctx.state == 'Texas'

    root_only = resolver.resolve('services.near-me.us')
    assert root_only.city is None
    assert root_only.kind is VerticalKind.SERVICES


def test_vertical_wins_over_generic_pattern(resolver: TenantResolver, registries: TenantRegistries) -> None:
    registries.verticals.register_vertical(
        VerticalEntry(
            hostname='ev-charging.near-me.us',
            category='ev-charging',
            label='EV Charging Stations',
            kind=VerticalKind.SERVICES,
            location_source=LocationSource.SUBDOMAIN,
        )
    )
    ctx = resolver.resolve('ev-charging.denver.near-me.us')
    assert ctx.kind is VerticalKind.SERVICES
    assert ctx.category == 'ev-charging'
    assert ctx.city == 'denver'
    assert ctx.state == 'Colorado'


def test_micro_brand_domain_outside_root(resolver: TenantResolver, registries: TenantRegistries) -> None:
    registries.verticals.register_vertical(
        VerticalEntry(
            hostname='aquafinder.com',
            category='water-refill',
            label='AquaFinder',
            kind=VerticalKind.WATER_REFILL,
            location_source=LocationSource.PATH,
        )
    )
    ctx = resolver.resolve('www.aquafinder.com', '/miami')
    assert ctx.category == 'water-refill'
    assert ctx.city == 'miami'
    assert ctx.state == 'Florida'


def test_development_root_resolves_like_production(resolver: TenantResolver) -> None:
    assert resolver.resolve('nail-salons.dallas.localhost:5173') == resolver.resolve('nail-salons.dallas.near-me.us')
    assert resolver.resolve('water-refill.localhost', '/austin').kind is VerticalKind.WATER_REFILL
    assert resolver.resolve('admin.localhost').blocked


def test_resolution_is_deterministic(resolver: TenantResolver) -> None:
    first = resolver.resolve('Nail-Salons.Dallas.near-me.us:443')
    second = resolver.resolve('nail-salons.dallas.near-me.us')
    assert first == second
    with pytest.raises(AttributeError):
        first.city = 'austin'  # type: ignore[misc]


def test_registered_city_is_picked_up_without_new_resolver(resolver: TenantResolver, registries: TenantRegistries) -> None:
    from nearme.multitenancy.cities import CityStateEntry

    assert resolver.resolve('nail-salons.boise.near-me.us').state == UNKNOWN_STATE
    registries.cities.register_city(CityStateEntry.create('boise', 'ID'))
    assert resolver.resolve('nail-salons.boise.near-me.us').state == 'Idaho'


def test_known_combinations_round_trip(resolver: TenantResolver, registries: TenantRegistries) -> None:
    subdomain_categories = [
        category
        for category in registries.all_categories()
        if not any(entry.is_path_based for entry in registries.verticals.entries() if entry.category == category)
    ]
    pairs = known_combinations(subdomain_categories, registries.cities.all_cities())
    assert len(pairs) == len(subdomain_categories) * len(registries.cities)
    for category, city in pairs:
        ctx = resolver.resolve(tenant_hostname(category, city, ROOT))
        assert (ctx.category, ctx.city) == (category, city)


def test_tenant_links_round_trip(resolver: TenantResolver, registries: TenantRegistries) -> None:
    for link in tenant_links(registries, ROOT):
        ctx = resolver.resolve(link.host, link.path)
        assert (ctx.category, ctx.city) == (link.category, link.city)
        assert ctx.state == registries.cities.lookup_state(link.city)
