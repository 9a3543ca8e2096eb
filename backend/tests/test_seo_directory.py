import pytest

from nearme.multitenancy.tenant_resolution import TenantContext, TenantRegistries, TenantResolver
from nearme.services.directory_service import known_combinations, tenant_hostname, tenant_links
from nearme.services.seo_service import build_keywords, build_page_meta, generate_title


def test_generate_title() -> None:
    assert generate_title('Nail Salons', 'Dallas', 'Texas') == 'Best Nail Salons in Dallas, Texas'


def test_page_meta_for_city_tenant(resolver: TenantResolver) -> None:
    meta = build_page_meta(resolver.resolve('nail-salons.dallas.near-me.us'))
    assert meta.title == 'Best Nail Salons in Dallas, Texas'
    assert meta.description.startswith('Discover the best nail salons in Dallas, Texas.')
    assert 'nail salons dallas' in meta.keywords
    assert meta.canonical_url == 'https://nail-salons.dallas.near-me.us'


def test_alias_host_shares_canonical_url(resolver: TenantResolver) -> None:
    alias = build_page_meta(resolver.resolve('nail-salons.nyc.near-me.us'), root_domain='near-me.us')
    canonical = build_page_meta(resolver.resolve('www.nail-salons.new-york.localhost'), root_domain='near-me.us')
    assert alias.canonical_url == 'https://nail-salons.new-york.near-me.us'
    assert canonical.canonical_url == alias.canonical_url


def test_page_meta_skips_unknown_state(resolver: TenantResolver) -> None:
    meta = build_page_meta(resolver.resolve('nail-salons.atlantis.near-me.us'))
    assert meta.title == 'Best Nail Salons in Atlantis'
    assert 'Unknown State' not in meta.description


def test_page_meta_without_city(resolver: TenantResolver) -> None:
    meta = build_page_meta(resolver.resolve('services.near-me.us'))
    assert meta.title == 'Best All Services | Find Local All Services Near You'
    assert meta.keywords[0] == 'services'
    assert len(meta.keywords) == 6


def test_page_meta_for_path_vertical_points_at_city_page(resolver: TenantResolver) -> None:
    meta = build_page_meta(resolver.resolve('water-refill.localhost', '/nyc'))
    assert meta.canonical_url == 'https://water-refill.near-me.us/new-york'
    assert meta.title == 'Best Water Refill Stations in New York, New York'


def test_page_meta_refuses_blocked_context() -> None:
    with pytest.raises(ValueError):
        build_page_meta(TenantContext.blocked_context('admin.near-me.us'))


def test_keywords_with_city() -> None:
    keywords = build_keywords('auto-repair', 'fort-worth')
    assert keywords[:2] == ['auto repair', 'auto repair near me']
    assert keywords[-3:] == ['auto repair fort worth', 'auto repair in fort worth', 'fort worth auto repair']


def test_known_combinations_are_a_sorted_product() -> None:
    pairs = known_combinations(['restaurants', 'barbershops', 'barbershops'], ['dallas', 'austin'])
    assert pairs == [
        ('barbershops', 'austin'),
        ('barbershops', 'dallas'),
        ('restaurants', 'austin'),
        ('restaurants', 'dallas'),
    ]
    assert tenant_hostname('barbershops', 'austin', 'near-me.us') == 'barbershops.austin.near-me.us'


def test_tenant_links_use_paths_for_path_verticals(registries: TenantRegistries) -> None:
    links = tenant_links(registries, 'near-me.us')
    by_key = {(link.category, link.city): link for link in links}
    assert by_key[('water-refill', 'austin')].url == 'https://water-refill.near-me.us/austin'
    assert by_key[('nail-salons', 'austin')].url == 'https://nail-salons.austin.near-me.us/'
    assert len(links) == len(registries.all_categories()) * len(registries.cities)
