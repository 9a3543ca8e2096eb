from fastapi.testclient import TestClient

from tests.conftest import host_headers


def test_health(client: TestClient) -> None:
    response = client.get('/api/v1/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'ok', 'environment': 'test'}


def test_current_tenant_from_host_header(client: TestClient) -> None:
    response = client.get('/api/v1/tenants/current', headers=host_headers('nail-salons.dallas.near-me.us'))
    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload['category'] == 'nail-salons'
    assert payload['category_label'] == 'Nail Salons'
    assert payload['city'] == 'dallas'
    assert payload['state'] == 'Texas'
    assert payload['kind'] is None
    assert payload['blocked'] is False


def test_current_tenant_uses_page_path_for_path_verticals(client: TestClient) -> None:
    response = client.get(
        '/api/v1/tenants/current',
        params={'path': '/austin'},
        headers=host_headers('water-refill.near-me.us'),
    )
    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload['category'] == 'water-refill'
    assert payload['city'] == 'austin'
    assert payload['kind'] == 'water_refill'
    assert payload['is_path_based'] is True


def test_current_tenant_redirects_blocked_hosts(client: TestClient) -> None:
    response = client.get(
        '/api/v1/tenants/current',
        headers=host_headers('admin.near-me.us'),
        follow_redirects=False,
    )
    assert response.status_code == 307
    assert response.headers['location'] == 'https://services.near-me.us'


def test_unknown_host_resolves_to_services(client: TestClient) -> None:
    response = client.get('/api/v1/tenants/current', headers=host_headers('testserver'))
    assert response.status_code == 200
    assert response.json()['category'] == 'services'
    assert response.json()['city'] is None


def test_resolve_any_host(client: TestClient) -> None:
    blocked = client.get('/api/v1/tenants/resolve', params={'host': 'admin.near-me.us'})
    assert blocked.status_code == 200
    assert blocked.json()['blocked'] is True

    atlantis = client.get('/api/v1/tenants/resolve', params={'host': 'nail-salons.atlantis.near-me.us'})
    assert atlantis.json()['state'] == 'Unknown State'

    fallback = client.get('/api/v1/tenants/resolve', params={'host': 'dallas.near-me.us'})
    assert fallback.json()['category'] == 'services'
    assert fallback.json()['raw_category'] == 'dallas'
    assert fallback.json()['kind'] == 'services'


def test_resolve_requires_host(client: TestClient) -> None:
    assert client.get('/api/v1/tenants/resolve').status_code == 422


def test_current_layout(client: TestClient) -> None:
    response = client.get('/api/v1/layouts/current', params={'path': '/denver'}, headers=host_headers('water-refill.near-me.us'))
    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload['dedicated'] is True
    assert payload['bundle']['brand_name'] == 'AquaFinder'
    assert payload['hero']['title'] == 'Find Quality Water Refill Stations Near You'


def test_layout_for_generic_category_falls_back(client: TestClient) -> None:
    response = client.get('/api/v1/layouts/nail-salons')
    assert response.status_code == 200
    payload = response.json()
    assert payload['dedicated'] is False
    assert payload['bundle']['category_key'] == 'business'
    assert payload['hero'] is None


def test_seo_for_current_tenant(client: TestClient) -> None:
    response = client.get('/api/v1/seo/current', headers=host_headers('barbershops.houston.near-me.us'))
    assert response.status_code == 200
    assert response.json()['title'] == 'Best Barbershops in Houston, Texas'


def test_seo_canonical_url_uses_canonical_city(client: TestClient) -> None:
    response = client.get('/api/v1/seo/current', headers=host_headers('nail-salons.nyc.near-me.us'))
    assert response.status_code == 200
    assert response.json()['canonical_url'] == 'http://nail-salons.new-york.near-me.us'


def test_cities_listing_and_lookup(client: TestClient) -> None:
    response = client.get('/api/v1/cities', params={'state': 'TX', 'page_size': 5})
    assert response.status_code == 200
    payload = response.json()
    assert payload['meta']['total'] == 10
    assert len(payload['items']) == 5
    assert all(item['state'] == 'Texas' for item in payload['items'])

    alias = client.get('/api/v1/cities/NYC')
    assert alias.status_code == 200
    assert alias.json()['city'] == 'new-york'

    assert client.get('/api/v1/cities/atlantis').status_code == 404


def test_city_search(client: TestClient) -> None:
    response = client.get('/api/v1/cities', params={'q': 'fort'})
    cities = [item['city'] for item in response.json()['items']]
    assert cities == ['fort-lauderdale', 'fort-worth']


def test_states(client: TestClient) -> None:
    response = client.get('/api/v1/states')
    assert response.status_code == 200
    texas = next(item for item in response.json() if item['name'] == 'Texas')
    assert texas == {'abbreviation': 'TX', 'name': 'Texas', 'city_count': 10}


def test_directory_hostnames(client: TestClient) -> None:
    response = client.get('/api/v1/directory/hostnames', params={'category': 'water-refill', 'page_size': 1000})
    assert response.status_code == 200
    payload = response.json()
    assert payload['meta']['total'] == len(payload['items'])
    assert all(item['host'] == 'water-refill.near-me.us' for item in payload['items'])
    assert 'https://water-refill.near-me.us/austin' in {item['url'] for item in payload['items']}
