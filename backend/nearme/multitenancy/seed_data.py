from __future__ import annotations

from nearme.multitenancy.cities import CityStateEntry
from nearme.multitenancy.verticals import LocationSource, VerticalKind


# (city, state, aliases)
CITY_SEED: list[tuple[str, str, tuple[str, ...]]] = [
    # Texas
    ('dallas', 'Texas', ()),
    ('garland', 'Texas', ()),
    ('austin', 'Texas', ()),
    ('houston', 'Texas', ()),
    ('frisco', 'Texas', ()),
    ('san-antonio', 'Texas', ('sanantonio',)),
    ('fort-worth', 'Texas', ('fortworth',)),
    ('el-paso', 'Texas', ('elpaso',)),
    ('arlington', 'Texas', ()),
    ('corpus-christi', 'Texas', ('corpuschristi',)),
    # California
    ('san-francisco', 'California', ('sanfrancisco', 'sf')),
    ('los-angeles', 'California', ('losangeles', 'la')),
    ('san-diego', 'California', ('sandiego',)),
    ('san-jose', 'California', ('sanjose',)),
    ('fresno', 'California', ()),
    ('sacramento', 'California', ()),
    ('long-beach', 'California', ('longbeach',)),
    ('oakland', 'California', ()),
    ('bakersfield', 'California', ()),
    ('anaheim', 'California', ()),
    # New York
    ('new-york', 'New York', ('newyork', 'nyc')),
    ('buffalo', 'New York', ()),
    ('rochester', 'New York', ()),
    ('yonkers', 'New York', ()),
    ('syracuse', 'New York', ()),
    ('albany', 'New York', ()),
    # Florida
    ('miami', 'Florida', ()),
    ('tampa', 'Florida', ()),
    ('orlando', 'Florida', ()),
    ('jacksonville', 'Florida', ()),
    ('st-petersburg', 'Florida', ('stpetersburg',)),
    ('hialeah', 'Florida', ()),
    ('tallahassee', 'Florida', ()),
    ('fort-lauderdale', 'Florida', ('fortlauderdale',)),
    # Illinois
    ('chicago', 'Illinois', ()),
    ('aurora', 'Illinois', ()),
    ('rockford', 'Illinois', ()),
    ('joliet', 'Illinois', ()),
    ('naperville', 'Illinois', ()),
    ('springfield', 'Illinois', ()),
    ('peoria', 'Illinois', ()),
    ('elgin', 'Illinois', ()),
    # Pennsylvania
    ('philadelphia', 'Pennsylvania', ()),
    ('pittsburgh', 'Pennsylvania', ()),
    ('allentown', 'Pennsylvania', ()),
    ('erie', 'Pennsylvania', ()),
    ('reading', 'Pennsylvania', ()),
    ('scranton', 'Pennsylvania', ()),
    # Ohio
    ('columbus', 'Ohio', ()),
    ('cleveland', 'Ohio', ()),
    ('cincinnati', 'Ohio', ()),
    ('toledo', 'Ohio', ()),
    ('akron', 'Ohio', ()),
    ('dayton', 'Ohio', ()),
    # Georgia
    ('atlanta', 'Georgia', ()),
    ('augusta', 'Georgia', ()),
    ('macon', 'Georgia', ()),
    ('savannah', 'Georgia', ()),
    ('athens', 'Georgia', ()),
    # North Carolina
    ('charlotte', 'North Carolina', ()),
    ('raleigh', 'North Carolina', ()),
    ('greensboro', 'North Carolina', ()),
    ('durham', 'North Carolina', ()),
    ('winston-salem', 'North Carolina', ('winstonsalem',)),
    ('fayetteville', 'North Carolina', ()),
    # Michigan
    ('detroit', 'Michigan', ()),
    ('grand-rapids', 'Michigan', ('grandrapids',)),
    ('warren', 'Michigan', ()),
    ('sterling-heights', 'Michigan', ('sterlingheights',)),
    ('lansing', 'Michigan', ()),
    ('ann-arbor', 'Michigan', ('annarbor',)),
    # Everywhere else
    ('denver', 'Colorado', ()),
    ('colorado-springs', 'Colorado', ('coloradosprings',)),
    ('phoenix', 'Arizona', ()),
    ('tucson', 'Arizona', ()),
    ('mesa', 'Arizona', ()),
    ('seattle', 'Washington', ()),
    ('portland', 'Oregon', ()),
    ('boston', 'Massachusetts', ()),
    ('las-vegas', 'Nevada', ('lasvegas',)),
    ('baltimore', 'Maryland', ()),
    ('milwaukee', 'Wisconsin', ()),
    ('kansas-city', 'Missouri', ('kansascity',)),
    ('nashville', 'Tennessee', ()),
    ('memphis', 'Tennessee', ()),
    ('louisville', 'Kentucky', ()),
    ('oklahoma-city', 'Oklahoma', ('oklahomacity',)),
    ('tulsa', 'Oklahoma', ()),
    ('virginia-beach', 'Virginia', ('virginiabeach',)),
    ('omaha', 'Nebraska', ()),
    ('minneapolis', 'Minnesota', ()),
    ('wichita', 'Kansas', ()),
    ('new-orleans', 'Louisiana', ('neworleans',)),
]

# (hostname label, category, label, kind, location source, description)
VERTICAL_SEED: list[tuple[str, str, str, VerticalKind, LocationSource, str]] = [
    (
        'services',
        'services',
        'All Services',
        VerticalKind.SERVICES,
        LocationSource.SUBDOMAIN,
        'Main services directory and fallback page',
    ),
    (
        'water-refill',
        'water-refill',
        'Water Refill Stations',
        VerticalKind.WATER_REFILL,
        LocationSource.PATH,
        'Water refill stations directory with AquaFinder branding',
    ),
    (
        'senior-care',
        'senior-care',
        'Senior Care Services',
        VerticalKind.SENIOR_CARE,
        LocationSource.PATH,
        'Senior care services directory with CareFinder branding',
    ),
]

BLOCKED_LABELS: list[str] = ['admin', 'api', 'www', 'mail', 'ftp', 'test', 'dev', 'staging']

# First path segments that are site pages on path-based verticals, never cities.
RESERVED_PATH_SEGMENTS: frozenset[str] = frozenset(
    {
        'about',
        'business',
        'cities',
        'contact',
        'cuisines',
        'deals',
        'login',
        'networks',
        'plan-route',
        'resources',
        'services',
        'track',
    }
)

# Generic directory categories served as ``{category}.{city}.{root}``.
SERVICE_CATEGORIES: list[str] = [
    'nail-salons',
    'barbershops',
    'auto-repair',
    'restaurants',
    'hair-salons',
    'plumbers',
    'dentists',
    'pet-grooming',
]


def city_entries() -> list[CityStateEntry]:
    return [CityStateEntry.create(city, state, aliases) for city, state, aliases in CITY_SEED]
