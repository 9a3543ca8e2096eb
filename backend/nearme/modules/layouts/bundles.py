from __future__ import annotations

from nearme.modules.layouts.models import ConfigBundle, NavItem, StatItem


def _nav(*items: tuple[str, str]) -> tuple[NavItem, ...]:
    return tuple(NavItem(label=label, href=href) for label, href in items)


def _stats(*items: tuple[str, str]) -> tuple[StatItem, ...]:
    return tuple(StatItem(value=value, label=label) for value, label in items)


DEFAULT_CATEGORY = 'business'

BUSINESS_BUNDLE = ConfigBundle(
    category_key=DEFAULT_CATEGORY,
    brand_name='Near Me',
    primary_color='blue-600',
    gradient_from='blue-600',
    gradient_to='indigo-800',
    accent_color='blue-100',
    hero_title='Best {category} in {city}',
    hero_subtitle='Discover top-rated {category_lower} in {city}, {state}',
    cta_text='Search',
    nav_items=_nav(('Home', '/'), ('About', '/about'), ('Contact', '/contact'), ('For Business', '/business')),
    stats=_stats(('1,250+', 'Listed Businesses'), ('12', 'Cities'), ('4.7', 'Average Rating')),
)

SERVICES_BUNDLE = ConfigBundle(
    category_key='services',
    brand_name='Near Me Services',
    hero_title='Find Local Services Near You',
    hero_subtitle='Browse trusted local businesses across every category and city we cover.',
    cta_text='Browse Services',
    search_placeholder='Search by category or city...',
    show_location=False,
    nav_items=_nav(('All Services', '/'), ('Cities', '/cities'), ('About', '/about'), ('Contact', '/contact')),
    stats=_stats(('1,250+', 'Listed Businesses'), ('5', 'Categories'), ('12', 'Cities')),
    popular_suggestions=('Nail Salons', 'Barbershops', 'Auto Repair', 'Restaurants', 'Water Refill'),
)

WATER_REFILL_BUNDLE = ConfigBundle(
    category_key='water-refill',
    brand_name='AquaFinder',
    primary_color='blue-600',
    gradient_from='blue-500',
    gradient_to='blue-700',
    accent_color='blue-100',
    hero_title='Find Quality Water Refill Stations Near You',
    hero_subtitle=(
        'Discover clean, affordable water refill locations in your area. '
        'Save money and reduce plastic waste with our comprehensive directory.'
    ),
    cta_text='Find Stations Near Me',
    search_placeholder='Search by city, zip code, or station name...',
    show_location=False,
    nav_items=_nav(('Find Stations', '/'), ('About', '/about'), ('Contact', '/contact'), ('Sign In', '/login')),
    stats=_stats(
        ('2,500+', 'Verified Stations'),
        ('50+', 'Cities Covered'),
        ('$0.25', 'Average Price/Gallon'),
        ('98%', 'Customer Satisfaction'),
    ),
    popular_suggestions=('Walmart Supercenter', 'CVS Pharmacy', 'Kroger', 'Target', 'Whole Foods Market'),
)

SENIOR_CARE_BUNDLE = ConfigBundle(
    category_key='senior-care',
    brand_name='CareFinder',
    hero_title='Find Trusted Senior Care Services Near You',
    hero_subtitle=(
        'Discover compassionate, professional senior care providers in your area. '
        'From assisted living to home care, find the right support for your loved ones.'
    ),
    cta_text='Find Care Services',
    search_placeholder='Search by city, service type, or care facility name...',
    nav_items=_nav(
        ('Find Care', '/'),
        ('Services', '/services'),
        ('Resources', '/resources'),
        ('About', '/about'),
        ('Contact', '/contact'),
    ),
    stats=_stats(
        ('1,200+', 'Verified Providers'),
        ('35+', 'Cities Served'),
        ('24/7', 'Support Available'),
        ('95%', 'Family Satisfaction'),
    ),
    popular_suggestions=(
        'Assisted Living',
        'Home Care Services',
        'Memory Care',
        'Adult Day Care',
        'Skilled Nursing',
        'Respite Care',
    ),
)

EV_CHARGING_BUNDLE = ConfigBundle(
    category_key='ev-charging',
    brand_name='ChargeFinder',
    primary_color='green-600',
    gradient_from='green-500',
    gradient_to='green-700',
    accent_color='green-100',
    hero_title='Find EV Charging Stations Near You',
    hero_subtitle=(
        'Locate fast, reliable electric vehicle charging stations. '
        'Plan your route with confidence and keep your EV powered up.'
    ),
    cta_text='Find Charging Stations',
    search_placeholder='Search by location, charging network, or station type...',
    nav_items=_nav(('Find Stations', '/'), ('Route Planner', '/plan-route'), ('Networks', '/networks'), ('About', '/about')),
    stats=_stats(('15,000+', 'Charging Ports'), ('3,500+', 'Locations'), ('99.2%', 'Uptime'), ('45min', 'Avg. Charge Time')),
    popular_suggestions=('Tesla Supercharger', 'ChargePoint', 'EVgo', 'Electrify America', 'Blink Charging'),
)

FOOD_DELIVERY_BUNDLE = ConfigBundle(
    category_key='food-delivery',
    brand_name='FoodFinder',
    primary_color='orange-600',
    gradient_from='orange-500',
    gradient_to='red-600',
    accent_color='orange-100',
    hero_title='Fast Food Delivery in {city}',
    hero_subtitle='Get your favorite meals delivered fast in {city}, {state}',
    cta_text='Find Restaurants Near Me',
    search_placeholder='Search by restaurant, cuisine, or dish...',
    search_tip='Search by restaurant name, cuisine type, or specific dishes',
    nav_items=_nav(('Restaurants', '/'), ('Cuisines', '/cuisines'), ('Deals', '/deals'), ('Track Order', '/track')),
    stats=_stats(
        ('5,000+', 'Partner Restaurants'),
        ('30min', 'Avg. Delivery Time'),
        ('4.8', 'Customer Rating'),
        ('$3.99', 'Starting Delivery Fee'),
    ),
    popular_suggestions=('Pizza', 'Chinese Food', 'Burgers', 'Sushi', 'Mexican Food', 'Italian'),
)

SPECIALTY_PET_BUNDLE = ConfigBundle(
    category_key='specialty-pet',
    brand_name='PetCare Pro',
    primary_color='emerald-600',
    gradient_from='emerald-500',
    gradient_to='teal-600',
    accent_color='emerald-100',
    hero_title='Find Expert Specialty Pet Services Near You',
    hero_subtitle=(
        'Discover professional pet care specialists in your area. From exotic veterinarians to pet '
        'grooming, training, and boarding - find the perfect care for your beloved companions.'
    ),
    cta_text='Find Pet Services',
    search_placeholder='Search by city, service type, or business name...',
    nav_items=_nav(
        ('Find Services', '/'),
        ('Pet Care', '/services'),
        ('Resources', '/resources'),
        ('About', '/about'),
        ('Contact', '/contact'),
    ),
    stats=_stats(('800+', 'Verified Providers'), ('25+', 'Cities Served'), ('50+', 'Service Types'), ('99%', 'Happy Pet Parents')),
    popular_suggestions=(
        'Exotic Veterinarian',
        'Pet Grooming',
        'Dog Training',
        'Pet Boarding',
        'Pet Photography',
        'Animal Behaviorist',
    ),
)

BUILTIN_BUNDLES: tuple[ConfigBundle, ...] = (
    SERVICES_BUNDLE,
    WATER_REFILL_BUNDLE,
    SENIOR_CARE_BUNDLE,
    EV_CHARGING_BUNDLE,
    FOOD_DELIVERY_BUNDLE,
    SPECIALTY_PET_BUNDLE,
)
