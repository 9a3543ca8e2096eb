from __future__ import annotations


STATE_NAMES: dict[str, str] = {
    'AL': 'Alabama',
    'AK': 'Alaska',
    'AZ': 'Arizona',
    'AR': 'Arkansas',
    'CA': 'California',
    'CO': 'Colorado',
    'CT': 'Connecticut',
    'DE': 'Delaware',
    'FL': 'Florida',
    'GA': 'Georgia',
    'HI': 'Hawaii',
    'ID': 'Idaho',
    'IL': 'Illinois',
    'IN': 'Indiana',
    'IA': 'Iowa',
    'KS': 'Kansas',
    'KY': 'Kentucky',
    'LA': 'Louisiana',
    'ME': 'Maine',
    'MD': 'Maryland',
    'MA': 'Massachusetts',
    'MI': 'Michigan',
    'MN': 'Minnesota',
    'MS': 'Mississippi',
    'MO': 'Missouri',
    'MT': 'Montana',
    'NE': 'Nebraska',
    'NV': 'Nevada',
    'NH': 'New Hampshire',
    'NJ': 'New Jersey',
    'NM': 'New Mexico',
    'NY': 'New York',
    'NC': 'North Carolina',
    'ND': 'North Dakota',
    'OH': 'Ohio',
    'OK': 'Oklahoma',
    'OR': 'Oregon',
    'PA': 'Pennsylvania',
    'RI': 'Rhode Island',
    'SC': 'South Carolina',
    'SD': 'South Dakota',
    'TN': 'Tennessee',
    'TX': 'Texas',
    'UT': 'Utah',
    'VT': 'Vermont',
    'VA': 'Virginia',
    'WA': 'Washington',
    'WV': 'West Virginia',
    'WI': 'Wisconsin',
    'WY': 'Wyoming',
}

_ABBREVIATIONS: dict[str, str] = {name.lower(): abbr for abbr, name in STATE_NAMES.items()}


def state_abbreviation(state: str) -> str:
    """Return the two-letter code for a state name or code; unknown values come back unchanged."""
    value = state.strip()
    if len(value) == 2 and value.upper() in STATE_NAMES:
        return value.upper()
    return _ABBREVIATIONS.get(value.lower(), value)


def full_state_name(state: str) -> str:
    """Return the full name for a state code or name; unknown values come back unchanged."""
    value = state.strip()
    if len(value) == 2 and value.upper() in STATE_NAMES:
        return STATE_NAMES[value.upper()]
    abbr = _ABBREVIATIONS.get(value.lower())
    return STATE_NAMES[abbr] if abbr else value


def is_valid_state_abbreviation(value: str) -> bool:
    return len(value) == 2 and value.upper() in STATE_NAMES


def is_valid_state_name(value: str) -> bool:
    return value.strip().lower() in _ABBREVIATIONS
