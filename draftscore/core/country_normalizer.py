"""Country name normalizer for medal table data.

Two separate concerns live here:
  - clean_label: scrub scraped labels (footnote refs, host markers, nbsp)
  - normalize_country: exact-match alias lookup (short/historical form -> canonical)

Draft matching does NOT go through the aliases; it compares the raw record
country by substring (see scoring.find_country_record).
"""

import json
import re


# Short or historical forms seen in medal tables -> canonical form
DEFAULT_COUNTRY_ALIASES = {
    'Korea': 'South Korea',
    'Republic of Korea': 'South Korea',
    'Korea, Republic of': 'South Korea',
    'Korea, South': 'South Korea',
    'Korea, North': 'North Korea',
    'DPR Korea': 'North Korea',
    'Türkiye': 'Turkey',
    'Czechia': 'Czech Republic',
    'ROC': 'Russian Olympic Committee',
    'Great Britain': 'United Kingdom',
    "People's Republic of China": 'China',
    'Hong Kong, China': 'Hong Kong',
    'IR Iran': 'Iran',
    'Islamic Republic of Iran': 'Iran',
    'USA': 'United States',
    'United States of America': 'United States',
    'Holland': 'Netherlands',
    'Ivory Coast': "Côte d'Ivoire",
    'Cape Verde': 'Cabo Verde',
}

# Best-effort IOC codes keyed on canonical names
COUNTRY_CODES = {
    'Australia': 'AUS', 'Austria': 'AUT', 'Belgium': 'BEL', 'Brazil': 'BRA',
    'Canada': 'CAN', 'China': 'CHN', 'Colombia': 'COL', 'Croatia': 'CRO',
    'Czech Republic': 'CZE', 'Denmark': 'DEN', 'Egypt': 'EGY', 'Finland': 'FIN',
    'France': 'FRA', 'Germany': 'GER', 'Hong Kong': 'HKG', 'Hungary': 'HUN',
    'Iran': 'IRI', 'Ireland': 'IRL', 'Israel': 'ISR', 'Italy': 'ITA',
    'Jamaica': 'JAM', 'Japan': 'JPN', 'Kenya': 'KEN', 'Mexico': 'MEX',
    'Netherlands': 'NED', 'New Zealand': 'NZL', 'North Korea': 'PRK',
    'Norway': 'NOR', 'Peru': 'PER', 'Poland': 'POL', 'Portugal': 'POR',
    'Russian Olympic Committee': 'ROC', 'Slovenia': 'SLO',
    'South Africa': 'RSA', 'South Korea': 'KOR', 'Spain': 'ESP',
    'Sweden': 'SWE', 'Switzerland': 'SUI', 'Turkey': 'TUR', 'Ukraine': 'UKR',
    'United Kingdom': 'GBR', 'United States': 'USA', "Côte d'Ivoire": 'CIV',
    'Cabo Verde': 'CPV',
}


def clean_label(text) -> str:
    """Strip footnote refs like "[a]", host/notes markers and stray whitespace."""
    if text is None:
        return ''
    text = str(text).replace('\xa0', ' ')
    text = re.sub(r'\[[^\]]*\]', '', text)
    text = re.sub(r'[*†‡]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def normalize_country(label: str, aliases: dict | None = None) -> str:
    """Map a country label to its canonical form.

    Exact match on the trimmed label; labels with no alias come back trimmed
    but otherwise unchanged.
    """
    if aliases is None:
        aliases = DEFAULT_COUNTRY_ALIASES
    name = (label or '').strip()
    return aliases.get(name, name)


def country_code(label: str, aliases: dict | None = None) -> str:
    """Return the IOC code for a country label, or '' if unknown."""
    return COUNTRY_CODES.get(normalize_country(label, aliases), '')


def load_alias_map(alias_map_path: str | None = None) -> dict:
    """Load extra aliases from a JSON file and merge them over the defaults.

    A missing or unreadable file only prints a warning; the defaults are
    always returned.
    """
    aliases = dict(DEFAULT_COUNTRY_ALIASES)
    if not alias_map_path:
        return aliases

    try:
        with open(alias_map_path, 'r', encoding='utf-8') as f:
            extra = json.load(f)
    except FileNotFoundError:
        print(f"Warning: Country alias file not found: {alias_map_path}")
        return aliases
    except json.JSONDecodeError as e:
        print(f"Warning: Invalid JSON in country alias file: {e}")
        return aliases

    if not isinstance(extra, dict):
        print(f"Warning: Country alias file must hold a JSON object: {alias_map_path}")
        return aliases

    aliases.update({str(k).strip(): str(v).strip() for k, v in extra.items()})
    print(f"Country aliases loaded: {len(extra)} from {alias_map_path}")
    return aliases
