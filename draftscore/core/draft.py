"""Draft ownership assignment: which participant owns which countries.

The assignment is plain data (participant -> list of country names) and is
always passed into the scoring functions, never read from a module global
inside them. DEFAULT_DRAFT is the family draft used when no --draft file is
given.
"""

import json

from .models import MedalRecord
from .scoring import find_country_record


DEFAULT_DRAFT = {
    'Lily': ['Peru', 'Germany', 'Sweden'],
    'Tera': ['France', 'Croatia', 'Egypt'],
    'Elise': ['Italy', 'Portugal', 'South Africa'],
    'Grace': ['China', 'Mexico', 'Jamaica'],
    'Jake': ['Japan', 'New Zealand', 'Slovenia'],
    'Will': ['Ukraine', 'Turkey', 'Colombia'],
    'Mike': ['Israel', 'South Korea', 'Spain'],
}


def validate_draft(draft) -> dict:
    """Check the draft shape and return a cleaned copy.

    Raises:
        ValueError: if the draft is not an object of participant -> list of
            non-blank country names.
    """
    if not isinstance(draft, dict):
        raise ValueError(f"Draft must be a mapping of participant -> countries, "
                         f"got {type(draft).__name__}")

    cleaned = {}
    for participant, countries in draft.items():
        name = str(participant).strip()
        if not name:
            raise ValueError("Draft has a blank participant name")
        if not isinstance(countries, (list, tuple)):
            raise ValueError(f"Countries for {name!r} must be a list, "
                             f"got {type(countries).__name__}")
        owned = []
        for country in countries:
            if not isinstance(country, str) or not country.strip():
                raise ValueError(f"Invalid country {country!r} in draft for {name!r}")
            owned.append(country.strip())
        cleaned[name] = owned
    return cleaned


def load_draft(draft_path: str | None = None) -> dict:
    """Load a draft from a JSON file, or the default draft when no path is given."""
    if not draft_path:
        return {p: list(c) for p, c in DEFAULT_DRAFT.items()}

    with open(draft_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in draft file {draft_path}: {e}") from e
    return validate_draft(data)


def drafted_countries(draft: dict) -> list[str]:
    """All owned country names in draft order, each listed once."""
    seen = []
    for countries in draft.values():
        for country in countries:
            if country not in seen:
                seen.append(country)
    return seen


def record_owners(records: list[MedalRecord], draft: dict) -> list[tuple]:
    """Pair each drafted record with the participants it is scored for.

    Owned names are resolved with find_country_record, the same lookup the
    scoring uses, so a record is credited only to participants whose names
    actually landed on it.

    Returns:
        List of (record, [participant, ...]) in table order.
    """
    owners = {}
    for participant, countries in draft.items():
        for name in countries:
            record = find_country_record(records, name)
            if record is None:
                continue
            idx = records.index(record)
            owners.setdefault(idx, [])
            if participant not in owners[idx]:
                owners[idx].append(participant)
    return [(records[i], owners[i]) for i in sorted(owners)]


def drafted_records(records: list[MedalRecord], draft: dict) -> list[MedalRecord]:
    """Records that some participant's country name resolves to, in table order."""
    return [record for record, _ in record_owners(records, draft)]
