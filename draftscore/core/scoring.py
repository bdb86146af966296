"""Weighted medal scoring for draft participants."""

from .models import MedalRecord, ParticipantScore


MEDAL_WEIGHTS = {'gold': 3, 'silver': 2, 'bronze': 1}


def medal_score(record: MedalRecord) -> int:
    return (record.gold * MEDAL_WEIGHTS['gold']
            + record.silver * MEDAL_WEIGHTS['silver']
            + record.bronze * MEDAL_WEIGHTS['bronze'])


def find_country_record(records: list[MedalRecord], name: str) -> MedalRecord | None:
    """Return the first record whose country contains name, or None.

    Substring match on the raw table label, so "Germany" also finds
    "Germany (GER)". When several records contain the name the earliest one
    in table order wins.
    """
    for record in records:
        if name in record.country:
            return record
    return None


def aggregate_scores(records: list[MedalRecord], draft: dict) -> dict:
    """Sum medals and weighted score per participant.

    Args:
        records: Normalized MedalRecords in table order.
        draft: Ownership assignment, participant -> owned country names.

    Returns:
        Dict participant -> ParticipantScore, in draft order. Participants
        whose countries never matched are included with all zeros.
    """
    scores = {}
    for participant, countries in draft.items():
        ps = ParticipantScore(participant=participant)
        for name in countries:
            record = find_country_record(records, name)
            if record is None:
                continue
            ps.gold += record.gold
            ps.silver += record.silver
            ps.bronze += record.bronze
            ps.total += record.total
            ps.score += medal_score(record)
        scores[participant] = ps
    return scores
