"""Rank draft participants by weighted score.

Ties share a rank and the next distinct score resumes at its position:
scores 10, 10, 8 rank 1, 1, 3.
"""

from .models import ParticipantScore, RankedParticipant


def rank_participants(scores: dict) -> list[RankedParticipant]:
    """Sort participants by descending score and assign tie-aware ranks.

    Args:
        scores: Dict participant -> ParticipantScore. Equal scores keep the
            dict's enumeration order (stable sort).

    Returns:
        List of RankedParticipant, best first.
    """
    ordered = sorted(scores.values(), key=lambda ps: -ps.score)

    ranked = []
    for pos, ps in enumerate(ordered, start=1):
        if ranked and ps.score == ranked[-1].score:
            rank = ranked[-1].rank
        else:
            rank = pos
        ranked.append(_with_rank(ps, rank))
    return ranked


def _with_rank(ps: ParticipantScore, rank: int) -> RankedParticipant:
    return RankedParticipant(
        participant=ps.participant,
        gold=ps.gold,
        silver=ps.silver,
        bronze=ps.bronze,
        total=ps.total,
        score=ps.score,
        rank=rank,
    )
