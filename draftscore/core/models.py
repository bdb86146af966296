"""Data models for the medal draft scoring system."""

from dataclasses import dataclass


@dataclass
class DraftConfig:
    """Configuration for a single draft scoreboard run."""
    event_name: str           # "2024 Summer Olympics"
    source_type: str          # "html", "generic", "pdf"
    title: str = ''           # Scoreboard heading, CLI default "<event> Draft Scores"
    table_index: int = 0      # Which medal table on the page (html/pdf sources)


@dataclass(frozen=True)
class MedalRecord:
    """One country row of the medal table after normalization."""
    rank: str                 # "1", "" for continuation rows
    country: str              # Label as it appears in the source
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    total: int = 0


@dataclass
class ParticipantScore:
    """Medal totals and weighted score summed over a participant's countries."""
    participant: str
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    total: int = 0
    score: int = 0


@dataclass
class RankedParticipant(ParticipantScore):
    rank: int = 1
