"""Output generator for draft scoreboard results.

Generates two output types:
  - Standings CSV of the drafted countries (table order)
  - Scoreboard text with rank/score shown once per tie group
"""

import csv

from .country_normalizer import country_code, normalize_country
from .draft import record_owners
from .models import MedalRecord, RankedParticipant


STANDINGS_FIELDS = ['country', 'code', 'drafted_by', 'gold', 'silver', 'bronze', 'total']


def generate_standings_csv(records: list[MedalRecord], draft: dict, output_path: str,
                           aliases: dict | None = None):
    """Write the medal standings of drafted countries as CSV.

    Args:
        records: Normalized MedalRecords in table order.
        draft: Ownership assignment used to pick and label the rows.
        output_path: Where to write the CSV.
        aliases: Optional alias map for the display name and code columns.
    """
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=STANDINGS_FIELDS)
        writer.writeheader()
        for record, owners in record_owners(records, draft):
            writer.writerow({
                'country': normalize_country(record.country, aliases),
                'code': country_code(record.country, aliases),
                'drafted_by': ', '.join(owners),
                'gold': record.gold,
                'silver': record.silver,
                'bronze': record.bronze,
                'total': record.total,
            })


def tie_group_starts(ranked: list[RankedParticipant]) -> list[bool]:
    """Flag the rows that open a tie group.

    The scoreboard prints rank and score only on these rows, the same way a
    rowspan cell would span the rest of the group.
    """
    starts = []
    for i, rp in enumerate(ranked):
        starts.append(i == 0 or rp.rank != ranked[i - 1].rank)
    return starts


def _scoreboard_lines(ranked: list[RankedParticipant], title: str | None) -> list[str]:
    lines = []
    if title:
        lines.append(f'# {title}')
        lines.append('')

    lines.append(f'{"Rank":>4}  {"Participant":<16} {"Score":>5}  '
                 f'{"G":>3} {"S":>3} {"B":>3} {"Tot":>4}')
    lines.append('-' * 48)
    for rp, starts in zip(ranked, tie_group_starts(ranked)):
        rank = str(rp.rank) if starts else ''
        score = str(rp.score) if starts else ''
        lines.append(f'{rank:>4}  {rp.participant:<16} {score:>5}  '
                     f'{rp.gold:>3} {rp.silver:>3} {rp.bronze:>3} {rp.total:>4}')
    return lines


def generate_scoreboard(ranked: list[RankedParticipant], output_path: str,
                        title: str | None = None):
    """Write the draft scoreboard as a plain-text table."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(_scoreboard_lines(ranked, title)) + '\n')


def print_scoreboard(ranked: list[RankedParticipant], title: str | None = None) -> None:
    """Print the draft scoreboard to stdout."""
    print()
    print('\n'.join(_scoreboard_lines(ranked, title)))
