#!/usr/bin/env python3
"""CLI entry point for scoring a medal draft.

Usage:
    python process_draft.py --source html \\
        --data https://en.wikipedia.org/wiki/2024_Summer_Olympics_medal_table \\
        --event "2024 Summer Olympics" --draft family_draft.json --output ./output/
"""

import argparse
import os
import sys

import requests

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from draftscore.core.models import DraftConfig
from draftscore.core.table_normalizer import normalize_table
from draftscore.core.country_normalizer import load_alias_map
from draftscore.core.draft import load_draft, drafted_records
from draftscore.core.scoring import aggregate_scores
from draftscore.core.ranker import rank_participants
from draftscore.core.output_generator import (
    generate_standings_csv, generate_scoreboard, print_scoreboard
)
from draftscore.adapters.html_adapter import HtmlAdapter
from draftscore.adapters.generic_adapter import GenericAdapter
from draftscore.adapters.pdf_adapter import PdfAdapter


def build_adapter(config: DraftConfig):
    if config.source_type == 'html':
        return HtmlAdapter(table_index=config.table_index)
    if config.source_type == 'pdf':
        return PdfAdapter(table_index=config.table_index)
    if config.source_type == 'generic':
        return GenericAdapter()
    raise ValueError(f"Unknown source type: {config.source_type}")


def main():
    parser = argparse.ArgumentParser(description='Score a medal draft from a medal table')
    parser.add_argument('--source', required=True,
                        choices=['html', 'generic', 'pdf'],
                        help='Data source type')
    parser.add_argument('--data', required=True,
                        help='Input file (or http(s) URL for --source html)')
    parser.add_argument('--event', required=True, help='Event name, e.g. "2024 Summer Olympics"')
    parser.add_argument('--output', required=True, help='Output directory for generated files')
    parser.add_argument('--draft', default=None,
                        help='Path to JSON file mapping participant -> list of countries '
                             '(default: built-in family draft)')
    parser.add_argument('--aliases', default=None,
                        help='Path to JSON file mapping country name variants to canonical names')
    parser.add_argument('--table-index', type=int, default=0,
                        help='Which medal table in the source to use (default 0 = first)')
    parser.add_argument('--title', default='', help='Scoreboard title (default: event name)')

    args = parser.parse_args()

    config = DraftConfig(
        event_name=args.event,
        source_type=args.source,
        title=args.title or f"{args.event} Draft Scores",
        table_index=args.table_index,
    )

    try:
        draft = load_draft(args.draft)
    except (OSError, ValueError) as e:
        print(f"Error loading draft: {e}")
        sys.exit(1)
    aliases = load_alias_map(args.aliases)
    print(f"Draft: {len(draft)} participants")

    # Extract rows; never score a partial table
    adapter = build_adapter(config)
    print(f"Parsing {args.data}...")
    try:
        rows = adapter.parse(args.data)
    except requests.RequestException as e:
        print(f"Error fetching the medal table: {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error reading the medal table: {e}")
        sys.exit(1)
    print(f"Extracted {len(rows)} rows")

    records = normalize_table(rows)
    drafted = drafted_records(records, draft)
    print(f"Normalized {len(records)} countries, {len(drafted)} drafted")

    scores = aggregate_scores(records, draft)
    ranked = rank_participants(scores)
    print_scoreboard(ranked, config.title)

    os.makedirs(args.output, exist_ok=True)

    standings_path = os.path.join(args.output, 'drafted_standings.csv')
    generate_standings_csv(records, draft, standings_path, aliases)
    print(f"\nGenerated {standings_path}")

    scoreboard_path = os.path.join(args.output, 'draft_scoreboard.txt')
    generate_scoreboard(ranked, scoreboard_path, config.title)
    print(f"Generated {scoreboard_path}")

    print("\nDone!")


if __name__ == '__main__':
    main()
