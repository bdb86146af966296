"""Adapter for generic JSON, TSV or CSV medal tables from unknown sources.

Handles two formats:
  - JSON: Array of objects with keys like rank, country, gold, silver, bronze, total
          (or an object holding such an array under "medals"/"rows"/"data")
  - TSV/CSV: Header row with column names, tab- or comma-separated values

Columns are matched by name (case-insensitive). Missing columns become ''.
"""

import csv
import io
import json

from .base import BaseAdapter


# Map common column name variations to our canonical names
COLUMN_ALIASES = {
    'rank': 'rank',
    'rk': 'rank',
    'pos': 'rank',
    'position': 'rank',
    'place': 'rank',
    '#': 'rank',
    'country': 'country',
    'nation': 'country',
    'noc': 'country',
    'team': 'country',
    'countryname': 'country',
    'gold': 'gold',
    'g': 'gold',
    'golds': 'gold',
    'silver': 'silver',
    's': 'silver',
    'silvers': 'silver',
    'bronze': 'bronze',
    'b': 'bronze',
    'bronzes': 'bronze',
    'total': 'total',
    'tot': 'total',
    'totals': 'total',
    'medals': 'total',
}

ROW_FIELDS = ['rank', 'country', 'gold', 'silver', 'bronze', 'total']


def canonical_column(name) -> str | None:
    """Map a header/key name to one of ROW_FIELDS, or None."""
    key = str(name).lower().strip().replace(' ', '').replace('_', '')
    return COLUMN_ALIASES.get(key)


class GenericAdapter(BaseAdapter):
    """Parse generic JSON or delimited text medal tables."""

    def parse(self, source: str) -> list[list[str]]:
        """Auto-detect format (JSON vs TSV/CSV) and parse."""
        with open(source, 'r', encoding='utf-8') as f:
            content = f.read().strip()

        if content.startswith('[') or content.startswith('{'):
            try:
                data = json.loads(content)
            except json.JSONDecodeError:
                data = None
            if isinstance(data, dict):
                for key in ('medals', 'rows', 'data', 'results'):
                    if isinstance(data.get(key), list):
                        data = data[key]
                        break
                else:
                    data = [data]
            if isinstance(data, list):
                return self._parse_json_array(data)

        return self._parse_delimited_content(content)

    def _parse_json_array(self, data: list) -> list[list[str]]:
        """Parse a JSON array of row objects (or of already-positional lists)."""
        rows = []
        for item in data:
            if isinstance(item, list):
                rows.append(['' if v is None else str(v) for v in item])
                continue
            if not isinstance(item, dict):
                continue

            mapped = {}
            for key, value in item.items():
                canonical = canonical_column(key)
                if canonical and canonical not in mapped:
                    mapped[canonical] = '' if value is None else str(value)
            rows.append([mapped.get(field, '') for field in ROW_FIELDS])
        return rows

    def _parse_delimited_content(self, content: str) -> list[list[str]]:
        """Parse TSV or CSV content with a header row."""
        lines = content.splitlines()
        if len(lines) < 2:
            return []

        delimiter = '\t' if '\t' in lines[0] else ','
        reader = csv.reader(io.StringIO(content), delimiter=delimiter)
        header = next(reader)

        col_map = {}
        for i, col in enumerate(header):
            canonical = canonical_column(col)
            if canonical and canonical not in col_map:
                col_map[canonical] = i

        if 'country' not in col_map:
            raise ValueError(f"No country column in header: {header}")

        rows = []
        for parts in reader:
            if not parts:
                continue

            def get_col(name: str) -> str:
                idx = col_map.get(name)
                if idx is not None and idx < len(parts):
                    return parts[idx].strip()
                return ''

            rows.append([get_col(field) for field in ROW_FIELDS])
        return rows
