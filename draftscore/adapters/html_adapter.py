"""Adapter for extracting medal tables from HTML pages (e.g. Wikipedia)."""

import re

import requests
from bs4 import BeautifulSoup

from .base import BaseAdapter
from ..core.country_normalizer import clean_label


USER_AGENT = 'draftscore/0.1 (medal draft scoreboard)'
FETCH_TIMEOUT = 30  # seconds


class HtmlAdapter(BaseAdapter):
    """Parse a medal table from a saved HTML file or a URL.

    Expected column order: rank, country, gold, silver, bronze, total.
    Tied countries share one rank cell via rowspan, so their rows have five
    cells instead of six; a blank rank is put back in front of them.

    Args:
        table_index: Which matching table on the page to use (0 = first).
    """

    TABLE_SELECTOR = 'table.wikitable'

    def __init__(self, table_index: int = 0):
        self.table_index = table_index

    def parse(self, source: str) -> list[list[str]]:
        """Parse the medal table and return positional rows."""
        if re.match(r'^https?://', source):
            html = self.fetch(source)
        else:
            with open(source, 'r', encoding='utf-8') as f:
                html = f.read()
        return self.parse_html(html)

    @staticmethod
    def fetch(url: str) -> str:
        """GET the page. Raises requests.RequestException on failure."""
        print(f"  GET {url}")
        resp = requests.get(url, headers={'User-Agent': USER_AGENT}, timeout=FETCH_TIMEOUT)
        resp.raise_for_status()
        return resp.text

    def parse_html(self, html: str) -> list[list[str]]:
        soup = BeautifulSoup(html, 'html.parser')
        tables = soup.select(self.TABLE_SELECTOR) or soup.find_all('table')
        if self.table_index >= len(tables):
            raise ValueError(f"No medal table found (wanted table {self.table_index}, "
                             f"page has {len(tables)})")
        table = tables[self.table_index]

        rows = []
        for tr in table.find_all('tr'):
            row = self._extract_row(tr)
            if row is not None:
                rows.append(row)
        return rows

    def _extract_row(self, tr) -> list[str] | None:
        """Reduce one <tr> to [rank, country, gold, silver, bronze, total]."""
        cells = tr.find_all(['td', 'th'], recursive=False)
        if len(cells) < 5:
            return None
        texts = [self._cell_text(c) for c in cells]

        # Totals footer: a single label cell spanning rank+country
        if texts[0].lower().startswith('total'):
            return ['', ''] + texts[1:5]

        if len(cells) == 5:
            # Rank cell is a rowspan on an earlier row
            texts = [''] + texts
            texts[1] = self._country_text(cells[0])
        else:
            texts[1] = self._country_text(cells[1])

        if not any(re.match(r'\d', t) for t in texts[2:6]):
            return None  # header row
        return texts[:6]

    @staticmethod
    def _cell_text(cell) -> str:
        """Plain cell text with footnote refs and markers stripped."""
        return clean_label(cell.get_text(' ', strip=True))

    @classmethod
    def _country_text(cls, cell) -> str:
        """Country cell text, preferring the first named link over flag/code text."""
        for link in cell.find_all('a'):
            text = clean_label(link.get_text(' ', strip=True))
            if text:
                return text
        return cls._cell_text(cell)
