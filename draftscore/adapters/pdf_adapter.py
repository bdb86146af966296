"""Adapter for parsing medal tables from PDF exports."""

import fitz  # PyMuPDF

from .base import BaseAdapter
from .generic_adapter import ROW_FIELDS, canonical_column
from ..core.country_normalizer import clean_label


class PdfAdapter(BaseAdapter):
    """Parse a medal table from a PDF using PyMuPDF table detection.

    Merged rank cells come back from PyMuPDF as None in every row the merge
    covers, which lands as '' in the rank position.

    Args:
        table_index: Which detected medal table to use, counted across pages.
    """

    def __init__(self, table_index: int = 0):
        self.table_index = table_index

    def parse(self, source: str) -> list[list[str]]:
        """Parse a PDF and return positional rows."""
        doc = fitz.open(source)
        try:
            extracted = []
            for page in doc:
                for table in page.find_tables().tables:
                    cells = table.extract()
                    if self._find_header(cells) is not None:
                        extracted.append(cells)
        finally:
            doc.close()

        if self.table_index >= len(extracted):
            raise ValueError(f"No medal table found in {source} "
                             f"(wanted table {self.table_index}, found {len(extracted)})")
        return self.rows_from_table(extracted[self.table_index])

    @staticmethod
    def _find_header(cells: list) -> int | None:
        """Index of the first row that names a country column."""
        for i, row in enumerate(cells):
            if any(canonical_column(clean_label(c)) == 'country' for c in row if c):
                return i
        return None

    @classmethod
    def rows_from_table(cls, cells: list) -> list[list[str]]:
        """Map extracted table cells onto rank, country, gold, silver, bronze, total."""
        header_idx = cls._find_header(cells)
        if header_idx is None:
            return []

        header = cells[header_idx]
        col_map = {}
        for i, col in enumerate(header):
            canonical = canonical_column(clean_label(col)) if col else None
            if canonical and canonical not in col_map:
                col_map[canonical] = i

        rows = []
        for raw in cells[header_idx + 1:]:
            row = [clean_label(c) for c in raw]
            if len(row) < len(header):
                # Rank column missing from this row
                row = [''] * (len(header) - len(row)) + row

            out = []
            for field in ROW_FIELDS:
                idx = col_map.get(field)
                out.append(row[idx] if idx is not None and idx < len(row) else '')
            rows.append(out)
        return rows
