"""Abstract base adapter for extracting medal table rows from various sources."""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, source: str) -> list[list[str]]:
        """Extract medal table rows and return them as lists of cell strings.

        Each row is positional:
            rank, country, gold, silver, bronze, total

        Rows whose rank cell was merged into an earlier row (rowspan) must
        carry '' in the rank position so the normalizer can carry counts
        forward.
        """
        pass
