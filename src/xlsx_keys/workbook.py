"""Immutable in-memory model of a parsed workbook.

Readers in :mod:`xlsx_keys.adapters` build these objects once per file; the
extraction engine only reads them.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Cell:
    """A single cell. Any of the three fields may be absent."""

    value: Any = None
    formula: str | None = None
    formatted_text: str | None = None

    @property
    def is_blank(self) -> bool:
        return self.value is None and not self.formula and not self.formatted_text


@dataclass(frozen=True)
class UsedRange:
    """Inclusive, 0-indexed bounding box of a sheet's non-empty cells."""

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def row_count(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def col_count(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def size(self) -> int:
        return self.row_count * self.col_count

    def coordinates(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, col)`` pairs row-major, both ascending."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield row, col

    @classmethod
    def bounding(cls, coordinates: list[tuple[int, int]]) -> UsedRange | None:
        """Smallest range covering *coordinates*, or None when there are none."""
        if not coordinates:
            return None
        rows = [r for r, _ in coordinates]
        cols = [c for _, c in coordinates]
        return cls(min(rows), max(rows), min(cols), max(cols))


@dataclass(frozen=True)
class Sheet:
    """A named worksheet with a sparse ``(row, col) -> Cell`` mapping."""

    name: str
    used_range: UsedRange | None = None
    cells: Mapping[tuple[int, int], Cell] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view so the engine cannot mutate reader output.
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def cell(self, row: int, col: int) -> Cell | None:
        return self.cells.get((row, col))

    def iter_used_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield populated cells inside the used range, row-major."""
        if self.used_range is None:
            return
        for row, col in self.used_range.coordinates():
            cell = self.cells.get((row, col))
            if cell is not None:
                yield row, col, cell

    def header_row(self) -> list[Cell]:
        """Cells of the first used-range row, left to right."""
        if self.used_range is None:
            return []
        row = self.used_range.min_row
        header: list[Cell] = []
        for col in range(self.used_range.min_col, self.used_range.max_col + 1):
            cell = self.cells.get((row, col))
            if cell is not None:
                header.append(cell)
        return header


@dataclass(frozen=True)
class NamedRange:
    name: str
    target: str | None = None


@dataclass(frozen=True)
class Workbook:
    """Ordered sheets plus the optional defined-name table."""

    sheets: tuple[Sheet, ...] = ()
    named_ranges: tuple[NamedRange, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sheets", tuple(self.sheets))
        if self.named_ranges is not None:
            object.__setattr__(self, "named_ranges", tuple(self.named_ranges))

    @property
    def sheet_names(self) -> list[str]:
        return [s.name for s in self.sheets]
