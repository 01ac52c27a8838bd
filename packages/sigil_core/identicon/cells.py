"""Mirrored cell grid built from digest bits.

Cells are stored row-major (``index = y * rows + x``) in a fixed 32-byte
bitset, which covers every supported grid up to 15x15.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidDigestError, ThemeConfigError

MIN_ROWS = 1
MAX_ROWS = 15
SOURCE_SIZE = 15
CELL_CAPACITY = 256
_BITS_SIZE = CELL_CAPACITY // 8


def check_rows(rows: int) -> int:
    if isinstance(rows, bool) or not isinstance(rows, int):
        raise ThemeConfigError(f"rows must be an integer, got {rows!r}", error_code="invalid_rows")
    if not MIN_ROWS <= rows <= MAX_ROWS:
        raise ThemeConfigError(
            f"rows must be between {MIN_ROWS} and {MAX_ROWS}, got {rows}",
            error_code="invalid_rows",
        )
    return rows


def source_bit(source: bytes, index: int) -> bool:
    # Most significant bit first within each byte.
    return (source[index // 8] >> (7 - index % 8)) & 1 == 1


@dataclass(frozen=True)
class CellGrid:
    rows: int
    bits: bytes = bytes(_BITS_SIZE)

    @classmethod
    def build(cls, rows: int, source: bytes) -> "CellGrid":
        """Fill the left half (and middle column) from ``source`` bits, mirroring each hit.

        Bits are consumed column by column: bit ``i`` drives ``(i // rows, i % rows)``.
        With at most 15 rows the left half needs at most 120 bits, exactly the
        15 source bytes.
        """

        check_rows(rows)
        if not isinstance(source, (bytes, bytearray, memoryview)):
            raise InvalidDigestError(
                f"Cell source must be bytes, got {type(source).__name__}",
                error_code="invalid_digest",
            )
        source = bytes(source)
        if len(source) != SOURCE_SIZE:
            raise InvalidDigestError(
                f"Cell source must be {SOURCE_SIZE} bytes, got {len(source)}",
                error_code="invalid_digest",
            )

        cols = rows // 2 + rows % 2
        bits = bytearray(_BITS_SIZE)
        for i in range(cols * rows):
            if not source_bit(source, i):
                continue
            x = i // rows
            y = i % rows
            for cell_x in (x, rows - 1 - x):
                index = y * rows + cell_x
                bits[index // 8] |= 1 << (index % 8)

        return cls(rows=rows, bits=bytes(bits))

    def is_filled(self, index: int) -> bool:
        if not 0 <= index < CELL_CAPACITY:
            raise IndexError(f"Cell index out of range: {index}")
        return (self.bits[index // 8] >> (index % 8)) & 1 == 1

    def filled_at(self, x: int, y: int) -> bool:
        if not (0 <= x < self.rows and 0 <= y < self.rows):
            raise IndexError(f"Cell ({x}, {y}) outside {self.rows}x{self.rows} grid")
        return self.is_filled(y * self.rows + x)

    def filled_cells(self) -> Iterable[tuple[int, int]]:
        for y in range(self.rows):
            for x in range(self.rows):
                if self.is_filled(y * self.rows + x):
                    yield x, y

    def filled_count(self) -> int:
        return sum(1 for _ in self.filled_cells())

    def rows_as_bools(self) -> list[list[bool]]:
        return [[self.filled_at(x, y) for x in range(self.rows)] for y in range(self.rows)]

    def render(self, filled: str = "X", empty: str = "-") -> str:
        return "".join(
            "".join(filled if cell else empty for cell in row) + "\n"
            for row in self.rows_as_bools()
        )

    def __str__(self) -> str:
        return self.render()
