"""Sigil assembly and rasterization.

A sigil binds one foreground colour, the theme background, the grid size and
a mirrored :class:`CellGrid`. The first digest byte picks the foreground
colour and the remaining fifteen drive the cells, which keeps the output
compatible with Cupcake Sigil.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from PIL import Image, ImageDraw

from .cells import CellGrid
from .errors import GeometryError
from .hashing import ensure_digest, md5_digest
from .theme import Rgb, Theme, image_size_step, is_valid_image_size

logger = logging.getLogger("sigil_core.identicon.sigil")


@dataclass(frozen=True)
class Sigil:
    foreground: Rgb
    background: Rgb
    rows: int
    cells: CellGrid

    @classmethod
    def from_hash(cls, theme: Theme, digest: bytes) -> "Sigil":
        """Create a sigil for a precomputed 16-byte digest."""

        theme.validate()
        digest = ensure_digest(digest)

        sigil = cls(
            foreground=theme.pick_foreground(digest[0]),
            background=theme.background,
            rows=theme.rows,
            cells=CellGrid.build(theme.rows, digest[1:]),
        )
        logger.debug("[SIGIL] Built sigil: digest=%s, rows=%d, filled=%d",
                     digest.hex(), sigil.rows, sigil.cells.filled_count())
        return sigil

    @classmethod
    def generate(cls, theme: Theme, data: bytes | str) -> "Sigil":
        """Generate a sigil by hashing ``data`` (``str`` is hashed as UTF-8)."""

        return cls.from_hash(theme, md5_digest(data))

    def invert(self) -> "Sigil":
        return replace(self, foreground=self.background, background=self.foreground)

    def check_size(self, size: int) -> None:
        if not is_valid_image_size(self.rows, size):
            raise GeometryError(
                f"Image size must be a positive multiple of {image_size_step(self.rows)}, got {size!r}",
                error_code="invalid_size",
            )

    def to_image(self, size: int) -> Image.Image:
        """Render a ``size`` x ``size`` RGB image.

        ``size`` must be a multiple of ``(rows + 1) * 2``. Each cell is
        ``size // (rows + 1)`` pixels wide and half a cell of background pads
        every edge.
        """

        self.check_size(size)
        cell_size = size // (self.rows + 1)
        padding = cell_size // 2
        inner_end = size - padding

        image = Image.new("RGB", (size, size), self.background)
        draw = ImageDraw.Draw(image)
        for x, y in self.cells.filled_cells():
            x0 = padding + x * cell_size
            y0 = padding + y * cell_size
            x1 = min(x0 + cell_size, inner_end) - 1
            y1 = min(y0 + cell_size, inner_end) - 1
            draw.rectangle([x0, y0, x1, y1], fill=self.foreground)

        logger.debug("[SIGIL] Rendered image: size=%d, cell_size=%d, padding=%d", size, cell_size, padding)
        return image

    def to_pixels(self, size: int) -> bytes:
        """Raw row-major RGB bytes of :meth:`to_image`."""

        return self.to_image(size).tobytes()

    def __str__(self) -> str:
        return self.cells.render()
