"""Theme configuration: grid size, foreground palette and background colour."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import Any

from .cells import check_rows
from .errors import ThemeConfigError

logger = getLogger("sigil_core.identicon.theme")

Rgb = tuple[int, int, int]

# Palette and background from Cupcake Sigil (github.com/tent/sigil), BSD 3-Clause.
DEFAULT_ROWS = 5
DEFAULT_FOREGROUND: tuple[Rgb, ...] = (
    (45, 79, 255),
    (254, 180, 44),
    (226, 121, 234),
    (30, 179, 253),
    (232, 77, 65),
    (49, 203, 115),
    (141, 69, 170),
)
DEFAULT_BACKGROUND: Rgb = (224, 224, 224)


def parse_color(value: Any) -> Rgb:
    """Accept ``#rrggbb``, ``rrggbb``, ``#rgb`` or a 3-item channel sequence."""

    if isinstance(value, str):
        raw = value.strip().lstrip("#")
        if len(raw) == 3:
            raw = "".join(ch * 2 for ch in raw)
        if len(raw) != 6:
            raise ThemeConfigError(f"Invalid colour: {value!r}", error_code="invalid_color")
        try:
            channels = bytes.fromhex(raw)
        except ValueError:
            raise ThemeConfigError(f"Invalid colour: {value!r}", error_code="invalid_color") from None
        return channels[0], channels[1], channels[2]

    if isinstance(value, (list, tuple)) and len(value) == 3:
        channels = tuple(value)
        for channel in channels:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ThemeConfigError(
                    f"Colour channels must be integers in 0..255, got {value!r}",
                    error_code="invalid_color",
                )
        return channels[0], channels[1], channels[2]

    raise ThemeConfigError(f"Invalid colour: {value!r}", error_code="invalid_color")


def image_size_step(rows: int) -> int:
    return (rows + 1) * 2


def is_valid_image_size(rows: int, size: Any) -> bool:
    """True when ``size`` is a positive int multiple of ``(rows + 1) * 2``."""

    if isinstance(size, bool) or not isinstance(size, int):
        return False
    return size > 0 and size % image_size_step(rows) == 0


@dataclass(frozen=True)
class Theme:
    """Controls how a sigil looks. Immutable, so one instance can serve many calls."""

    rows: int = DEFAULT_ROWS
    foreground: tuple[Rgb, ...] = field(default=DEFAULT_FOREGROUND)
    background: Rgb = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        try:
            check_rows(self.rows)
            if not self.foreground:
                raise ThemeConfigError("Theme needs at least one foreground colour", error_code="empty_foreground")
            foreground = tuple(parse_color(color) for color in self.foreground)
            background = parse_color(self.background)
        except ThemeConfigError as exc:
            logger.warning("[THEME] Rejected theme configuration: %s", exc)
            raise
        # Normalise to tuples so themes compare and hash by value.
        object.__setattr__(self, "foreground", foreground)
        object.__setattr__(self, "background", background)

    @classmethod
    def default(cls) -> "Theme":
        return DEFAULT_THEME

    @property
    def size_step(self) -> int:
        return image_size_step(self.rows)

    def is_valid_size(self, size: Any) -> bool:
        return is_valid_image_size(self.rows, size)

    def pick_foreground(self, selector: int) -> Rgb:
        return self.foreground[selector % len(self.foreground)]

    def validate(self) -> None:
        check_rows(self.rows)
        if not self.foreground:
            raise ThemeConfigError("Theme needs at least one foreground colour", error_code="empty_foreground")


DEFAULT_THEME = Theme()
