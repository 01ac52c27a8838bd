"""Deterministic pixel-art identicons ("sigils") derived from arbitrary input."""

from .cells import CellGrid, MAX_ROWS, MIN_ROWS
from .config import ThemeSettings, load_theme, theme_from_env, theme_from_mapping
from .errors import GeometryError, InvalidDigestError, SigilError, ThemeConfigError
from .hashing import DIGEST_SIZE, digest_for_key, digest_hex, md5_digest
from .sigil import Sigil
from .theme import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, DEFAULT_THEME, Rgb, Theme, parse_color

__all__ = [
    "CellGrid",
    "MIN_ROWS",
    "MAX_ROWS",
    "ThemeSettings",
    "load_theme",
    "theme_from_env",
    "theme_from_mapping",
    "SigilError",
    "ThemeConfigError",
    "GeometryError",
    "InvalidDigestError",
    "DIGEST_SIZE",
    "digest_for_key",
    "digest_hex",
    "md5_digest",
    "Sigil",
    "Rgb",
    "Theme",
    "parse_color",
    "DEFAULT_THEME",
    "DEFAULT_FOREGROUND",
    "DEFAULT_BACKGROUND",
]
