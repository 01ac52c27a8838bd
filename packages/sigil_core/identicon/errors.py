"""Error types raised by sigil generation."""

from __future__ import annotations


class SigilError(ValueError):
    def __init__(self, message: str, *, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class ThemeConfigError(SigilError):
    pass


class GeometryError(SigilError):
    pass


class InvalidDigestError(SigilError):
    pass
