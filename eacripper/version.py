"""Application name and version strings and their comparison."""

from __future__ import annotations

from functools import total_ordering

TITLE = "EACRipper"
VERSION = "0.4.0\u03b2"
FULL_NAME = f"{TITLE} {VERSION}"


@total_ordering
class Version:
    """A version string compared as plain text."""

    __slots__ = ("version",)

    def __init__(self, version: str | Version = "") -> None:
        text = _as_text(version)
        if text is None:
            raise TypeError(f"cannot make a version from {type(version).__name__}")
        self.version = text

    def __eq__(self, other: object) -> bool:
        text = _as_text(other)
        if text is None:
            return NotImplemented
        return self.version == text

    def __lt__(self, other: object) -> bool:
        text = _as_text(other)
        if text is None:
            return NotImplemented
        return self.version < text

    def __hash__(self) -> int:
        return hash(self.version)

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return f"Version({self.version!r})"


def _as_text(value: object) -> str | None:
    if isinstance(value, Version):
        return value.version
    if isinstance(value, str):
        return value
    return None