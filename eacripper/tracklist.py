"""Album and track metadata, read from cue sheets."""

from __future__ import annotations

import copy
import re
from abc import ABC, abstractmethod

_ULONG_MAX = 0xFFFFFFFF
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")

_ALBUM_FIELDS = {
    "FILE": "File",
    "PERFORMER": "Album Artist",
    "TITLE": "Album Title",
    "DISCID": "DiscID",
    "CATALOG": "UPCEAN",
    "GENRE": "Genre",
    "DATE": "Date",
}

_TRACK_FIELDS = {
    "PERFORMER": "Artist",
    "TITLE": "Title",
    "COMPOSER": "Composer",
    "ISRC": "ISRC",
    "UPC_EAN": "UPCEAN",
    "PREGAP": "Pregap",
    "POSTGAP": "Postgap",
}


def _parse_unsigned(text: str) -> tuple[int, int]:
    """Parse a leading unsigned number; return it and the index after it.

    When no number leads the text, ``(0, 0)`` is returned.
    """
    match = _NUMBER.match(text)
    if match is None:
        return 0, 0
    value = int(match.group(2))
    if value > _ULONG_MAX:
        value = _ULONG_MAX
    elif match.group(1) == "-":
        value = (-value) & _ULONG_MAX
    return value, match.end()


def _split_line(line: str) -> tuple[str, str] | None:
    """Split a cue sheet line into its command and value, or None to skip it."""
    line = line.strip()
    command, sep, rest = line.partition(" ")
    if not sep:
        return None
    if command == "REM":
        command, sep, rest = rest.partition(" ")
        if not sep or not command:
            return None
    if rest.startswith('"'):
        value, sep, _ = rest[1:].partition('"')
        if not sep:
            return None
        return command, value
    return command, rest


class TrackView:
    """The fields of one track of a track list, read and written by name."""

    __slots__ = ("_list", "number")

    def __init__(self, track_list: TrackList, number: int) -> None:
        self._list = track_list
        self.number = number

    def __getitem__(self, field: str) -> str:
        return self._list.get_track_field(self.number, field)

    def __setitem__(self, field: str, value: str) -> None:
        self._list.set_track_field(self.number, field, value)

    def __repr__(self) -> str:
        return f"TrackView(number={self.number})"


class TrackList(ABC):
    """Album fields and numbered tracks with named fields.

    ``tracks["Album Title"]`` reads an album field and ``tracks[3]`` gives a
    view of track 3. Missing fields read as the empty string.
    """

    @abstractmethod
    def clone(self) -> TrackList:
        """Return an independent copy."""

    @abstractmethod
    def parse(self, text: str) -> None:
        """Replace the contents with those described by *text*."""

    @abstractmethod
    def close(self) -> None:
        """Remove all album fields and tracks."""

    @abstractmethod
    def track_count(self) -> int:
        """Return the number of tracks."""

    @abstractmethod
    def get_track_field(self, track: int, field: str) -> str:
        """Return a field of a track, or "" when either is missing."""

    @abstractmethod
    def set_track_field(self, track: int, field: str, value: str) -> None:
        """Set a field of an existing track; unknown tracks are left alone."""

    @abstractmethod
    def _get_album_field(self, field: str) -> str:
        """Return an album field, or "" when missing."""

    @abstractmethod
    def _set_album_field(self, field: str, value: str) -> None:
        """Set an album field."""

    def track(self, number: int) -> TrackView:
        """Return a view of the fields of track *number*."""
        return TrackView(self, number)

    def __getitem__(self, field: str | int) -> str | TrackView:
        if isinstance(field, int):
            return self.track(field)
        return self._get_album_field(field)

    def __setitem__(self, field: str, value: str) -> None:
        if not isinstance(field, str):
            raise TypeError(f"album field names are strings, not {type(field).__name__}")
        self._set_album_field(field, value)


class CuesheetTrackList(TrackList):
    """A track list read from the text of a cue sheet."""

    def __init__(self, text: str | None = None) -> None:
        self._album: dict[str, str] = {}
        self._tracks: dict[int, dict[str, str]] = {}
        if text is not None:
            self.parse(text)

    def clone(self) -> CuesheetTrackList:
        other = CuesheetTrackList()
        other._album = dict(self._album)
        other._tracks = copy.deepcopy(self._tracks)
        return other

    def parse(self, text: str) -> None:
        self.close()
        in_track = False
        track_begin = False
        track = 0

        for raw in text.split("\n"):
            parsed = _split_line(raw)
            if parsed is None:
                continue
            command, value = parsed

            if in_track:
                fields = self._tracks.setdefault(track, {})
                if track_begin:
                    fields["Track"] = str(track)
                    track_begin = False

                if command == "INDEX":
                    index, end = _parse_unsigned(value)
                    rest = value[end:].lstrip(" ")
                    if index == 0:
                        fields["Index Pregap"] = rest
                    elif index == 1:
                        fields["Index Start"] = rest
                elif command == "TRACK":
                    track = _parse_unsigned(value)[0]
                    track_begin = True
                elif command in _TRACK_FIELDS:
                    fields[_TRACK_FIELDS[command]] = value
            elif command == "TRACK":
                track = _parse_unsigned(value)[0]
                in_track = True
                track_begin = True
            elif command in _ALBUM_FIELDS:
                self._album[_ALBUM_FIELDS[command]] = value

    def close(self) -> None:
        self._album.clear()
        self._tracks.clear()

    def track_count(self) -> int:
        return len(self._tracks)

    def get_track_field(self, track: int, field: str) -> str:
        return self._tracks.get(track, {}).get(field, "")

    def set_track_field(self, track: int, field: str, value: str) -> None:
        fields = self._tracks.get(track)
        if fields is not None:
            fields[field] = value

    def _get_album_field(self, field: str) -> str:
        return self._album.get(field, "")

    def _set_album_field(self, field: str, value: str) -> None:
        self._album[field] = value