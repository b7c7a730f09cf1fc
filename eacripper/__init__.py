"""Cuesheet parsing, RIFF wave coding, byte streams and UUID generation for audio ripping."""

__version__ = "0.4.0"

__all__ = [
    "endian",
    "streams",
    "music",
    "wave",
    "version",
    "tracklist",
    "shortcut",
    "mtrandom",
    "uuidgen",
]