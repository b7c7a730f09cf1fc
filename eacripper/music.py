"""Interfaces of music decoders and encoders working on PCM data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from eacripper.streams import StreamReader, StreamWriter


@dataclass(frozen=True)
class DecoderInformation:
    """Description of a decoder: its name, extensions, MIME types and magic."""

    name: str
    extension: str
    mime: str
    magic: bytes = b""


@dataclass(frozen=True)
class EncoderInformation:
    """Description of an encoder: its name, extension and MIME type."""

    name: str
    extension: str
    mime: str


class _PcmShape(ABC):
    """The shape of PCM data."""

    @property
    @abstractmethod
    def channels(self) -> int:
        """Number of channels."""

    @property
    @abstractmethod
    def bits_per_sample(self) -> int:
        """Number of bits per sample."""

    @property
    @abstractmethod
    def sampling_rate(self) -> int:
        """Sampling rate in Hz."""


def _section_size(shape: _PcmShape, start_ms: int, end_ms: int) -> int:
    if end_ms < start_ms:
        raise ValueError(f"section end {end_ms} lies before its start {start_ms}")
    frames = (end_ms - start_ms) * shape.sampling_rate // 1000
    return shape.channels * (shape.bits_per_sample // 8) * frames


class MusicDecoder(_PcmShape):
    """Reads PCM data out of an encoded music stream."""

    @property
    @abstractmethod
    def info(self) -> DecoderInformation:
        """Information about this decoder."""

    @property
    @abstractmethod
    def length(self) -> int:
        """Length of the music in milliseconds."""

    def data_size(self, start_ms: int, end_ms: int) -> int:
        """Return the byte size of the section ``[start_ms, end_ms)``."""
        return _section_size(self, start_ms, end_ms)

    @abstractmethod
    def set_stream(self, stream: StreamReader) -> None:
        """Start decoding *stream*; raise if it cannot be decoded."""

    @abstractmethod
    def close(self) -> None:
        """Stop using the current stream."""

    @abstractmethod
    def read(self, start_ms: int, end_ms: int, size: int | None = None) -> bytes:
        """Read at most *size* bytes of the section ``[start_ms, end_ms)``."""

    @abstractmethod
    def read_split(
        self, start_ms: int, end_ms: int, size: int, section: int = 0
    ) -> tuple[bytes, int | None]:
        """Read the next piece of a section.

        *section* is 0 on the first call and then the value returned by the
        previous call. The second item returned is ``None`` once the piece
        just read is the last one.
        """


class MusicEncoder(_PcmShape):
    """Writes PCM data into an encoded music stream."""

    @property
    @abstractmethod
    def info(self) -> EncoderInformation:
        """Information about this encoder."""

    def data_size(self, start_ms: int, end_ms: int) -> int:
        """Return the byte size of the section ``[start_ms, end_ms)``."""
        return _section_size(self, start_ms, end_ms)

    @abstractmethod
    def set_stream(
        self,
        stream: StreamWriter,
        channels: int,
        bits_per_sample: int,
        sampling_rate: int,
        total_size: int = 0,
    ) -> None:
        """Start encoding into *stream*; *total_size* is 0 when unknown."""

    @abstractmethod
    def close(self) -> None:
        """Finish with the current stream."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write PCM *data* and return the number of bytes written."""

    @abstractmethod
    def set_tag(self, name: str, value: str) -> None:
        """Set a music tag."""

    @abstractmethod
    def set_cover_art(self, image: StreamReader, mime: str) -> bool:
        """Attach cover art; return whether the format stored it."""