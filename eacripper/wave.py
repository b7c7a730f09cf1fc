"""RIFF wave decoder and encoder for uncompressed PCM audio."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from eacripper.music import (
    DecoderInformation,
    EncoderInformation,
    MusicDecoder,
    MusicEncoder,
)
from eacripper.streams import SeekMode, StreamError, StreamReader, StreamWriter

WAVE_FORMAT_PCM = 1

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


class WaveFormatError(ValueError):
    """Raised when data is not a PCM wave stream."""


@dataclass
class WaveHeader:
    """The canonical 44-byte header of a PCM wave file."""

    channels: int = 0
    sampling_rate: int = 0
    bits_per_sample: int = 0
    data_size: int = 0
    byte_rate: int = 0
    block_align: int = 0
    chunk_size: int = 0
    subchunk_size: int = 16
    audio_format: int = WAVE_FORMAT_PCM
    chunk_id: bytes = b"RIFF"
    format_id: bytes = b"WAVE"
    subchunk_id: bytes = b"fmt "
    data_id: bytes = b"data"

    SIZE: ClassVar[int] = _HEADER.size

    def pack(self) -> bytes:
        """Return the header as little-endian bytes."""
        try:
            return _HEADER.pack(
                self.chunk_id,
                self.chunk_size,
                self.format_id,
                self.subchunk_id,
                self.subchunk_size,
                self.audio_format,
                self.channels,
                self.sampling_rate,
                self.byte_rate,
                self.block_align,
                self.bits_per_sample,
                self.data_id,
                self.data_size,
            )
        except struct.error as exc:
            raise ValueError(f"wave header field out of range: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> WaveHeader:
        """Parse a header from the first bytes of *data*."""
        if len(data) < cls.SIZE:
            raise WaveFormatError(
                f"wave header needs {cls.SIZE} bytes, got {len(data)}"
            )
        (
            chunk_id,
            chunk_size,
            format_id,
            subchunk_id,
            subchunk_size,
            audio_format,
            channels,
            sampling_rate,
            byte_rate,
            block_align,
            bits_per_sample,
            data_id,
            data_size,
        ) = _HEADER.unpack_from(data)
        return cls(
            channels=channels,
            sampling_rate=sampling_rate,
            bits_per_sample=bits_per_sample,
            data_size=data_size,
            byte_rate=byte_rate,
            block_align=block_align,
            chunk_size=chunk_size,
            subchunk_size=subchunk_size,
            audio_format=audio_format,
            chunk_id=chunk_id,
            format_id=format_id,
            subchunk_id=subchunk_id,
            data_id=data_id,
        )

    def _is_pcm_wave(self) -> bool:
        return (
            self.chunk_id == b"RIFF"
            and self.format_id == b"WAVE"
            and self.subchunk_id == b"fmt "
            and self.data_id == b"data"
            and self.audio_format == WAVE_FORMAT_PCM
        )


class WaveDecoder(MusicDecoder):
    """Reads PCM sections out of a wave stream."""

    INFO: ClassVar[DecoderInformation] = DecoderInformation(
        "RIFF Audio (Wave)",
        "wav;wave",
        "audio/wav;audio/wave;audio/x-wav;audio/vnd.wave",
        b"\x4d\x5a",
    )

    def __init__(self) -> None:
        self._reader: StreamReader | None = None
        self._header: WaveHeader | None = None
        self._samples = 0

    @property
    def info(self) -> DecoderInformation:
        return self.INFO

    def _require_header(self) -> WaveHeader:
        if self._header is None:
            raise StreamError("no wave stream has been set")
        return self._header

    def _require_reader(self) -> StreamReader:
        if self._reader is None:
            raise StreamError("decoder has no stream")
        return self._reader

    @property
    def channels(self) -> int:
        return self._require_header().channels

    @property
    def bits_per_sample(self) -> int:
        return self._require_header().bits_per_sample

    @property
    def sampling_rate(self) -> int:
        return self._require_header().sampling_rate

    @property
    def length(self) -> int:
        return self._samples * 1000 // self.sampling_rate

    def set_stream(self, stream: StreamReader) -> None:
        self._reader = stream
        if not stream.usable():
            self.close()
            raise StreamError("stream is not usable")
        raw = stream.read(WaveHeader.SIZE)
        if len(raw) != WaveHeader.SIZE:
            self.close()
            raise WaveFormatError("truncated wave header")
        header = WaveHeader.unpack(raw)
        bytes_per_sample = header.bits_per_sample // 8
        if not header._is_pcm_wave():
            self.close()
            raise WaveFormatError("not a PCM wave stream")
        if header.channels == 0 or bytes_per_sample == 0 or header.sampling_rate == 0:
            self.close()
            raise WaveFormatError("wave header describes no audio")
        self._header = header
        self._samples = header.data_size // header.channels // bytes_per_sample

    def close(self) -> None:
        self._reader = None

    def _seek(self, ms: int) -> None:
        self._require_reader().seek(
            self.data_size(0, ms) + WaveHeader.SIZE, SeekMode.BEGIN
        )

    def read(self, start_ms: int, end_ms: int, size: int | None = None) -> bytes:
        if start_ms >= end_ms:
            return b""
        wanted = self.data_size(start_ms, end_ms)
        if size is not None:
            wanted = min(max(size, 0), wanted)
        reader = self._require_reader()
        self._seek(start_ms)
        return reader.read(wanted)

    def read_split(
        self, start_ms: int, end_ms: int, size: int, section: int = 0
    ) -> tuple[bytes, int | None]:
        reader = self._require_reader()
        if section == 0:
            self._seek(start_ms)
        left = self.data_size(start_ms, end_ms) - section
        chunk = reader.read(min(max(size, 0), max(left, 0)))
        if not chunk or len(chunk) >= left:
            return chunk, None
        return chunk, section + len(chunk)


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} {value} does not fit in {bits} bits")


class WaveEncoder(MusicEncoder):
    """Writes PCM data into a wave stream.

    The header is written once, from the total size given up front.
    """

    INFO: ClassVar[EncoderInformation] = EncoderInformation(
        "RIFF Audio (Wave)", "wav", "audio/wav"
    )

    def __init__(self) -> None:
        self._writer: StreamWriter | None = None
        self._header: WaveHeader | None = None
        self.tags: dict[str, str] = {}

    @property
    def info(self) -> EncoderInformation:
        return self.INFO

    def _require_header(self) -> WaveHeader:
        if self._header is None:
            raise StreamError("no wave stream has been set")
        return self._header

    @property
    def channels(self) -> int:
        return self._require_header().channels

    @property
    def bits_per_sample(self) -> int:
        return self._require_header().bits_per_sample

    @property
    def sampling_rate(self) -> int:
        return self._require_header().sampling_rate

    def set_stream(
        self,
        stream: StreamWriter,
        channels: int,
        bits_per_sample: int,
        sampling_rate: int,
        total_size: int = 0,
    ) -> None:
        _check_range("channels", channels, 8)
        _check_range("bits per sample", bits_per_sample, 8)
        _check_range("sampling rate", sampling_rate, 32)
        _check_range("total size", total_size, 32)
        self._writer = stream
        if not stream.usable():
            raise StreamError("stream is not usable")
        header = WaveHeader(
            channels=channels,
            sampling_rate=sampling_rate,
            bits_per_sample=bits_per_sample,
            data_size=total_size,
            byte_rate=(sampling_rate * channels * bits_per_sample // 8) & 0xFFFFFFFF,
            block_align=(channels * bits_per_sample // 8) & 0xFFFF,
            chunk_size=(36 + total_size) & 0xFFFFFFFF,
        )
        self._header = header
        if stream.write(header.pack()) != WaveHeader.SIZE:
            self.close()
            raise StreamError("cannot write wave header")

    def close(self) -> None:
        self._writer = None

    def write(self, data: bytes) -> int:
        if self._writer is None:
            raise StreamError("encoder has no stream")
        written = self._writer.write(data)
        if written != len(data):
            raise StreamError(f"short write: {written} of {len(data)} bytes")
        return written

    def set_tag(self, name: str, value: str) -> None:
        """Remember a tag; the wave output carries no tags."""
        self.tags[name] = value

    def set_cover_art(self, image: StreamReader, mime: str) -> bool:
        """Wave files cannot hold cover art, so nothing is stored."""
        return False