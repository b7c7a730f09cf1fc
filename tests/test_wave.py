import struct

import pytest

from eacripper.streams import (
    FileStreamReader,
    FileStreamWriter,
    MemoryStreamReader,
    StreamError,
)
from eacripper.wave import WaveDecoder, WaveEncoder, WaveFormatError, WaveHeader

DATA = bytes(range(256)) * 8


def make_wave(data=DATA, channels=1, bits=8, rate=1000, **fields):
    header = WaveHeader(
        channels=channels,
        sampling_rate=rate,
        bits_per_sample=bits,
        data_size=len(data),
        **fields,
    )
    return header.pack() + data


def open_decoder(blob):
    dec = WaveDecoder()
    dec.set_stream(MemoryStreamReader(blob))
    return dec


def test_header_is_44_bytes():
    assert len(WaveHeader().pack()) == WaveHeader.SIZE == 44


def test_header_ids_on_the_wire():
    packed = WaveHeader().pack()
    assert struct.unpack_from("<I", packed, 0)[0] == 0x46464952
    assert struct.unpack_from("<I", packed, 8)[0] == 0x45564157
    assert struct.unpack_from("<I", packed, 12)[0] == 0x20746D66
    assert struct.unpack_from("<I", packed, 36)[0] == 0x61746164


def test_header_round_trip():
    header = WaveHeader(channels=2, sampling_rate=44100, bits_per_sample=16,
                        data_size=1234, byte_rate=176400, block_align=4, chunk_size=1270)
    assert WaveHeader.unpack(header.pack()) == header


def test_unpack_short_data_fails():
    with pytest.raises(WaveFormatError):
        WaveHeader.unpack(b"RIFF")


def test_decoder_reads_shape():
    dec = open_decoder(make_wave(channels=2, bits=16, rate=1000))
    assert (dec.channels, dec.bits_per_sample, dec.sampling_rate) == (2, 16, 1000)


def test_decoder_length_mono_8bit():
    dec = open_decoder(make_wave())
    assert dec.length == len(DATA)


def test_read_section():
    dec = open_decoder(make_wave())
    assert dec.read(100, 300) == DATA[100:300]


def test_read_section_stereo():
    dec = open_decoder(make_wave(channels=2, bits=16))
    assert dec.read(10, 20) == DATA[dec.data_size(0, 10):dec.data_size(0, 20)]


def test_read_limited_by_size():
    dec = open_decoder(make_wave())
    assert dec.read(0, 500, 7) == DATA[:7]


def test_read_empty_section():
    dec = open_decoder(make_wave())
    assert dec.read(300, 300) == b""
    assert dec.read(400, 300) == b""


def test_read_split_covers_section():
    dec = open_decoder(make_wave())
    chunks, section = [], 0
    while True:
        chunk, section = dec.read_split(100, 600, 64, section)
        chunks.append(chunk)
        if section is None:
            break
    assert b"".join(chunks) == DATA[100:600]
    assert all(len(chunk) <= 64 for chunk in chunks)


def test_read_split_single_piece_is_final():
    dec = open_decoder(make_wave())
    chunk, section = dec.read_split(0, 50, 1000)
    assert chunk == DATA[:50]
    assert section is None


def test_bad_chunk_id_rejected():
    with pytest.raises(WaveFormatError):
        open_decoder(make_wave(chunk_id=b"RIFX"))


def test_non_pcm_rejected():
    with pytest.raises(WaveFormatError):
        open_decoder(make_wave(audio_format=3))


def test_truncated_stream_rejected():
    with pytest.raises(WaveFormatError):
        open_decoder(make_wave()[:20])


def test_unusable_reader_rejected():
    with pytest.raises(StreamError):
        WaveDecoder().set_stream(MemoryStreamReader())


def test_read_after_close_fails():
    dec = open_decoder(make_wave())
    dec.close()
    with pytest.raises(StreamError):
        dec.read(0, 10)


def test_encoder_round_trip(tmp_path):
    path = tmp_path / "out.wav"
    enc = WaveEncoder()
    with FileStreamWriter(path) as writer:
        enc.set_stream(writer, 2, 16, 1000, len(DATA))
        assert enc.write(DATA) == len(DATA)
        enc.close()
    assert path.stat().st_size == WaveHeader.SIZE + len(DATA)
    dec = WaveDecoder()
    with FileStreamReader(path) as reader:
        dec.set_stream(reader)
        assert (dec.channels, dec.bits_per_sample, dec.sampling_rate) == (2, 16, 1000)
        assert dec.read(0, dec.length) == DATA


def test_encoder_header_fields(tmp_path):
    path = tmp_path / "out.wav"
    with FileStreamWriter(path) as writer:
        WaveEncoder().set_stream(writer, 2, 16, 44100, len(DATA))
    header = WaveHeader.unpack(path.read_bytes())
    assert header.chunk_size == 36 + len(DATA)
    assert header.subchunk_size == 16
    assert header.byte_rate == header.sampling_rate * header.block_align
    assert header.data_size == len(DATA)


def test_encoder_unusable_stream():
    with pytest.raises(StreamError):
        WaveEncoder().set_stream(FileStreamWriter(), 1, 8, 1000, 0)


def test_encoder_rejects_too_many_channels(tmp_path):
    with FileStreamWriter(tmp_path / "x.wav") as writer:
        with pytest.raises(ValueError):
            WaveEncoder().set_stream(writer, 256, 8, 1000, 0)


def test_encoder_write_without_stream():
    with pytest.raises(StreamError):
        WaveEncoder().write(b"abc")


def test_encoder_tags_and_cover_art():
    enc = WaveEncoder()
    enc.set_tag("TITLE", "Song")
    assert enc.tags == {"TITLE": "Song"}
    assert enc.set_cover_art(MemoryStreamReader(b"img"), "image/jpeg") is False