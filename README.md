# eacripper

Building blocks for splitting a single-file audio image into tracks
according to its cuesheet.

- `eacripper.tracklist` parses cuesheet text into album and track fields
  (`CuesheetTrackList`, with `TrackList` as its base and `TrackView` for
  the fields of one track).
- `eacripper.wave` reads and writes canonical 44-byte-header RIFF PCM wave
  streams (`WaveHeader`, `WaveDecoder`, `WaveEncoder`, `WaveFormatError`).
- `eacripper.music` holds the decoder and encoder base classes
  (`MusicDecoder`, `MusicEncoder`) and their descriptions
  (`DecoderInformation`, `EncoderInformation`).
- `eacripper.streams` provides seekable readers and writers over memory
  and files (`MemoryStreamReader`, `FileStreamReader`, `FileStreamWriter`),
  with `SeekMode` and `StreamError`.
- `eacripper.endian` swaps and converts 16-, 32- and 64-bit integers
  between byte orders (`swap16`, `swap32`, `swap64`, `native_to_little`,
  `native_to_big`, `little_to_native`, `big_to_native`).
- `eacripper.shortcut` maps key presses in a window to command ids
  (`ShortcutKey`, `Key`, `Modifier`, `get_modifier`, `make_key`).
- `eacripper.version` holds the application's `TITLE`, `VERSION` and
  `FULL_NAME`, and a `Version` class compared as plain text.
- `eacripper.mtrandom` is an MT19937 Mersenne Twister
  (`MersenneTwister`), and `eacripper.uuidgen` uses it to make random
  version-4 UUIDs.

## Installation

```
pip install .
```

## Parsing a cuesheet

```python
from eacripper.tracklist import CuesheetTrackList

cue = CuesheetTrackList('''
PERFORMER "Some Band"
TITLE "Some Album"
FILE "album.wav" WAVE
  TRACK 01 AUDIO
    TITLE "Opening"
    INDEX 01 00:00:00
''')

print(cue["Album Title"])            # Some Album
print(cue["File"])                   # album.wav
print(cue.track_count())             # 1
print(cue.track(1)["Title"])         # Opening
print(cue.track(1)["Index Start"])   # 00:00:00
```

Missing fields read as the empty string. `REM` lines such as
`REM GENRE Rock` are read as their inner command.

## Reading and writing wave data

```python
from eacripper.streams import FileStreamReader, FileStreamWriter
from eacripper.wave import WaveDecoder, WaveEncoder

with FileStreamReader("album.wav") as reader:
    decoder = WaveDecoder()
    decoder.set_stream(reader)
    first_second = decoder.read(0, 1000, decoder.data_size(0, 1000))

with FileStreamWriter("first.wav") as writer:
    encoder = WaveEncoder()
    encoder.set_stream(writer, decoder.channels, decoder.bits_per_sample,
                       decoder.sampling_rate, len(first_second))
    encoder.write(first_second)
```

`WaveDecoder.read_split` reads a section piece by piece: pass `section=0`
first, then the value it returned, until it returns `None`.

## Generating a UUID

```
eacripper-uuidgen
eacripper-uuidgen --seed 42
```

This prints a line `ERUUID(0x..., ...)` with the UUID's fields, followed by
the UUID in its hyphenated form as a `//` comment. Without `--seed` the
generator is seeded from the current time.

## What the package does not do

- It has no window or other user interface, and no command that rips a
  disc image into tracks; it provides the parts such a tool would use.
- Wave is the only audio format it decodes or encodes. The decoder expects
  the canonical 44-byte header; the encoder writes its header once, from
  the total size given to `set_stream`, and stores neither tags nor cover
  art.
- It does not detect or convert text encodings; cuesheets are parsed from
  `str`.
- It does not store settings or shortcut bindings between runs.

## Running the tests

```
pip install .[test]
pytest
```