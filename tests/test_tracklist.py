import pytest

from eacripper.tracklist import CuesheetTrackList, TrackList, TrackView

CUE = """REM GENRE Rock
REM DATE 1999
REM DISCID ABCD1234
CATALOG 0000000000000
PERFORMER "Some Band"
TITLE "Some Album"
FILE "album.wav" WAVE
  TRACK 01 AUDIO
    TITLE "First Song"
    PERFORMER "Singer"
    COMPOSER "Writer"
    ISRC XXX000000001
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Second Song"
    PREGAP 00:02:00
    POSTGAP 00:01:00
    INDEX 00 03:00:00
    INDEX 01 03:02:00
"""


@pytest.fixture
def cue():
    return CuesheetTrackList(CUE)


def test_album_fields(cue):
    assert cue["Genre"] == "Rock"
    assert cue["Date"] == "1999"
    assert cue["DiscID"] == "ABCD1234"
    assert cue["UPCEAN"] == "0000000000000"
    assert cue["Album Artist"] == "Some Band"
    assert cue["Album Title"] == "Some Album"
    assert cue["File"] == "album.wav"


def test_track_fields(cue):
    assert cue.track_count() == 2
    first = cue.track(1)
    assert first["Track"] == "1"
    assert first["Title"] == "First Song"
    assert first["Artist"] == "Singer"
    assert first["Composer"] == "Writer"
    assert first["ISRC"] == "XXX000000001"
    assert first["Index Start"] == "00:00:00"
    second = cue[2]
    assert isinstance(second, TrackView)
    assert second["Title"] == "Second Song"
    assert second["Pregap"] == "00:02:00"
    assert second["Postgap"] == "00:01:00"
    assert second["Index Pregap"] == "03:00:00"
    assert second["Index Start"] == "03:02:00"


def test_track_performer_does_not_touch_album(cue):
    assert cue["Album Artist"] == "Some Band"
    assert cue.get_track_field(2, "Artist") == ""


def test_missing_fields_read_empty(cue):
    assert cue["Nothing"] == ""
    assert cue.get_track_field(1, "Nothing") == ""
    assert cue.get_track_field(99, "Title") == ""


def test_set_fields(cue):
    cue["Album Title"] = "Renamed"
    cue.track(1)["Title"] = "Changed"
    assert cue["Album Title"] == "Renamed"
    assert cue.get_track_field(1, "Title") == "Changed"


def test_set_field_of_missing_track_is_ignored(cue):
    cue.set_track_field(42, "Title", "Ghost")
    assert cue.get_track_field(42, "Title") == ""
    assert cue.track_count() == 2


def test_clone_is_independent(cue):
    copy = cue.clone()
    copy["Genre"] = "Jazz"
    copy.set_track_field(1, "Title", "Other")
    assert cue["Genre"] == "Rock"
    assert cue.get_track_field(1, "Title") == "First Song"
    assert copy.get_track_field(2, "Title") == "Second Song"


def test_parse_replaces_contents(cue):
    cue.parse('TITLE "Only"\n')
    assert cue["Album Title"] == "Only"
    assert cue["Genre"] == ""
    assert cue.track_count() == 0


def test_close_empties(cue):
    cue.close()
    assert cue.track_count() == 0
    assert cue["Album Title"] == ""


def test_crlf_lines():
    cue = CuesheetTrackList('TITLE "A"\r\nTRACK 03 AUDIO\r\n  TITLE "T"\r\n')
    assert cue["Album Title"] == "A"
    assert cue.get_track_field(3, "Title") == "T"
    assert cue.get_track_field(3, "Track") == "3"


def test_track_without_lines_after_it_is_not_created():
    cue = CuesheetTrackList('TITLE "A"\nTRACK 01 AUDIO\n')
    assert cue.track_count() == 0


def test_unclosed_quote_and_bare_lines_are_skipped():
    cue = CuesheetTrackList('TITLE "Broken\nPERFORMER\nREM GENRE\nGENRE Pop\n')
    assert cue["Album Title"] == ""
    assert cue["Album Artist"] == ""
    assert cue["Genre"] == "Pop"


def test_unquoted_value_keeps_rest_of_line():
    cue = CuesheetTrackList("TITLE Plain words here\n")
    assert cue["Album Title"] == "Plain words here"


def test_index_other_than_zero_or_one_ignored():
    cue = CuesheetTrackList("TRACK 01 AUDIO\n  INDEX 02 01:00:00\n  TITLE x\n")
    assert cue.get_track_field(1, "Index Start") == ""
    assert cue.get_track_field(1, "Index Pregap") == ""
    assert cue.get_track_field(1, "Title") == "x"


def test_album_key_must_be_string(cue):
    with pytest.raises(TypeError):
        cue[1.5] = "x"
    assert cue["Album Title"] == "Some Album"
    assert cue.track_count() == 2


def test_abstract_track_list_cannot_be_created():
    with pytest.raises(TypeError):
        TrackList()