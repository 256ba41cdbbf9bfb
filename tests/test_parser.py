"""Tests for the report parser."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from miparser import MediaReport, parse_report
from miparser.models import Chapter
from miparser.parser import LineKind, ScanState, classify_line, parse_chapter, parse_timestamp


def test_simple_report(simple_report):
    """Test the General + Video end-to-end scenario."""
    report = parse_report(simple_report)

    assert report.general.complete_name == "/path/to/video.mp4"
    assert report.general.file_size == 1610612736
    assert report.general.duration == 6330000
    assert len(report.video) == 1
    assert report.video[0].width == 1920
    assert report.video[0].height == 1080
    assert report.video[0].frame_rate == 23.976
    assert report.video[0].resolution == "1920x1080"


def test_general_section(sample_report):
    """Test General fields are normalized."""
    general = parse_report(sample_report).general

    assert general.format == "Matroska"
    assert general.format_version == "Version 4"
    assert general.unique_id.startswith("123456789012345678901234567890123456")
    assert general.overall_bit_rate_mode == "Variable"
    assert general.overall_bit_rate == 8284000
    assert general.frame_rate == 23.976
    assert general.encoded_date == datetime(2023, 1, 15, 12, 34, 56, tzinfo=timezone.utc)
    assert general.writing_library == "libebml v1.4.4 + libmatroska v1.7.1"
    assert general.attachments == "cover.jpg"


def test_video_section(sample_report):
    """Test Video fields are normalized."""
    video = parse_report(sample_report).video[0]

    assert video.id == 1
    assert video.format_info == "Advanced Video Codec"
    assert video.format_settings_cabac == "Yes"
    assert video.format_settings_reference_frames == "4 frames"
    assert video.codec_id == "V_MPEG4/ISO/AVC"
    assert video.bit_rate == 7000000
    assert video.maximum_bit_rate == 36600000
    assert video.display_aspect_ratio == "16:9"
    assert video.bit_depth == 8
    assert video.bits_per_pixel_frame == 0.141
    assert video.stream_size > 5 * 1024**3
    assert video.default is True
    assert video.forced is False


def test_audio_tracks_in_order(sample_report):
    """Test repeated Audio headers produce one track each, in order."""
    audio = parse_report(sample_report).audio

    assert len(audio) == 2
    first, second = audio
    assert first.id == 2
    assert first.format == "AC-3"
    assert first.channels == 6
    assert first.sampling_rate == 48000
    assert first.frame_rate == 31.25
    assert first.bit_depth == 16
    assert first.stream_size == 483 * 1024**2
    assert first.title == "Surround 5.1"
    assert first.language == "English"
    assert first.default is True
    assert second.id == 3
    assert second.channels == 2
    assert second.sampling_rate == 44100
    assert second.language == "French"
    assert second.default is False
    assert second.duration is None


def test_text_section(sample_report):
    """Test Text fields are normalized."""
    text = parse_report(sample_report).text[0]

    assert text.codec_id_info == "UTF-8 Plain Text"
    assert text.duration == 6002000
    assert text.bit_rate == 52
    assert text.count_of_elements == 1245
    assert text.compression_mode == "Lossless"
    assert text.stream_size == 39117
    assert text.title == "English SDH"


def test_chapters(sample_report):
    """Test Menu lines become chapters."""
    menu = parse_report(sample_report).menu

    assert menu == [
        Chapter(timestamp=0, title="Chapter 1"),
        Chapter(timestamp=1430000, title="Chapter 5"),
        Chapter(timestamp=3723456, title="Finale"),
    ]


def test_chapter_line():
    """Test the single chapter scenario."""
    assert parse_chapter("00:23:50.000 : en:Chapter 5") == Chapter(
        timestamp=1430000, title="Chapter 5"
    )


def test_chapter_title_keeps_inner_colons():
    """Test only the language prefix is dropped from the title."""
    expected = Chapter(timestamp=60000, title="Part 1: Intro")

    assert parse_chapter("00:01:00.000 : en:Part 1: Intro") == expected
    assert parse_report("Menu\n00:01:00.000 : en:Part 1: Intro\n").menu == [expected]


@pytest.mark.parametrize(
    "line",
    [
        "0:23:50.000 : en:Chapter 5",
        "00:23:50.00 : en:Chapter 5",
        "00:23:50.000 : Chapter 5",
        "Format : Timed Text",
    ],
)
def test_malformed_chapter_lines(line):
    """Test lines not in chapter shape are skipped."""
    assert parse_chapter(line) is None
    report = parse_report(f"Menu\n{line}\n")
    assert report.menu == []


def test_chapter_is_immutable():
    """Test chapters cannot be modified."""
    chapter = Chapter(timestamp=0, title="Intro")
    with pytest.raises(ValidationError):
        chapter.title = "Other"


def test_parse_timestamp():
    """Test timestamp conversion."""
    assert parse_timestamp("01:02:03.456") == 3723456


def test_section_repetition():
    """Test k headers give k tracks."""
    text = "\n\n".join(f"Video #{i}\nID : {i}" for i in range(1, 5))
    report = parse_report(text)

    assert [track.id for track in report.video] == [1, 2, 3, 4]


def test_ordinal_suffix_is_not_an_index():
    """Test tracks are numbered by appearance, not by the header suffix."""
    report = parse_report("Audio #7\nID : 1\n\nAudio #2\nID : 2\n")

    assert [track.id for track in report.audio] == [1, 2]


@pytest.mark.parametrize("header", ["General", "Video", "Audio #1", "Audio #2", "Text", "Menu"])
def test_unknown_key_does_not_change_fields(sample_report, header):
    """Test an unrecognized key leaves every other field untouched."""
    baseline = parse_report(sample_report)
    modified = sample_report.replace(
        f"{header}\n",
        f"{header}\nUnknownKey                               : value\n",
        1,
    )

    assert modified != sample_report
    assert parse_report(modified) == baseline


def test_unknown_section_is_skipped():
    """Test fields under an unknown section are not assigned anywhere."""
    report = parse_report("Image\nWidth : 640 pixels\n\nVideo\nWidth : 1 280 pixels\n")

    assert len(report.video) == 1
    assert report.video[0].width == 1280


def test_blank_line_closes_section():
    """Test key/value lines after a blank line are ignored until a new header."""
    report = parse_report("General\nFormat : MPEG-4\n\nDuration : 1 s\n")

    assert report.general.format == "MPEG-4"
    assert report.general.duration is None


def test_lines_before_any_header():
    """Test key/value lines with no open section are ignored."""
    report = parse_report("Format : MPEG-4\nWidth : 10 pixels\n")

    assert report == MediaReport()


def test_header_without_blank_line():
    """Test a header switches sections even without a blank line before it."""
    report = parse_report("Video\nID : 1\nAudio\nID : 2\n")

    assert report.video[0].id == 1
    assert report.audio[0].id == 2


def test_crlf_line_endings(simple_report):
    """Test Windows line endings parse the same way."""
    assert parse_report(simple_report.replace("\n", "\r\n")) == parse_report(simple_report)


def test_bytes_input(simple_report):
    """Test UTF-8 bytes are accepted."""
    assert parse_report(simple_report.encode("utf-8")) == parse_report(simple_report)


def test_non_text_input():
    """Test non-text input raises TypeError."""
    with pytest.raises(TypeError):
        parse_report(None)
    with pytest.raises(TypeError):
        parse_report(42)


def test_empty_input():
    """Test an empty report gives an empty MediaReport."""
    report = parse_report("")

    assert report == MediaReport()
    assert report.has_chapters is False


def test_malformed_values_do_not_raise():
    """Test recognized keys with malformed values are skipped."""
    text = "General\nFile size : big\nOverall bit rate : fast\nEncoded date : someday\n"
    general = parse_report(text).general

    assert general.file_size is None
    assert general.overall_bit_rate is None
    assert general.encoded_date is None


def test_idempotent(sample_report):
    """Test two parses give equal, independent reports."""
    first = parse_report(sample_report)
    second = parse_report(sample_report)

    assert first == second
    assert first.video[0] is not second.video[0]

    first.video[0].width = 1
    assert second.video[0].width == 1920


class TestClassifyLine:
    """Test line classification."""

    def test_blank(self):
        """Test whitespace-only lines."""
        assert classify_line("   ", "video")[0] is LineKind.BLANK

    def test_header(self):
        """Test a header with ordinal suffix."""
        kind, match = classify_line("Text #3", "")
        assert kind is LineKind.HEADER
        assert match.group(1) == "Text"

    def test_header_requires_exact_name(self):
        """Test section names are matched exactly."""
        assert classify_line("Videos", "")[0] is LineKind.OTHER
        assert classify_line("video", "")[0] is LineKind.OTHER

    def test_field(self):
        """Test a key/value line."""
        kind, match = classify_line("Bit rate mode      : Constant", "audio")
        assert kind is LineKind.FIELD
        assert match.group(1).strip() == "Bit rate mode"
        assert match.group(2).strip() == "Constant"

    def test_field_requires_spaced_colon(self):
        """Test the colon needs surrounding whitespace."""
        assert classify_line("Bit rate:Constant", "audio")[0] is LineKind.OTHER

    def test_chapter_only_in_menu(self):
        """Test chapter lines are only recognized in the Menu section."""
        assert classify_line("00:00:00.000 : en:Intro", "menu")[0] is LineKind.CHAPTER
        assert classify_line("Duration : 1 s", "menu")[0] is LineKind.OTHER


def test_scan_state_defaults():
    """Test a fresh scan state has no open section."""
    state = ScanState()
    assert state.section == ""
    assert state.track_index == -1


@pytest.mark.parametrize(
    ("section", "line", "field"),
    [
        ("General", "File size : 1e400 GiB", "file_size"),
        ("General", "Overall bit rate : 1e999 Mb/s", "overall_bit_rate"),
        ("General", "File size : " + "9" * 400 + " GiB", "file_size"),
        ("General", "Duration : " + "9" * 5000 + " s", "duration"),
        ("General", "Frame count : " + "1" * 5000, "frame_count"),
        ("Video", "Frame rate : 1e400 FPS", "frame_rate"),
        ("Audio", "Channel(s) : " + "6" * 5000 + " channels", "channels"),
        ("Audio", "Sampling rate : 1e400 kHz", "sampling_rate"),
    ],
)
def test_huge_numbers_do_not_raise(section, line, field):
    """Test out-of-range numbers leave the field unset instead of raising."""
    report = parse_report(f"{section}\n{line}\n")

    record = report.general if section == "General" else getattr(report, section.lower())[0]
    assert getattr(record, field) in (None, 0)
