"""Pytest configuration and fixtures."""

import pytest

from miparser import config

SAMPLE_REPORT = """\
General
Unique ID                                : 123456789012345678901234567890123456 (0x5CE7A2A7A2C0D5F3A8E7B2C0)
Complete name                            : /path/to/video.mkv
Format                                   : Matroska
Format version                           : Version 4
File size                                : 6.10 GiB
Duration                                 : 1 h 45 min 30 s
Overall bit rate mode                    : Variable
Overall bit rate                         : 8 284 kb/s
Frame rate                               : 23.976 FPS
Encoded date                             : 2023-01-15 12:34:56 UTC
Writing application                      : mkvmerge v70.0.0 ('Caught A Lite Sneeze') 64-bit
Writing library                          : libebml v1.4.4 + libmatroska v1.7.1
Attachments                              : cover.jpg

Video
ID                                       : 1
Format                                   : AVC
Format/Info                              : Advanced Video Codec
Format profile                           : High@L4.1
Format settings                          : CABAC / 4 Ref Frames
Format settings, CABAC                   : Yes
Format settings, Reference frames        : 4 frames
Codec ID                                 : V_MPEG4/ISO/AVC
Duration                                 : 1 h 45 min 30 s
Bit rate mode                            : Variable
Bit rate                                 : 7 000 kb/s
Maximum bit rate                         : 36.6 Mb/s
Width                                    : 1 920 pixels
Height                                   : 1 080 pixels
Display aspect ratio                     : 16:9
Frame rate mode                          : Constant
Frame rate                               : 23.976 (24000/1001) FPS
Color space                              : YUV
Chroma subsampling                       : 4:2:0
Bit depth                                : 8 bits
Scan type                                : Progressive
Bits/(Pixel*Frame)                       : 0.141
Stream size                              : 5.16 GiB (85%)
Default                                  : Yes
Forced                                   : No

Audio #1
ID                                       : 2
Format                                   : AC-3
Codec ID                                 : A_AC3
Duration                                 : 1 h 45 min 30 s
Bit rate mode                            : Constant
Bit rate                                 : 640 kb/s
Channel(s)                               : 6 channels
Sampling rate                            : 48.0 kHz
Frame rate                               : 31.250 FPS (1536 SPF)
Bit depth                                : 16 bits
Stream size                              : 483 MiB (8%)
Title                                    : Surround 5.1
Language                                 : English
Default                                  : Yes
Forced                                   : No

Audio #2
ID                                       : 3
Format                                   : AAC LC
Codec ID                                 : A_AAC-2
Bit rate                                 : 128 kb/s
Channel(s)                               : 2 channels
Sampling rate                            : 44.1 kHz
Language                                 : French
Default                                  : No
Forced                                   : No

Text
ID                                       : 4
Format                                   : UTF-8
Codec ID                                 : S_TEXT/UTF8
Codec ID/Info                            : UTF-8 Plain Text
Duration                                 : 1 h 40 min 2 s
Bit rate                                 : 52 b/s
Frame rate                               : 0.207 FPS
Count of elements                        : 1245
Compression mode                         : Lossless
Stream size                              : 38.2 KiB (0%)
Title                                    : English SDH
Language                                 : English
Default                                  : No
Forced                                   : No

Menu
00:00:00.000                             : en:Chapter 1
00:23:50.000                             : en:Chapter 5
01:02:03.456                             : :Finale
"""

SIMPLE_REPORT = """\
General
Complete name                            : /path/to/video.mp4
File size                                : 1.50 GiB
Duration                                 : 1 h 45 min 30 s

Video
Width                                    : 1 920 pixels
Height                                   : 1 080 pixels
Frame rate                               : 23.976 FPS
"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of user config files and MIPARSER_* variables."""
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [])
    for key in ("OUTPUT_MODE", "OUTPUT_INDENT", "INPUT_ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"MIPARSER_{key}", raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def sample_report() -> str:
    """Full multi-track MediaInfo report."""
    return SAMPLE_REPORT


@pytest.fixture
def simple_report() -> str:
    """Minimal General + Video report."""
    return SIMPLE_REPORT


@pytest.fixture
def report_file(tmp_path, sample_report):
    """Sample report written to a file."""
    path = tmp_path / "report.txt"
    path.write_text(sample_report, encoding="utf-8")
    return path
