"""Reading MediaInfo reports from files."""

import logging
import os
import warnings

from miparser.config import get_config
from miparser.models import MediaReport
from miparser.parser import parse_report

logger = logging.getLogger(__name__)


def read_report(path: str, encoding: str | None = None) -> MediaReport:
    """Read and parse a MediaInfo text report.

    Args:
        path: Path to the report file
        encoding: Text encoding (defaults to the configured input encoding)

    Returns:
        MediaReport parsed from the file

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    encoding = encoding or get_config().input.encoding
    with open(path, encoding=encoding) as f:
        text = f.read()

    logger.debug("Read %d characters from %s", len(text), path)
    return parse_report(text)


def read_reports(paths: list[str], encoding: str | None = None) -> list[MediaReport]:
    """Read and parse multiple report files.

    Files that cannot be read are reported with a warning and skipped.

    Args:
        paths: List of file paths
        encoding: Text encoding (defaults to the configured input encoding)

    Returns:
        List of MediaReport objects, in the order of paths
    """
    results = []
    for path in paths:
        try:
            results.append(read_report(path, encoding=encoding))
        except (OSError, UnicodeDecodeError) as e:
            warnings.warn(f"Failed to read {path}: {e}", stacklevel=2)
    return results
