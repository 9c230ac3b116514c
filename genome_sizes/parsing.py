"""
Parsing of the tab-delimited assembly summary into rows of string fields.
"""
import logging
from typing import Iterable, Iterator, Optional, Union

from genome_sizes.errors import DecodeError, ParseRowError

logger = logging.getLogger(__name__)


class RawRow(tuple):
    """
    One line of the feed, split into fields. Rows are ragged: asking for a
    column past the end gives None instead of an IndexError.
    """

    def get(self, index: int) -> Optional[str]:
        """Field at a 0-based position, or None if the row is too short."""
        if 0 <= index < len(self):
            return self[index]
        return None


def decode_feed(data: Union[bytes, str], encoding: str = "utf-8") -> str:
    """Turn the downloaded bytes into text. Text input is returned unchanged."""
    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(
            f"Feed is not valid {encoding} text (byte {e.start}): {e.reason}"
        ) from e


def strip_comments(lines: Iterable[str], marker: str = "#") -> Iterator[str]:
    """Drop lines whose first character is the comment marker."""
    for line in lines:
        if not line.startswith(marker):
            yield line


def sample_lines(text: str, n: int = 5) -> list[str]:
    """First n lines of the feed, comments included."""
    lines = []
    for i, line in enumerate(text.splitlines()):
        if i >= n:
            break
        lines.append(line)
    return lines


def parse_rows(
    data: Union[bytes, str],
    delimiter: str = "\t",
    comment_marker: str = "#",
    encoding: str = "utf-8",
) -> Iterator[RawRow]:
    """
    Split the feed into RawRows. Decoding happens straight away so a bad byte
    fails the call itself; rows are then produced lazily.
    :param data (bytes | str): The raw feed.
    :param delimiter (str): Single field separator. No quoting is recognised.
    :param comment_marker (str): Lines starting with this are skipped.
    :param encoding (str): Used when data is bytes.
    :return Iterator[RawRow]: One row per non-blank, non-comment line.
    """
    if len(delimiter) != 1:
        raise ParseRowError(f"Delimiter must be a single character, got {delimiter!r}")
    text = decode_feed(data, encoding)
    return _iter_rows(text, delimiter, comment_marker)


def _iter_rows(text: str, delimiter: str, comment_marker: str) -> Iterator[RawRow]:
    # only \n (or \r\n) ends a row
    lines = (line.removesuffix("\r") for line in text.split("\n"))
    lines = (line for line in strip_comments(lines, comment_marker) if line)
    n_rows = 0
    for line in lines:
        n_rows += 1
        yield RawRow(line.split(delimiter))
    logger.debug("Parsed %s rows.", format(n_rows, ','))
