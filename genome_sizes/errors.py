"""
Exceptions raised by the genome size pipeline.

Anything that aborts a run derives from GenomeSizeError. Per-record problems
(missing columns, a size that won't parse) are never raised; the record or
field is simply left out.
"""


class GenomeSizeError(Exception):
    """Base exception for all genome size pipeline failures."""


class FetchError(GenomeSizeError):
    """Raised when the assembly summary feed can't be downloaded or read."""


class DecodeError(GenomeSizeError):
    """Raised when the feed bytes are not valid text."""


class ParseRowError(GenomeSizeError):
    """Raised for structurally broken input the parser cannot work with."""


class WriteError(GenomeSizeError):
    """Raised when the report can't be written to its destination."""
