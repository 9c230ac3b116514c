"""
Selection of assembly summary rows and projection into AssemblyRecords.
"""
from dataclasses import dataclass
import logging
import math
import re
from typing import Iterable, Optional

from genome_sizes.config import FeedColumns, RecordFilter
from genome_sizes.parsing import RawRow

logger = logging.getLogger(__name__)

# Plain decimal notation only: no whitespace, no sign other than '+', no
# 'inf'/'nan' and no digit-group underscores.
_SIZE_PATTERN = re.compile(r'\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


@dataclass(frozen=True)
class AssemblyRecord:
    """One admitted assembly. genome_size is None when the column was unusable."""
    organism_name: str
    genome_size: Optional[float] = None


def parse_genome_size(value: Optional[str]) -> Optional[float]:
    """
    Read the genome_size column as a non-negative number of base pairs.
    Returns None for absent, malformed or non-finite values.
    """
    if value is None or not _SIZE_PATTERN.fullmatch(value):
        return None
    size = float(value)
    if not math.isfinite(size):
        # e.g. '1e999'
        return None
    return size


def is_admitted(row: RawRow, columns: FeedColumns, filters: RecordFilter) -> bool:
    """True if all three predicate columns hold exactly the expected values."""
    return (
        row.get(columns.version_status) == filters.version_status
        and row.get(columns.assembly_level) == filters.assembly_level
        and row.get(columns.annotation_provider) == filters.annotation_provider
    )


def project_record(row: RawRow, columns: FeedColumns) -> AssemblyRecord:
    """Pull the organism name and genome size out of an admitted row."""
    organism_name = row.get(columns.organism_name)
    return AssemblyRecord(
        organism_name=organism_name if organism_name is not None else "",
        genome_size=parse_genome_size(row.get(columns.genome_size)),
    )


def filter_assembly_records(
    rows: Iterable[RawRow],
    columns: Optional[FeedColumns] = None,
    filters: Optional[RecordFilter] = None,
) -> list[AssemblyRecord]:
    """
    Keep rows matching the filter and project them, preserving input order.
    :param rows (Iterable[RawRow]): Parsed feed rows.
    :param columns (FeedColumns): Column positions; defaults to the RefSeq layout.
    :param filters (RecordFilter): Expected values; defaults to latest complete RefSeq genomes.
    :return list[AssemblyRecord]: Admitted records.
    """
    columns = columns or FeedColumns()
    filters = filters or RecordFilter()
    records = []
    n_rows = 0
    for row in rows:
        n_rows += 1
        if is_admitted(row, columns, filters):
            records.append(project_record(row, columns))
    n_unsized = sum(1 for record in records if record.genome_size is None)
    logger.info("Admitted %s of %s assembly records.", format(len(records), ','), format(n_rows, ','))
    if n_unsized:
        logger.warning("%s admitted records have no usable genome size.", format(n_unsized, ','))
    return records
