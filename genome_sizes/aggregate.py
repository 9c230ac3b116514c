"""
Reduce assembly records to the largest genome size seen for each species.
"""
import logging
import math
from typing import Callable, Iterable, Optional

from genome_sizes.records import AssemblyRecord

logger = logging.getLogger(__name__)

GenomeSizeIndex = dict[str, float]


def fold_record(index: GenomeSizeIndex, record: AssemblyRecord) -> bool:
    """
    Fold one record into the index in place. Records without a size, or with a
    non-finite one, are skipped. A stored size is only ever replaced by a
    strictly larger one.
    :return bool: Whether the index changed.
    """
    size = record.genome_size
    if size is None:
        return False
    if not math.isfinite(size):
        logger.warning("Ignoring non-finite genome size %s for %s.", size, record.organism_name)
        return False
    current = index.get(record.organism_name)
    if current is None or size > current:
        index[record.organism_name] = size
        return True
    return False


def aggregate_genome_sizes(
    records: Iterable[AssemblyRecord],
    on_record: Optional[Callable[[AssemblyRecord], None]] = None,
) -> GenomeSizeIndex:
    """
    Build the species -> maximum genome size index.
    :param records (Iterable[AssemblyRecord]): Admitted records, any order.
    :param on_record (Callable): Optional observer called once per record,
        after it has been folded in. Used for progress display.
    :return GenomeSizeIndex: One entry per species with at least one usable size.
    """
    index: GenomeSizeIndex = {}
    n_records = 0
    for record in records:
        n_records += 1
        fold_record(index, record)
        if on_record is not None:
            on_record(record)
    logger.info("Genome sizes for %s species from %s records.",
                format(len(index), ','), format(n_records, ','))
    return index
