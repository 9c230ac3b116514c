"""
A module for sorting the genome size index and rendering it as a report.
"""
from dataclasses import dataclass
import pandas as pd

from genome_sizes.aggregate import GenomeSizeIndex

REPORT_COLUMNS = ("Species", "Genome Size (bp)")


@dataclass(frozen=True)
class ReportRow:
    """One line of the report."""
    species: str
    size: float


def sort_genome_sizes(index: GenomeSizeIndex) -> list[ReportRow]:
    """
    Order species by genome size, smallest first. Equal sizes are ordered by
    species name so the output is reproducible. NaN sorts last.
    """
    if not index:
        return []
    df = pd.DataFrame(list(index.items()), columns=['species', 'size'])
    df = df.sort_values(by=['size', 'species'], ascending=True, na_position='last')
    return [
        ReportRow(species=species, size=float(size))
        for species, size in df.itertuples(index=False, name=None)
    ]


def format_size(size: float) -> str:
    """Whole base pairs, rounding halves to the nearest even number."""
    return str(int(round(size)))


def render_report(rows: list[ReportRow], delimiter: str = ",") -> str:
    """
    Render sorted rows as delimited text with a header line. Fields that
    contain the delimiter are quoted.
    """
    df = pd.DataFrame(
        [(row.species, format_size(row.size)) for row in rows],
        columns=list(REPORT_COLUMNS),
    )
    return df.to_csv(index=False, sep=delimiter, lineterminator='\n')


def render_table(rows: list[ReportRow], width: int = 50) -> str:
    """Fixed-width table for the console."""
    lines = [
        f"{REPORT_COLUMNS[0]:<{width}} {REPORT_COLUMNS[1]:>20}",
        "-" * (width + 20),
    ]
    for row in rows:
        lines.append(f"{row.species:<{width}} {format_size(row.size):>20}")
    return "\n".join(lines)
