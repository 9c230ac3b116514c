"""
Global fixtures live here

Feed rows are built column by column so the tests read like the
assembly_summary.txt layout they exercise.
"""
import pytest

from genome_sizes.config import PipelineConfig

N_COLUMNS = 38


def feed_line(
    organism="Escherichia coli",
    size="4641652",
    status="latest",
    level="Complete Genome",
    provider="NCBI RefSeq",
    n_columns=N_COLUMNS,
):
    """One tab-separated assembly_summary line with the interesting columns set."""
    fields = [f"c{i}" for i in range(n_columns)]
    for index, value in ((7, organism), (10, status), (11, level), (25, size), (31, provider)):
        if index < n_columns:
            fields[index] = value
    return "\t".join(fields)


@pytest.fixture
def make_line():
    """Builder for feed lines."""
    return feed_line


@pytest.fixture
def sample_feed() -> str:
    """A small feed with comments, rejects, duplicates and an unusable size."""
    lines = [
        "#   See ftp://ftp.ncbi.nlm.nih.gov/genomes/README_assembly_summary.txt",
        "# assembly_accession\tbioproject\tbiosample",
        feed_line("Escherichia coli", "4641652"),
        feed_line("Escherichia coli", "5498578"),
        feed_line("Escherichia coli", "9999999", status="replaced"),
        feed_line("Bacillus subtilis", "4215606"),
        feed_line("Mycoplasma genitalium", "580076"),
        feed_line("Vibrio cholerae", "4033464", level="Chromosome"),
        feed_line("Vibrio cholerae", "na"),
        feed_line("Streptomyces coelicolor", "8667507", provider="GenBank submitter"),
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def config(tmp_path) -> PipelineConfig:
    """Default configuration writing into a temporary directory."""
    return PipelineConfig(output_path=tmp_path / "sorted_genome_sizes.csv")
