"""
Configuration for the genome size pipeline.
"""

from pathlib import Path
import logging
from typing import Optional
import yaml
from pydantic import BaseModel, Field, field_validator

ASSEMBLY_SUMMARY_URL = (
    "https://ftp.ncbi.nlm.nih.gov/genomes/ASSEMBLY_REPORTS/assembly_summary_refseq.txt"
)

logger = logging.getLogger(__name__)


class FeedColumns(BaseModel):
    """
    0-based column positions in assembly_summary.txt. The feed has no usable
    header row, so every lookup is positional and lives here.
    """
    organism_name: int = Field(7, ge=0, description="Column holding the organism name")
    version_status: int = Field(10, ge=0, description="'latest', 'replaced' or 'suppressed'")
    assembly_level: int = Field(11, ge=0, description="e.g. 'Complete Genome', 'Contig'")
    genome_size: int = Field(25, ge=0, description="Total genome size in base pairs")
    annotation_provider: int = Field(31, ge=0, description="e.g. 'NCBI RefSeq'")


class RecordFilter(BaseModel):
    """Exact values a row must carry to be kept. No case-folding, no trimming."""
    version_status: str = Field("latest", description="Only current assembly versions")
    assembly_level: str = Field("Complete Genome", description="Only complete genomes")
    annotation_provider: str = Field("NCBI RefSeq", description="Only RefSeq-annotated assemblies")


class PipelineConfig(BaseModel):
    """
    Configuration for the genome size pipeline. Contains everything needed to
    fetch the assembly summary, select records and write the report.
    """
    feed_url: str = Field(ASSEMBLY_SUMMARY_URL, description="Where to download the assembly summary")
    output_path: Path = Field(Path("sorted_genome_sizes.csv"), description="Where to write the CSV report")
    cache_dir: Optional[Path] = Field(None, description="Keep a copy of the downloaded feed here (None to disable)")
    log_file: Optional[Path] = Field(None, description="Also log to this rotating file")
    # Feed format
    comment_marker: str = Field("#", description="Lines starting with this character are ignored")
    delimiter: str = Field("\t", description="Field separator of the feed")
    output_delimiter: str = Field(",", description="Field separator of the report")
    encoding: str = Field("utf-8", description="Text encoding of the feed")
    # HTTP
    timeout: float = Field(60.0, gt=0, description="Seconds to wait for the feed server")
    retries: int = Field(3, ge=1, description="Download attempts before giving up")
    sample_lines: int = Field(5, ge=0, description="Feed lines to echo at DEBUG level")
    columns: FeedColumns = Field(default_factory=FeedColumns)
    filters: RecordFilter = Field(default_factory=RecordFilter)

    @field_validator('comment_marker', 'delimiter', 'output_delimiter')
    @classmethod
    def single_character(cls, value: str) -> str:
        """Markers and delimiters are matched as one character."""
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        return value

    @field_validator('cache_dir', 'log_file', 'output_path', mode='before')
    @classmethod
    def expand_user(cls, value):
        """Allow ~ in paths coming from YAML."""
        if isinstance(value, str):
            if not value.strip():
                return None
            return Path(value).expanduser()
        if isinstance(value, Path):
            return value.expanduser()
        return value


def load_config(config_path="config.yaml") -> dict:
    """Load configuration from a YAML file. A missing file means all defaults."""
    config_path = Path(config_path)
    if not config_path.exists():
        logger.info("No config found at %s, using defaults.", config_path)
        return {}
    logger.info("Loading config object from %s...", config_path)
    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}
