"""
Genome sizes: the largest complete RefSeq genome per species, from the NCBI
assembly summary.
"""
from importlib.metadata import version, PackageNotFoundError

from .config import PipelineConfig, FeedColumns, RecordFilter, load_config
from .errors import GenomeSizeError, FetchError, DecodeError, ParseRowError, WriteError
from .parsing import RawRow, parse_rows
from .records import AssemblyRecord, filter_assembly_records
from .aggregate import GenomeSizeIndex, aggregate_genome_sizes
from .report import ReportRow, sort_genome_sizes, render_report
from .pipeline import GenomeSizePipeline, build_genome_size_index, build_report

try:
    __version__ = version("genome-sizes")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "PipelineConfig",
    "FeedColumns",
    "RecordFilter",
    "load_config",
    "GenomeSizeError",
    "FetchError",
    "DecodeError",
    "ParseRowError",
    "WriteError",
    "RawRow",
    "parse_rows",
    "AssemblyRecord",
    "filter_assembly_records",
    "GenomeSizeIndex",
    "aggregate_genome_sizes",
    "ReportRow",
    "sort_genome_sizes",
    "render_report",
    "GenomeSizePipeline",
    "build_genome_size_index",
    "build_report",
]
