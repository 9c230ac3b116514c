"""
This module contains the main pipeline for turning the NCBI assembly summary
into a sorted genome size report. It is run as a Class to allow for
instantiation and configuration.

The functions at the top are the pure core: text in, index or report out.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Optional, Union

from genome_sizes.aggregate import GenomeSizeIndex, aggregate_genome_sizes
from genome_sizes.config import PipelineConfig
from genome_sizes.fetch import fetch_feed, load_or_fetch_feed, read_feed
from genome_sizes.parsing import decode_feed, parse_rows, sample_lines
from genome_sizes.records import AssemblyRecord, filter_assembly_records
from genome_sizes.report import ReportRow, render_report, sort_genome_sizes
from genome_sizes.sink import write_report

logger = logging.getLogger(__name__)

RecordObserver = Callable[[AssemblyRecord], None]


def load_assembly_records(data: Union[bytes, str], config: PipelineConfig) -> list[AssemblyRecord]:
    """Parse the feed and keep the records selected by config.filters."""
    text = decode_feed(data, config.encoding)
    for i, line in enumerate(sample_lines(text, config.sample_lines)):
        logger.debug("Line %s: %s", i + 1, line)
    rows = parse_rows(text, delimiter=config.delimiter, comment_marker=config.comment_marker)
    return filter_assembly_records(rows, config.columns, config.filters)


def build_genome_size_index(
    data: Union[bytes, str],
    config: PipelineConfig,
    on_record: Optional[RecordObserver] = None,
) -> GenomeSizeIndex:
    """Feed -> species -> maximum genome size."""
    records = load_assembly_records(data, config)
    return aggregate_genome_sizes(records, on_record=on_record)


def build_report(
    data: Union[bytes, str],
    config: PipelineConfig,
    on_record: Optional[RecordObserver] = None,
) -> tuple[list[ReportRow], str]:
    """Feed -> sorted report rows and their rendered text."""
    index = build_genome_size_index(data, config, on_record=on_record)
    rows = sort_genome_sizes(index)
    return rows, render_report(rows, delimiter=config.output_delimiter)


class GenomeSizePipeline:
    """A class to fetch the assembly summary and write the genome size report."""
    def __init__(self, config: PipelineConfig, on_record: Optional[RecordObserver] = None):
        self.config = config
        self.on_record = on_record
        if config.log_file is not None:
            self.setup_logging(config.log_file)

    def setup_logging(self, log_file: Path):
        """Also log this pipeline's runs to a rotating file."""
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root = logging.getLogger()
        handler = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        root.addHandler(handler)
        if root.getEffectiveLevel() > logging.INFO:
            root.setLevel(logging.INFO)

    @property
    def cache_path(self) -> Optional[Path]:
        """Where the downloaded feed is kept, if caching is on."""
        if self.config.cache_dir is None:
            return None
        name = self.config.feed_url.rstrip('/').rsplit('/', 1)[-1] or "assembly_summary.txt"
        return self.config.cache_dir / name

    def fetch(self) -> bytes:
        """Get the raw feed, from the cache when there is one."""
        return load_or_fetch_feed(
            cache_path=self.cache_path,
            fetch_func=fetch_feed,
            url=self.config.feed_url,
            timeout=self.config.timeout,
            retries=self.config.retries,
        )

    def aggregate(self, records: list[AssemblyRecord]) -> GenomeSizeIndex:
        """Reduce admitted records to the per-species maximum."""
        return aggregate_genome_sizes(records, on_record=self.on_record)

    def make_report(self, data: Union[bytes, str]) -> tuple[list[ReportRow], str]:
        """Build the sorted rows and rendered report from a feed."""
        records = load_assembly_records(data, self.config)
        index = self.aggregate(records)
        rows = sort_genome_sizes(index)
        text = render_report(rows, delimiter=self.config.output_delimiter)
        logger.info("Report contains %s species.", format(len(rows), ','))
        return rows, text

    def save_report(self, text: str, output_path: Optional[Path] = None) -> Path:
        """Write the rendered report to output_path (config.output_path by default)."""
        return write_report(output_path or self.config.output_path, text)

    def run(self, feed_path: Optional[Path] = None) -> list[ReportRow]:
        """
        This function orchestrates the pipeline. A local feed_path skips the
        download. Any failure aborts the run before anything is written.
        """
        data = read_feed(feed_path) if feed_path is not None else self.fetch()
        rows, text = self.make_report(data)
        self.save_report(text)
        logger.info("Pipeline completed successfully.")
        return rows
