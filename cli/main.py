#!/usr/bin/env python
"""
Genome sizes: the largest complete RefSeq genome per species.

This script provides a rudimentary command-line interface (CLI) for running
the genome size pipeline.
"""
import logging
from pathlib import Path
import click

from genome_sizes.aggregate import aggregate_genome_sizes
from genome_sizes.config import load_config, PipelineConfig
from genome_sizes.errors import GenomeSizeError
from genome_sizes.paths import default_cache_dir
from genome_sizes.pipeline import GenomeSizePipeline
from genome_sizes.report import render_table


class ProgressPipeline(GenomeSizePipeline):
    """Shows a progress bar while records are folded into the index."""
    def aggregate(self, records):
        with click.progressbar(
            length=len(records),
            label="Processing records",
            item_show_func=lambda r: r.organism_name if r is not None else None,
        ) as bar:
            def advance(record):
                bar.update(1, record)
                if self.on_record is not None:
                    self.on_record(record)
            return aggregate_genome_sizes(records, on_record=advance)


def get_config(config_path, **overrides):
    """Uses a common configuration file; command line options win."""
    config_dict = load_config(config_path)
    config_dict.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return PipelineConfig(**config_dict)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration in {config_path}:\n{e}") from e


def run_pipeline(config_obj, feed_path=None, show=False, progress=False):
    """Run the pipeline, turning fatal errors into a clean CLI failure."""
    pipeline_cls = ProgressPipeline if progress else GenomeSizePipeline
    pipeline_obj = pipeline_cls(config_obj)
    try:
        rows = pipeline_obj.run(feed_path=feed_path)
    except GenomeSizeError as e:
        logging.error("Run aborted: %s", e)
        raise click.ClickException(str(e)) from e
    click.echo(f"Sorted genome sizes have been saved to {config_obj.output_path}")
    if show:
        click.echo("\nSpecies by Genome Size (Base Pairs):")
        click.echo(render_table(rows))
    return rows


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose):
    """
    Genome sizes: report the largest complete RefSeq genome of each species.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--config-path", default="config.yaml", help="Path to configuration file.")
@click.option("--output", "output_path", type=click.Path(path_type=Path), default=None,
              help="Where to write the CSV report.")
@click.option("--cache-dir", type=click.Path(path_type=Path), default=None,
              help="Keep the downloaded assembly summary here.")
@click.option("--use-cache", is_flag=True, default=False,
              help="Cache the download in the default cache directory.")
@click.option("--show", is_flag=True, default=False, help="Print the sorted table.")
@click.option("--progress", is_flag=True, default=False, help="Show a progress bar.")
def pipeline(config_path, output_path, cache_dir, use_cache, show, progress):
    """
    Recommended: Download the assembly summary and write the report.
    """
    if cache_dir is None and use_cache:
        cache_dir = load_config(config_path).get("cache_dir") or default_cache_dir()
    config_obj = get_config(config_path, output_path=output_path, cache_dir=cache_dir)
    run_pipeline(config_obj, show=show, progress=progress)


@cli.command()
@click.argument("feed_file", type=click.Path(path_type=Path))
@click.option("--config-path", default="config.yaml", help="Path to configuration file.")
@click.option("--output", "output_path", type=click.Path(path_type=Path), default=None,
              help="Where to write the CSV report.")
@click.option("--show", is_flag=True, default=False, help="Print the sorted table.")
@click.option("--progress", is_flag=True, default=False, help="Show a progress bar.")
def report(feed_file, config_path, output_path, show, progress):
    """
    Write the report from an assembly summary already on disk.
    """
    config_obj = get_config(config_path, output_path=output_path)
    run_pipeline(config_obj, feed_path=feed_file, show=show, progress=progress)


@cli.command()
@click.option("--config-path", default="config.yaml", help="Path to configuration file.")
def config(config_path):
    """
    Show the current configuration.
    """
    config_obj = get_config(config_path)
    click.echo(config_obj.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
