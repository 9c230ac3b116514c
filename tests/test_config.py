"""
Tests for loading and validating configuration.
"""
from pathlib import Path

import pytest
from pydantic import ValidationError

from genome_sizes.config import ASSEMBLY_SUMMARY_URL, PipelineConfig, load_config


def test_defaults():
    """Defaults describe the RefSeq assembly summary."""
    config = PipelineConfig()
    assert config.feed_url == ASSEMBLY_SUMMARY_URL
    assert config.output_path == Path("sorted_genome_sizes.csv")
    assert config.cache_dir is None
    assert (config.columns.organism_name, config.columns.genome_size) == (7, 25)
    assert (config.columns.version_status, config.columns.assembly_level,
            config.columns.annotation_provider) == (10, 11, 31)
    assert (config.filters.version_status, config.filters.assembly_level,
            config.filters.annotation_provider) == ("latest", "Complete Genome", "NCBI RefSeq")


def test_load_yaml(tmp_path):
    """Nested sections come through as plain dicts."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "output_path: ~/reports/sizes.csv\n"
        "columns:\n"
        "  genome_size: 26\n"
        "filters:\n"
        "  assembly_level: Chromosome\n",
        encoding="utf-8",
    )
    config = PipelineConfig(**load_config(path))
    assert config.output_path == Path("~/reports/sizes.csv").expanduser()
    assert config.columns.genome_size == 26
    assert config.columns.organism_name == 7
    assert config.filters.assembly_level == "Chromosome"


def test_missing_file_means_defaults(tmp_path):
    """No config file is not an error."""
    assert load_config(tmp_path / "missing.yaml") == {}


def test_empty_file_means_defaults(tmp_path):
    """An empty YAML file is treated like a missing one."""
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


@pytest.mark.parametrize("field", ["delimiter", "comment_marker", "output_delimiter"])
def test_single_character_fields(field):
    """Delimiters and the comment marker are one character."""
    with pytest.raises(ValidationError):
        PipelineConfig(**{field: "::"})


def test_negative_column_rejected():
    """Column positions are 0-based."""
    with pytest.raises(ValidationError):
        PipelineConfig(columns={"genome_size": -1})


def test_default_cache_dir():
    """The default feed cache lives in the per-user cache directory."""
    from genome_sizes.paths import default_cache_dir
    assert default_cache_dir().is_absolute()
    assert "genome-sizes" in str(default_cache_dir())
