"""
Tests for the command-line interface.
"""
from click.testing import CliRunner

from cli.main import cli


def test_report_command(tmp_path, sample_feed):
    """The report command writes the CSV and can print the table."""
    feed_path = tmp_path / "assembly_summary_refseq.txt"
    feed_path.write_text(sample_feed, encoding="utf-8")
    output = tmp_path / "sizes.csv"
    result = CliRunner().invoke(cli, [
        "report", str(feed_path),
        "--config-path", str(tmp_path / "none.yaml"),
        "--output", str(output),
        "--show", "--progress",
    ])
    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8").splitlines() == [
        "Species,Genome Size (bp)",
        "Mycoplasma genitalium,580076",
        "Bacillus subtilis,4215606",
        "Escherichia coli,5498578",
    ]
    assert "Species by Genome Size (Base Pairs):" in result.output
    assert "Mycoplasma genitalium" in result.output


def test_report_command_missing_feed(tmp_path):
    """A missing feed ends the run with an error message and no report."""
    output = tmp_path / "sizes.csv"
    result = CliRunner().invoke(cli, [
        "report", str(tmp_path / "missing.txt"),
        "--config-path", str(tmp_path / "none.yaml"),
        "--output", str(output),
    ])
    assert result.exit_code != 0
    assert "Could not read" in result.output
    assert not output.exists()


def test_pipeline_command(tmp_path, monkeypatch, sample_feed):
    """The pipeline command downloads the feed."""
    monkeypatch.setattr("genome_sizes.pipeline.fetch_feed",
                        lambda url, timeout, retries: sample_feed.encode())
    output = tmp_path / "sizes.csv"
    result = CliRunner().invoke(cli, [
        "pipeline",
        "--config-path", str(tmp_path / "none.yaml"),
        "--output", str(output),
        "--cache-dir", str(tmp_path / "cache"),
    ])
    assert result.exit_code == 0, result.output
    assert output.exists()
    assert (tmp_path / "cache" / "assembly_summary_refseq.txt").exists()


def test_config_command(tmp_path):
    """The effective configuration is shown as JSON."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("retries: 5\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["config", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output
    assert '"retries": 5' in result.output
    assert '"annotation_provider": "NCBI RefSeq"' in result.output


def test_invalid_config(tmp_path):
    """Validation problems are reported, not raised."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("delimiter: '::'\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["config", "--config-path", str(config_path)])
    assert result.exit_code != 0
    assert "Invalid configuration" in result.output
