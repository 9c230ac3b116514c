"""
This module handles writing the finished report.
"""
import logging
from pathlib import Path

from genome_sizes.errors import WriteError

logger = logging.getLogger(__name__)


def write_report(path: Path, text: str) -> Path:
    """
    Write the rendered report, creating parent directories as needed.
    :param path (Path): Destination file.
    :param text (str): The rendered report.
    :return Path: Where the report was written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8', newline='\n')
    except OSError as e:
        raise WriteError(f"Could not write report to {path}: {e}") from e
    logger.info("Sorted genome sizes have been saved to %s", path)
    return path
