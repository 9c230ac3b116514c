"""
This module gets the raw assembly summary, either from the NCBI FTP site over
HTTPS or from a file on disk. Only bytes come out of here; decoding and
parsing happen in genome_sizes.parsing.
"""
import functools
import logging
from pathlib import Path
from time import sleep
from typing import Callable, Optional
import requests

from genome_sizes.errors import FetchError

logger = logging.getLogger(__name__)


def retry(exceptions, tries=3, delay=1.75, logger=None):
    """
    A decorator that allows downloads to retry a set number of times before failing.
    :param exceptions: The exception(s) to catch and retry on.
    :param tries: The number of times to try the function.
    :param delay: The delay between retries (exponentially increasing).
    :param logger: The logger to use for messages.
    :return: The result of the function call. The last exception is re-raised
        once all attempts are used up.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            attempts = max(1, kwargs.pop('tries', tries))
            for attempt in range(1, attempts + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == attempts:
                        if logger:
                            logger.error("Failed to execute %s after %s attempts.", func.__name__, attempts)
                        raise
                    sleeptime = delay ** attempt
                    if logger:
                        logger.warning("%s, Retrying in %.1f seconds...", e, sleeptime)
                    sleep(sleeptime)
        return wrapper
    return decorator


@retry((requests.ConnectionError, requests.Timeout), logger=logger)
def _get(url: str, timeout: float) -> requests.Response:
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response


def fetch_feed(url: str, timeout: float = 60.0, retries: int = 3) -> bytes:
    """
    Download the assembly summary. Connection errors and timeouts are retried,
    HTTP errors are not.
    :param url (str): Feed location.
    :param timeout (float): Seconds to wait for the server.
    :param retries (int): Number of attempts in total.
    :return bytes: The raw feed.
    """
    logger.info("Downloading assembly summary from %s...", url)
    try:
        response = _get(url, timeout, tries=retries)
    except requests.RequestException as e:
        raise FetchError(f"Could not download {url}: {e}") from e
    logger.info("Download successful (%s bytes).", format(len(response.content), ','))
    return response.content


def read_feed(path: Path) -> bytes:
    """Read an assembly summary that was downloaded earlier."""
    path = Path(path)
    logger.info("Reading assembly summary from %s...", path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FetchError(f"Could not read {path}: {e}") from e


def load_or_fetch_feed(
    *args,
    cache_path: Optional[Path] = None,
    fetch_func: Callable[..., bytes] = fetch_feed,
    allow_fetch: bool = True,
    **kwargs,
) -> bytes:
    """
    Checks if a cached copy of the feed exists and loads it. Otherwise, calls
    the fetch function, then saves the result to the cache for future use.

    :param cache_path (Path): Path to the cache file. None disables caching.
    :param fetch_func (Callable): Function to call to fetch the data if missing.
    :param allow_fetch (bool): Whether to allow fetching if no cache is found.
    :param *args, **kwargs: Arguments passed to the fetch_func.
    :return bytes: The loaded or freshly fetched feed.
    """
    if cache_path is not None and cache_path.exists():
        logger.info("Cache found at %s. Loading...", cache_path)
        return read_feed(cache_path)

    if not allow_fetch:
        logger.error("Could not find %s and fetching is disabled.", cache_path)
        raise FetchError("Cached feed not found. Set allow_fetch=True to download it.")

    data = fetch_func(*args, **kwargs)
    if cache_path is not None:
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            cache_path.write_bytes(data)
            logger.info("Feed cached to %s", cache_path)
        except OSError as e:
            # caching is best-effort
            logger.warning("Could not cache feed to %s: %s", cache_path, e)
    return data
