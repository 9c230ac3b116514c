"""
Default paths for the feed cache.
"""
from pathlib import Path
from platformdirs import user_cache_dir

APP_NAME = 'genome-sizes'

def default_cache_dir() -> Path:
    """Get the default directory for cached assembly summaries."""
    return Path(user_cache_dir(APP_NAME)).expanduser().resolve()
