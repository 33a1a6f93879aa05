"""Root logging configuration shared by the entry scripts."""
import logging
from typing import Union


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Configure root logging once with a consistent format.

    Parameters
    ----------
    level: str | int
        Log level name (e.g. ``"DEBUG"``) or number. Unknown names fall back
        to ``INFO``.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
