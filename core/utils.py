# core/utils.py
from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging once. Later calls only adjust the level, so tests
    and embedding apps that already installed handlers keep them.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
