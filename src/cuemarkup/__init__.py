"""cuemarkup - styled subtitle text to HTML and CSS.

Converts cue text carrying positional style annotations (bold, colour,
size, ruby, text emphasis, ...) into an HTML fragment plus CSS rule sets
for display in an embedded web view.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from cuemarkup.export import HtmlAndCss, convert
from cuemarkup.models import AnnotatedText, Annotation

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = ["AnnotatedText", "Annotation", "HtmlAndCss", "__version__", "convert"]


def _setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure console logging and, if *log_dir* is given, a rotating file."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"cuemarkup.{os.getpid()}.log"

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())
