"""Whole-file UTF-8 reads and writes.

Newlines are never translated, so a copied template stays byte-identical
to its source on every platform.
"""

import logging
from pathlib import Path

from env_creator.interfaces.errors import EnvFileWriteError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a UTF-8 file without newline translation.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        content = f.read()
    logger.debug(f"Read {len(content)} characters from {path}")
    return content


def write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8 without newline translation.

    Raises:
        EnvFileWriteError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to write {path}: {e}")
        raise EnvFileWriteError(path, e) from e
    logger.debug(f"Wrote {len(content)} characters to {path}")
