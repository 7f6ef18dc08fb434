"""Editor that leaves files untouched.

Used when interactive filling is disabled (scripts, CI).
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.template import PlaceholderMarker

logger = logging.getLogger(__name__)


class NullEditor(BaseInteractiveEditor):
    """Keeps the plain template copy and reports what was skipped."""

    def open(self, path: Path) -> None:
        """Log and skip opening ``path``."""
        logger.info(f"Editor disabled, not opening {path}")

    def insert_interactive_template(
        self,
        target: Path,
        snippet: str,
        stops: Sequence[PlaceholderMarker],
    ) -> None:
        """Log the placeholders left unfilled in ``target``."""
        keys = ", ".join(stop.key for stop in stops)
        logger.info(f"Editor disabled, {len(stops)} placeholder(s) left in {target}: {keys}")
