"""
File-level entry point: hand it a path, get the packed result back.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from .engine import PackingEngine

logger = logging.getLogger(__name__)


class Packer:
    """Packs an input file line by line."""

    def __init__(self, engine: Optional[PackingEngine] = None):
        self.engine = engine or PackingEngine()

    def pack(self, file_path: Union[str, Path]) -> str:
        """
        Pack every line of a file.

        Args:
            file_path: relative or absolute path to the input file

        Returns:
            One token per non-empty line, joined with newlines

        Raises:
            PackingError: if any line cannot be packed
        """
        logger.info(f"Start to read and analyze: {file_path}")
        return self.engine.pack_file(file_path)
