"""
Packing Engine - line processing and batch driving with traceability.

Each line goes through the same pipeline:
1. Extract the package (grammar check, then number parsing)
2. Validate it against the configured constraints
3. Select items with the greedy heuristic
4. Format the token: selected indices joined by commas, or "-"

A batch is processed in input order and stops at the first bad line.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from ..config.settings import Constraints, Settings, get_settings
from .constraints import validate_packaging_constraints
from .errors import InvalidPackageLine
from .extractor import try_extract_package
from .models import Item, LineResult, total_weight
from .selector import pack_items

logger = logging.getLogger(__name__)

EMPTY_TOKEN = '-'


def format_token(items: list[Item]) -> str:
    """Join item indices with commas, or return "-" when nothing was picked."""
    return ','.join(str(item.index) for item in items) or EMPTY_TOKEN


def split_lines(text: str) -> list[str]:
    """Normalize line endings, trim, and drop empty lines."""
    normalized = text.replace('\r\n', '\n').replace('\r', '\n').strip()
    return [line for line in normalized.split('\n') if line]


class PackingEngine:
    """
    Core packing engine that turns package lines into output tokens.

    Constraints come from the settings unless given explicitly, so tests
    can run the same engine against different limits.
    """

    def __init__(self, settings: Optional[Settings] = None, constraints: Optional[Constraints] = None):
        """Initialize engine with settings and the constraints to enforce."""
        self.settings = settings or get_settings()
        self.constraints = constraints or self.settings.constraints
        self.workers = max(1, self.settings.workers)

    def process(self, raw_line: str) -> LineResult:
        """
        Process one line with full traceability.

        Raises:
            InvalidPackageLine: if the line is malformed or breaks a constraint
        """
        logger.debug(f"Line to process: {raw_line}")

        extraction = try_extract_package(raw_line)
        if not extraction.ok:
            logger.warning(f"Rejected malformed line: {raw_line!r}")
            raise extraction.error
        package = extraction.package

        validation = validate_packaging_constraints(package, self.constraints)
        if not validation.is_valid:
            failed = ", ".join(validation.failed_constraints())
            logger.warning(f"Line breaks constraints ({failed}): {raw_line!r}")
            raise InvalidPackageLine(raw_line, validation=validation)

        result = LineResult(raw_line=raw_line, package=package, validation=validation)
        result.add_trace("Extract", f"Parsed {package.item_count} items", f"limit {package.maximum_weight:g}")
        result.add_trace("Validate", "All constraints met")

        result.selected = pack_items(package)
        if result.selected:
            result.add_trace(
                "Select",
                f"Picked {len(result.selected)} of {package.item_count} items",
                f"weight {total_weight(result.selected):g}"
            )
        else:
            result.add_trace("Select", "No item fits the weight limit")

        result.token = format_token(result.selected)
        result.add_trace("Token", "Output token", result.token)
        return result

    def process_line(self, raw_line: str) -> str:
        """Process one line and return only its output token."""
        return self.process(raw_line).token

    def process_text(self, text: str) -> list[LineResult]:
        """Process every non-empty line of a text, in input order."""
        lines = split_lines(text)
        logger.info(f"Packing {len(lines)} lines")

        if self.workers > 1 and len(lines) > 1:
            # Executor.map yields in submission order and re-raises the
            # first failing line's error when its result is reached
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(self.process, lines))
        else:
            results = [self.process(line) for line in lines]

        logger.info(f"Finished packing {len(results)} lines")
        return results

    def pack_text(self, text: str) -> str:
        """Pack a whole input text and join the tokens with newlines."""
        return '\n'.join(result.token for result in self.process_text(text))

    def pack_file(self, file_path: Union[str, Path]) -> str:
        """Read a UTF-8 input file and pack it."""
        path = Path(file_path)
        logger.info(f"Reading package file {path}")
        text = path.read_text(encoding='utf-8')
        return self.pack_text(text)


def process_line(raw_line: str, constraints: Optional[Constraints] = None) -> str:
    """Process a single line with a throwaway engine."""
    return PackingEngine(constraints=constraints).process_line(raw_line)
