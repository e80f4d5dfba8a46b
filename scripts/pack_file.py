#!/usr/bin/env python
"""
Pack an input file and print one token per line.

Usage:
    python scripts/pack_file.py [path]
"""
import logging
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from packer_tool.config.settings import get_settings
from packer_tool.engine import PackingError
from packer_tool.packer import Packer


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    file_path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.example_input
    if not file_path.exists():
        print(f"ERROR: input file not found at {file_path}")
        sys.exit(1)

    try:
        result = Packer().pack(file_path)
    except PackingError as e:
        print(f"\n❌ PACKING FAILED: {e}")
        sys.exit(1)

    print(result)


if __name__ == "__main__":
    main()
