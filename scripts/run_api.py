#!/usr/bin/env python
"""
Run the Packer API with uvicorn.

Usage:
    python scripts/run_api.py [port]
"""
import sys
from pathlib import Path

import uvicorn

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from packer_tool.config.settings import get_settings


def main():
    settings = get_settings()
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000

    print(f"Starting Packer API (FastAPI) on port {port}...")
    try:
        uvicorn.run(
            "packer_tool.api.main:app",
            host="0.0.0.0",
            port=port,
            log_level=settings.log_level.lower(),
            app_dir=str(src_path),
        )
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
