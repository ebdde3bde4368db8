from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BASE_DIR))

from www import config  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the site locally.")
    parser.add_argument("--host", type=str, default=config.HOST, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "www.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
