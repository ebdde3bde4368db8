from __future__ import annotations

import argparse
import sys
import urllib.request
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BASE_DIR))

from www import config  # noqa: E402

HTMX_VERSION = "2.0.4"
HTMX_URL = f"https://unpkg.com/htmx.org@{HTMX_VERSION}/dist/htmx.min.js"
MAX_BYTES = 1_000_000
TIMEOUT = 10


def fetch(url: str) -> bytes:
    req = urllib.request.Request(url, headers={"User-Agent": "www-asset-fetch/1.0"})
    with urllib.request.urlopen(req, timeout=TIMEOUT) as resp:
        data = resp.read(MAX_BYTES + 1)
    if len(data) > MAX_BYTES:
        raise ValueError(f"{url} is larger than {MAX_BYTES} bytes")
    if b"htmx" not in data:
        raise ValueError(f"{url} does not look like htmx")
    return data


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vendor htmx into the static directory.")
    parser.add_argument("--url", type=str, default=HTMX_URL, help="Source URL (default: %(default)s)")
    parser.add_argument("--output", type=Path, default=config.STATIC_DIR / "htmx.min.js", help="Destination file")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    data = fetch(args.url)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(data)
    print(f"Wrote {len(data)} bytes to {args.output}")


if __name__ == "__main__":
    main()
