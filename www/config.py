from __future__ import annotations

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent

CONTENT_DIR = Path(os.getenv("WWW_CONTENT_DIR", str(BASE_DIR / "content"))).expanduser()
CATALOG_FILE = CONTENT_DIR / "catalog.yaml"
POSTS_DIR = CONTENT_DIR / "posts"

TEMPLATES_DIR = Path(os.getenv("WWW_TEMPLATES_DIR", str(BASE_DIR / "templates"))).expanduser()
STATIC_DIR = Path(os.getenv("WWW_STATIC_DIR", str(BASE_DIR / "static"))).expanduser()

HOST = os.getenv("WWW_HOST", "0.0.0.0")
PORT = int(os.getenv("WWW_PORT", "3000"))
LOG_LEVEL = os.getenv("WWW_LOG_LEVEL", "info").lower()

# Paired with the htmx front end: a request carrying FRAGMENT_REQUEST_HEADER
# already has a live DOM and gets a fragment plus a history update.
FRAGMENT_REQUEST_HEADER = "HX-Request"
PUSH_URL_HEADER = "HX-Push-Url"
