from __future__ import annotations

from typing import Dict, Mapping

from www import config


def wants_fragment(headers: Mapping[str, str]) -> bool:
    """True when the client can patch its DOM in place with a fragment."""
    return config.FRAGMENT_REQUEST_HEADER in headers


def fragment_headers(canonical_url: str) -> Dict[str, str]:
    """Headers that make the client update its address bar without navigating."""
    return {
        config.PUSH_URL_HEADER: canonical_url,
        "Vary": config.FRAGMENT_REQUEST_HEADER,
    }


def document_headers() -> Dict[str, str]:
    return {"Vary": config.FRAGMENT_REQUEST_HEADER}
