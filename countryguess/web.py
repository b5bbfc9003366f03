"""Fetch the body of a URL as text."""

from __future__ import annotations

import urllib.request

USER_AGENT = "Browser"
DEFAULT_BUFFER_SIZE = 65536


def download_website(url: str, buffer_size: int = DEFAULT_BUFFER_SIZE) -> str:
    """Download ``url`` without caching and return its body as text.

    The body is read in chunks of ``buffer_size`` bytes and decoded with the
    charset the server names, or UTF-8. Failures raise the errors of
    :mod:`urllib`.
    """
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")
    request = urllib.request.Request(
        url,
        headers={
            "User-Agent": USER_AGENT,
            "Pragma": "no-cache",
            "Cache-Control": "no-cache",
        },
    )
    with urllib.request.urlopen(request) as response:
        charset = response.headers.get_content_charset() or "utf-8"
        body = b"".join(iter(lambda: response.read(buffer_size), b""))
    return body.decode(charset, errors="replace")