from __future__ import annotations

from urllib.parse import urlparse

_MISSING_BROWSER_ERROR_HINTS = (
    "executable doesn't exist",
    "executable does not exist",
    "download new browsers",
    "playwright install",
    "could not find browser",
    "failed to launch chromium because executable",
)

_TIMEOUT_ERROR_HINTS = (
    "timeout",
    "timed out",
)

MISSING_BROWSER_MESSAGE = "Chromium not installed. Run: python -m playwright install chromium"


def _is_missing_browser_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _MISSING_BROWSER_ERROR_HINTS)


def _is_timeout_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _TIMEOUT_ERROR_HINTS)


def is_http_url(value: str | None) -> bool:
    if not value:
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def normalize_url(value: str) -> str:
    text = value.strip()
    parsed = urlparse(text)
    if not parsed.path:
        return parsed._replace(path="/").geturl()
    return text
