from __future__ import annotations

from dataclasses import dataclass
import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .runtime_checks import MISSING_BROWSER_MESSAGE, _is_missing_browser_error, _is_timeout_error

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"
DEFAULT_NAVIGATION_TIMEOUT_MS = 30_000
WAIT_UNTIL_CHOICES = ("load", "domcontentloaded", "networkidle", "commit")

logger = logging.getLogger("pageobjectgen.fetch")


@dataclass(frozen=True, slots=True)
class FetchResult:
    ok: bool
    url: str
    html: str
    message: str
    status: int | None = None


def fetch_page_html(
    url: str,
    *,
    timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
    wait_until: str = "domcontentloaded",
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchResult:
    if wait_until not in WAIT_UNTIL_CHOICES:
        wait_until = "domcontentloaded"

    logger.info("Fetching %s (wait_until=%s, timeout=%sms)", url, wait_until, timeout_ms)
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=True)
            try:
                context = browser.new_context(
                    user_agent=user_agent,
                    extra_http_headers={"Accept-Language": DEFAULT_ACCEPT_LANGUAGE},
                )
                page = context.new_page()
                response = page.goto(url, wait_until=wait_until, timeout=timeout_ms)
                status = response.status if response is not None else None
                if response is not None and not response.ok:
                    return FetchResult(
                        ok=False,
                        url=url,
                        html="",
                        message=f"Error fetching URL: HTTP {response.status} {response.status_text}".rstrip(),
                        status=status,
                    )
                html = page.content()
                final_url = page.url or url
            finally:
                browser.close()
    except PlaywrightError as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        if _is_missing_browser_error(exc):
            return FetchResult(ok=False, url=url, html="", message=MISSING_BROWSER_MESSAGE)
        if _is_timeout_error(exc):
            return FetchResult(
                ok=False,
                url=url,
                html="",
                message=f"Timed out after {timeout_ms}ms loading {url}. Please check the URL and network connection.",
            )
        return FetchResult(ok=False, url=url, html="", message=f"Error fetching URL: {exc}")

    if not html.strip():
        return FetchResult(ok=False, url=final_url, html="", message="Fetched HTML content is empty.", status=status)

    logger.info("Fetched %d characters from %s", len(html), final_url)
    return FetchResult(
        ok=True,
        url=final_url,
        html=html,
        message=f"Successfully fetched HTML ({len(html)} characters).",
        status=status,
    )
