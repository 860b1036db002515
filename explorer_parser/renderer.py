"""
Page acquisition through a headless browser.

The explorer builds its cards client-side, so the HTML has to be read from a
real browser after rendering settles.  There is no reliable "done" signal on
the page; the renderer waits a fixed duration after navigation and then
serializes the DOM.
"""

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .exceptions import TransientError
from .logger import get_module_logger

logger = get_module_logger("renderer")

NAVIGATION_TIMEOUT_MS = 60_000


class PageRenderer:
    """Renders explorer pages with headless Chromium."""

    def __init__(self, headless: bool = True):
        self.headless = headless

    def render(self, url: str, wait: float) -> str:
        """
        Navigate to `url`, wait `wait` seconds, return the rendered DOM.

        Raises:
            TransientError: navigation, timeout or browser failure
        """
        logger.info(f"url: {url}")
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=self.headless,
                                            args=["--disable-gpu"])
                try:
                    page = browser.new_page()
                    page.goto(url, wait_until="domcontentloaded",
                              timeout=NAVIGATION_TIMEOUT_MS)
                    page.wait_for_timeout(wait * 1000)
                    html = page.content()
                finally:
                    browser.close()
        except PlaywrightError as e:
            logger.warning(f"Rendering failed for {url}: {e}")
            raise TransientError(url, str(e)) from e

        logger.debug(f"Rendered {len(html):,} characters from {url}")
        return html
