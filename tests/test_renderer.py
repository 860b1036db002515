"""
Renderer tests with Playwright patched out (no browser is launched).
"""

import pytest
from playwright.sync_api import Error as PlaywrightError

from explorer_parser import renderer as renderer_module
from explorer_parser.exceptions import TransientError
from explorer_parser.renderer import PageRenderer


class FakePage:
    def __init__(self, fail_on_goto=False):
        self.fail_on_goto = fail_on_goto
        self.visited = []
        self.waited = []

    def goto(self, url, **kwargs):
        if self.fail_on_goto:
            raise PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        self.visited.append(url)

    def wait_for_timeout(self, ms):
        self.waited.append(ms)

    def content(self):
        return "<html><body>rendered</body></html>"


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.closed = False

    def new_page(self):
        return self.page

    def close(self):
        self.closed = True


class FakePlaywright:
    def __init__(self, browser):
        self.chromium = self
        self.browser = browser

    def launch(self, **kwargs):
        return self.browser

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def install(monkeypatch, page):
    browser = FakeBrowser(page)
    monkeypatch.setattr(renderer_module, "sync_playwright", lambda: FakePlaywright(browser))
    return browser


def test_render_waits_then_returns_dom(monkeypatch):
    page = FakePage()
    browser = install(monkeypatch, page)

    html = PageRenderer().render("https://explorer.solana.com/tx/Sig", wait=2)

    assert html == "<html><body>rendered</body></html>"
    assert page.visited == ["https://explorer.solana.com/tx/Sig"]
    assert page.waited == [2000]
    assert browser.closed


def test_navigation_failure_is_transient(monkeypatch):
    browser = install(monkeypatch, FakePage(fail_on_goto=True))

    with pytest.raises(TransientError) as exc:
        PageRenderer().render("https://explorer.solana.com/tx/Sig", wait=0)

    assert exc.value.retryable
    assert exc.value.url == "https://explorer.solana.com/tx/Sig"
    assert "ERR_NAME_NOT_RESOLVED" in exc.value.reason
    assert browser.closed
