import pytest

from quoteqa.browser import DEFAULT_CONFIG, BrowserSession, Driver
from quoteqa.browser import driver as driver_module


class FakePage:
    def __init__(self):
        self.navigation_timeout = None

    def set_default_navigation_timeout(self, timeout):
        self.navigation_timeout = timeout


class FakeContext:
    def __init__(self, options):
        self.options = options
        self.page = FakePage()

    async def new_page(self):
        return self.page


class FakeBrowser:
    def __init__(self, launch_options):
        self.launch_options = launch_options
        self.context = None
        self.closed = False

    async def new_context(self, **options):
        self.context = FakeContext(options)
        return self.context

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self):
        self.browser = None

    async def launch(self, **options):
        self.browser = FakeBrowser(options)
        return self.browser


class FakePlaywright:
    def __init__(self):
        self.chromium = FakeChromium()
        self.stopped = False

    async def stop(self):
        self.stopped = True


class FakePlaywrightStarter:
    def __init__(self, playwright):
        self.playwright = playwright

    async def start(self):
        return self.playwright


@pytest.fixture
def playwright(monkeypatch):
    fake = FakePlaywright()
    monkeypatch.setattr(driver_module, "async_playwright", lambda: FakePlaywrightStarter(fake))
    return fake


@pytest.mark.asyncio
async def test_every_default_setting_reaches_the_browser(playwright):
    driver = await Driver.create(dict(DEFAULT_CONFIG))

    browser = playwright.chromium.browser
    assert browser.launch_options["headless"] is DEFAULT_CONFIG["headless"]
    assert "--window-size=1280,720" in browser.launch_options["args"]
    assert browser.context.options["viewport"] == DEFAULT_CONFIG["viewport"]
    assert browser.context.options["locale"] == DEFAULT_CONFIG["language"]
    assert driver.get_page().navigation_timeout == DEFAULT_CONFIG["navigation_timeout"]

    await driver.close_browser()
    assert browser.closed and playwright.stopped and driver.is_closed()


@pytest.mark.asyncio
async def test_session_merges_user_settings_over_defaults(playwright):
    async with BrowserSession(browser_config={"headless": False, "language": "fr-FR"}) as session:
        assert session.get_page() is playwright.chromium.browser.context.page

    options = playwright.chromium.browser.context.options
    assert playwright.chromium.browser.launch_options["headless"] is False
    assert options["locale"] == "fr-FR"
    assert options["viewport"] == DEFAULT_CONFIG["viewport"]
    assert session.is_closed()
