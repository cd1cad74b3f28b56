import asyncio
import logging

from playwright.async_api import async_playwright


class Driver:
    # Guards concurrent browser launches from the same event loop
    __lock = asyncio.Lock()

    @staticmethod
    async def create(browser_config):
        """Launch a new browser and return a Driver that owns it.

        Args:
            browser_config (dict): Browser configuration options.
        """
        logging.info(f"Driver.create called with browser_config: {browser_config}")
        async with Driver.__lock:
            driver = Driver()
            await driver.create_browser(browser_config=browser_config)
            return driver

    def __init__(self):
        self._is_closed = False
        self.page = None
        self.browser = None
        self.context = None
        self.playwright = None
        self.config = None

    def is_closed(self):
        """Check if the browser instance is closed."""
        return self._is_closed

    async def create_browser(self, browser_config):
        """Creates a new browser instance and sets up the page.

        Args:
            browser_config (dict): Browser configuration containing:
                - headless (bool): Whether to run browser in headless mode
                - viewport (dict): Browser viewport width and height
                - language (str): Locale of the browser context

        Returns:
            Page: the page the quote application is driven through
        """
        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(
                headless=browser_config["headless"],
                args=[
                    "--disable-dev-shm-usage",  # Mitigate shared memory issues in Docker
                    "--no-sandbox",
                    "--disable-setuid-sandbox",
                    "--disable-gpu",
                    "--force-device-scale-factor=1",
                    f'--window-size={browser_config["viewport"]["width"]},{browser_config["viewport"]["height"]}',
                ],
            )

            self.context = await self.browser.new_context(
                viewport={"width": browser_config["viewport"]["width"], "height": browser_config["viewport"]["height"]},
                device_scale_factor=1,
                is_mobile=False,
                locale=browser_config["language"],
            )
            self.page = await self.context.new_page()
            self.page.set_default_navigation_timeout(browser_config.get("navigation_timeout", 60000))
            self.config = browser_config

            logging.debug(f"Browser instance created successfully with config: {browser_config}")
            return self.page

        except Exception as e:
            logging.error("Failed to create browser instance.", exc_info=True)
            raise e

    def get_page(self):
        """Returns the current page instance."""
        return self.page

    async def close_browser(self):
        """Closes the browser instance and stops Playwright."""
        try:
            if not self.is_closed():
                await self.browser.close()
                await self.playwright.stop()
                self._is_closed = True
                logging.info("Browser instance closed successfully.")
        except Exception as e:
            logging.error("Failed to close browser instance.", exc_info=True)
            raise e
