import asyncio
import logging
import uuid
from typing import Any, Dict, Optional

from playwright.async_api import Page

from quoteqa.browser.config import DEFAULT_CONFIG
from quoteqa.browser.driver import Driver


class BrowserSession:
    """One browser per scenario, so page state never leaks between
    scenarios."""

    def __init__(self, session_id: str = None, browser_config: Dict[str, Any] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.browser_config = {**DEFAULT_CONFIG, **(browser_config or {})}
        self.driver: Optional[Driver] = None
        self._is_closed = False
        self._lock = asyncio.Lock()

    async def initialize(self):
        """Initialize browser session."""
        async with self._lock:
            if self._is_closed:
                raise RuntimeError("Browser session is closed")

            logging.debug(f"Initializing browser session {self.session_id} with config: {self.browser_config}")
            try:
                self.driver = await Driver.create(browser_config=self.browser_config)
                logging.debug(f"Browser session {self.session_id} initialized successfully")
            except Exception as e:
                logging.error(f"Failed to initialize browser session {self.session_id}: {e}")
                await self._cleanup()
                raise

    async def navigate_to(self, url: str, **kwargs):
        """Open the quote application and wait until it settles."""
        if self._is_closed or not self.driver:
            raise RuntimeError("Browser session not initialized or closed")

        logging.info(f"Session {self.session_id} navigating to: {url}")
        kwargs.setdefault("timeout", self.browser_config.get("navigation_timeout", 60000))
        kwargs.setdefault("wait_until", "domcontentloaded")

        page = self.driver.get_page()
        await page.goto(url, **kwargs)
        await page.wait_for_load_state("networkidle", timeout=kwargs["timeout"])

    def get_page(self) -> Page:
        """Return current page via Driver."""
        if self._is_closed or not self.driver:
            raise RuntimeError("Browser session not initialized or closed")
        return self.driver.get_page()

    def is_closed(self) -> bool:
        return self._is_closed

    async def _cleanup(self):
        try:
            if self.driver and not self.driver.is_closed():
                await self.driver.close_browser()
        except Exception as e:
            logging.error(f"Error during cleanup: {e}")
        finally:
            self.driver = None

    async def close(self):
        """Close browser session."""
        async with self._lock:
            if self._is_closed:
                return

            logging.info(f"Closing browser session {self.session_id}")
            self._is_closed = True
            await self._cleanup()
            logging.info(f"Browser session {self.session_id} closed")

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
