import logging
from typing import List, Protocol

from playwright.async_api import Page


class PageDriver(Protocol):
    """DOM capability consumed by field controllers.

    A selector resolves to zero or more elements; the read operations act on
    the first match.
    """

    async def locate_count(self, selector: str) -> int: ...

    async def is_visible(self, selector: str) -> bool: ...

    async def is_enabled(self, selector: str) -> bool: ...

    async def read_value(self, selector: str) -> str: ...

    async def read_options(self, selector: str) -> List[str]: ...

    async def select(self, selector: str, value: str) -> None: ...


class PlaywrightPageDriver:
    """PageDriver backed by a Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    async def locate_count(self, selector: str) -> int:
        return await self.page.locator(selector).count()

    async def is_visible(self, selector: str) -> bool:
        return await self.page.locator(selector).first.is_visible()

    async def is_enabled(self, selector: str) -> bool:
        return await self.page.locator(selector).first.is_enabled()

    async def read_value(self, selector: str) -> str:
        value = await self.page.locator(selector).first.input_value()
        return value if value is not None else ""

    async def read_options(self, selector: str) -> List[str]:
        texts = await self.page.locator(selector).first.locator("option").all_inner_texts()
        return [text.strip() for text in texts]

    async def select(self, selector: str, value: str) -> None:
        logging.debug(f"Selecting value '{value}' in {selector}")
        await self.page.locator(selector).first.select_option(value=value)
