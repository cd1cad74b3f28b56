from .assertions import FieldAssertionError
from .page_driver import PageDriver, PlaywrightPageDriver

__all__ = ["FieldAssertionError", "PageDriver", "PlaywrightPageDriver"]
