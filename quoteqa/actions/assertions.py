"""Assertions of live DOM state against expected field state.

Every helper raises ``FieldAssertionError`` on the first mismatch; nothing is
retried or collected.
"""

import logging
from typing import Any, Sequence

from quoteqa.actions.page_driver import PageDriver


class FieldAssertionError(AssertionError):
    """The live page disagrees with the rule matrix for one field."""

    def __init__(self, field_label: str, page_name: Any, check: str, expected: Any, actual: Any):
        self.field_label = field_label
        self.page_name = page_name
        self.check = check
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{check} mismatch for '{field_label}' on page '{page_name}': expected {expected!r}, actual {actual!r}"
        )


def _log_check(is_logging_on: bool, message: str) -> None:
    logging.log(logging.INFO if is_logging_on else logging.DEBUG, message)


async def assert_element_count(
    driver: PageDriver, selector: str, expected: int, field_label: str, page_name: Any, is_logging_on: bool = False
) -> None:
    actual = await driver.locate_count(selector)
    _log_check(is_logging_on, f"[{field_label}] element count expected={expected} actual={actual}")
    if actual != expected:
        raise FieldAssertionError(field_label, page_name, "Element count", expected, actual)


async def assert_visibility(
    driver: PageDriver, selector: str, expected: bool, field_label: str, page_name: Any, is_logging_on: bool = False
) -> None:
    actual = await driver.is_visible(selector)
    _log_check(is_logging_on, f"[{field_label}] visibility expected={expected} actual={actual}")
    if actual != expected:
        raise FieldAssertionError(field_label, page_name, "Visibility", expected, actual)


async def assert_enablement(
    driver: PageDriver, selector: str, expected: bool, field_label: str, page_name: Any, is_logging_on: bool = False
) -> None:
    actual = await driver.is_enabled(selector)
    _log_check(is_logging_on, f"[{field_label}] enablement expected={expected} actual={actual}")
    if actual != expected:
        raise FieldAssertionError(field_label, page_name, "Enablement", expected, actual)


def assert_current_value(actual: str, expected: str, field_label: str, page_name: Any) -> None:
    if actual != expected:
        raise FieldAssertionError(field_label, page_name, "Value", expected, actual)


def assert_option_list(actual: Sequence[str], expected: Sequence[str], field_label: str, page_name: Any) -> None:
    """Compare option lists ignoring order; the message keeps both orders."""
    if sorted(actual) != sorted(expected):
        raise FieldAssertionError(field_label, page_name, "Dropdown option list", list(expected), list(actual))
