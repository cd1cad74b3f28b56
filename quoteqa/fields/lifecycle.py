"""Shared behaviour behind the field controller contract.

The functions here hold the parts every dropdown does the same way: the
fixed validation sequence, the value commit and the event logging. Concrete
controllers only supply their rules.
"""

import logging
from typing import TYPE_CHECKING, List, Tuple

from quoteqa.actions.assertions import (
    assert_current_value,
    assert_element_count,
    assert_enablement,
    assert_option_list,
    assert_visibility,
)
from quoteqa.actions.page_driver import PageDriver
from quoteqa.state import FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer

if TYPE_CHECKING:
    from quoteqa.fields.base import FieldController


def log_field_event(is_logging_on: bool, message: str) -> None:
    logging.log(logging.INFO if is_logging_on else logging.DEBUG, message)


def context_facts(state: TransactionState) -> List[Tuple[str, str]]:
    """Facts every rule of the quote summary matrix is decided on."""
    return [
        ("JURS", state.jurisdiction),
        ("RATING_PROGRAM_CODE", state.rating_program_code),
        ("USER_DISTRIBUTION_CHANNEL", state.current_user_distribution_channel),
    ]


def commit_value(field: FieldState, new_code: str) -> None:
    # previous value must be read before the current one is overwritten
    field.previous_value = field.value
    field.value = new_code
    field.update_count += 1


async def validate_field(
    controller: "FieldController", page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer
) -> None:
    """Assert the live control against the rule matrix and store the derived
    flags on ``state``.

    Stops at the first failing assertion. When the control is expected to be
    absent only the count is asserted and all flags are cleared.
    """
    field = controller.field_state(state)
    label = controller.FIELD_DESCRIPTION
    selector = controller.UI_LOCATOR
    page_name = state.current_active_page
    is_logging_on = state.is_logging_on

    expected_count = controller.expected_presence(state, tracer)
    await assert_element_count(page, selector, expected_count, label, page_name, is_logging_on)
    if expected_count == 0:
        field.is_visible = False
        field.is_enabled = False
        field.is_required_input = False
        return

    is_visible = controller.expected_visibility(state, tracer)
    await assert_visibility(page, selector, is_visible, label, page_name, is_logging_on)
    field.is_visible = is_visible

    is_enabled = controller.expected_enablement(state, tracer)
    await assert_enablement(page, selector, is_enabled, label, page_name, is_logging_on)
    field.is_enabled = is_enabled

    expected_value = controller.expected_value(state, tracer)
    actual_value = await controller.get_element_value(page, state)
    assert_current_value(actual_value, expected_value, label, page_name)

    if is_visible:
        actual_options = await page.read_options(selector)
        expected_options = controller.expected_option_list(state, tracer)
        assert_option_list(actual_options, expected_options, label, page_name)

    field.is_required_input = controller.expected_required(state, tracer)
