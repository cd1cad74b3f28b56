import pytest

from quoteqa.actions import FieldAssertionError
from quoteqa.fields import (
    NewBusinessCreditDropDown,
    SourceOfBusinessDropDown,
    TransactionTypeDropDown,
    UnknownControlError,
)
from quoteqa.pages import PolicyInfoPageValidator, QuoteSummaryPageValidator
from quoteqa.state import PageName, TransactionState


@pytest.fixture
def fresh_state():
    return TransactionState(
        jurisdiction="NY",
        rating_program_code="OMG1",
        current_user_distribution_channel="AGENT",
        is_omega1=True,
        enable_dom_validation_quote_summary_page=True,
        enable_dom_validation_policy_info_page=True,
    )


def test_registry_resolves_pages_and_fields(registry):
    assert isinstance(registry.page_validator(PageName.QUOTE_SUMMARY), QuoteSummaryPageValidator)
    assert isinstance(registry.page_validator(PageName.POLICY_INFO), PolicyInfoPageValidator)
    assert registry.find_page_validator(None) is None
    assert isinstance(registry.controller_for_field("new_business_credit"), NewBusinessCreditDropDown)
    with pytest.raises(UnknownControlError):
        registry.controller_for_field("premium")


def test_controls_in_trace_order(registry):
    validator = registry.page_validator(PageName.QUOTE_SUMMARY)

    assert [c.FIELD_NAME for c in validator.controllers()] == [
        "transaction_type",
        "source_of_business",
        "rewrite_reason",
        "new_business_credit",
    ]


@pytest.mark.asyncio
async def test_quote_summary_load_validates_every_control(
    registry, fresh_state, quote_summary_page, deferred_tracer, trace_records
):
    await registry.page_validator(PageName.QUOTE_SUMMARY).on_load(quote_summary_page, fresh_state, deferred_tracer)

    assert fresh_state.current_active_page == PageName.QUOTE_SUMMARY
    assert fresh_state.visit_count_quote_summary == 1
    assert fresh_state.source_of_business.is_required_input
    assert not fresh_state.rewrite_reason.is_visible
    assert fresh_state.new_business_credit.is_visible
    assert not fresh_state.new_business_credit.is_enabled

    deferred_tracer.flush()
    fired = {record["ruleNumber"] for record in trace_records()}
    assert {8, 6, 5, 7, 18, 15, 28, 26, 25, 27, 29, 30, 48, 46, 47, 49} == fired


@pytest.mark.asyncio
async def test_second_visit_expects_read_only_transaction_type(
    registry, fresh_state, quote_summary_page, deferred_tracer
):
    validator = registry.page_validator(PageName.QUOTE_SUMMARY)
    await validator.on_load(quote_summary_page, fresh_state, deferred_tracer)

    with pytest.raises(FieldAssertionError) as exc_info:
        await validator.on_load(quote_summary_page, fresh_state, deferred_tracer)

    assert fresh_state.visit_count_quote_summary == 2
    assert exc_info.value.check == "Enablement"
    assert exc_info.value.field_label == "Transaction Type"


@pytest.mark.asyncio
async def test_load_without_dom_validation_only_counts_visit(registry, fresh_state, page, deferred_tracer):
    fresh_state.enable_dom_validation_quote_summary_page = False

    await registry.page_validator(PageName.QUOTE_SUMMARY).on_load(page, fresh_state, deferred_tracer)

    assert fresh_state.visit_count_quote_summary == 1
    assert page.calls == []


@pytest.mark.asyncio
async def test_policy_info_expects_no_tracked_controls(registry, fresh_state, page, deferred_tracer):
    fresh_state.transaction_type.is_visible = True

    await registry.page_validator(PageName.POLICY_INFO).on_load(page, fresh_state, deferred_tracer)

    assert fresh_state.current_active_page == PageName.POLICY_INFO
    assert fresh_state.visit_count_policy_info == 1
    assert fresh_state.visit_count_quote_summary == 0
    assert not fresh_state.transaction_type.is_visible
    assert {call for call, _ in page.calls} == {"locate_count"}
    assert deferred_tracer.pending == 0


@pytest.mark.asyncio
async def test_validation_stops_at_first_failing_control(registry, fresh_state, page, deferred_tracer):
    page.add(TransactionTypeDropDown.UI_LOCATOR)

    with pytest.raises(FieldAssertionError) as exc_info:
        await registry.page_validator(PageName.POLICY_INFO).on_load(page, fresh_state, deferred_tracer)

    assert exc_info.value.check == "Element count"
    assert "PolicyInfo" in str(exc_info.value)
    assert SourceOfBusinessDropDown.UI_LOCATOR not in page.selectors_touched()
