from quoteqa.fields import (
    NewBusinessCreditDropDown,
    RewriteReasonDropDown,
    SourceOfBusinessDropDown,
    TransactionTypeDropDown,
)
from quoteqa.pages.base import PageValidator
from quoteqa.state import PageName, TransactionState


class PolicyInfoPageValidator(PageValidator):
    """Policy Info page; none of the quote summary controls may render here."""

    PAGE_NAME = PageName.POLICY_INFO
    CONTROLS = (
        TransactionTypeDropDown,
        SourceOfBusinessDropDown,
        RewriteReasonDropDown,
        NewBusinessCreditDropDown,
    )

    def dom_validation_enabled(self, state: TransactionState) -> bool:
        return state.enable_dom_validation_policy_info_page

    def record_visit(self, state: TransactionState) -> int:
        state.visit_count_policy_info += 1
        return state.visit_count_policy_info
