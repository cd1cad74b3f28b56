from quoteqa.fields import (
    NewBusinessCreditDropDown,
    RewriteReasonDropDown,
    SourceOfBusinessDropDown,
    TransactionTypeDropDown,
)
from quoteqa.pages.base import PageValidator
from quoteqa.state import PageName, TransactionState


class QuoteSummaryPageValidator(PageValidator):
    PAGE_NAME = PageName.QUOTE_SUMMARY
    CONTROLS = (
        TransactionTypeDropDown,
        SourceOfBusinessDropDown,
        RewriteReasonDropDown,
        NewBusinessCreditDropDown,
    )

    def dom_validation_enabled(self, state: TransactionState) -> bool:
        return state.enable_dom_validation_quote_summary_page

    def record_visit(self, state: TransactionState) -> int:
        state.visit_count_quote_summary += 1
        return state.visit_count_quote_summary
