from typing import List

from quoteqa.actions.page_driver import PageDriver
from quoteqa.fields.base import FieldController
from quoteqa.fields.catalogue import DropdownCatalogue, DropdownOption
from quoteqa.fields.lifecycle import context_facts, log_field_event
from quoteqa.state import BLANK_CODE, FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer


class TransactionTypeDropDown(FieldController):
    """Transaction Type dropdown of the Quote Summary page.

    Changing the transaction type resets New Business Credit and, when moving
    away from Rewrite, clears the Rewrite Reason.
    """

    BLANK = DropdownOption(code=BLANK_CODE, description="")
    NEW_BUSINESS = DropdownOption(code="01", description="New Business")
    TRANSFER = DropdownOption(code="02", description="Transfer")
    REWRITE = DropdownOption(code="03", description="Rewrite")

    CATALOGUE = DropdownCatalogue(NEW_BUSINESS, TRANSFER, REWRITE, BLANK)
    DEFAULTED_VALUE = NEW_BUSINESS.code
    FIELD_NAME = "transaction_type"
    FIELD_DESCRIPTION = "Transaction Type"
    UI_LOCATOR = 'select[name="transactionType"]'

    RULE_ENABLEMENT = 5
    RULE_VISIBILITY = 6
    RULE_DEFAULT_VALUE = 7
    RULE_PRESENCE = 8
    RULE_REQUIRED = 15
    RULE_OPTION_LIST = 18

    def field_state(self, state: TransactionState) -> FieldState:
        return state.transaction_type

    def expected_presence(self, state: TransactionState, tracer: BusinessRuleTracer) -> int:
        """One Transaction Type dropdown on Quote Summary for an Omega
        program, none anywhere else."""
        rule = state.is_quote_summary_page and state.valid_rating_program
        if rule:
            tracer.log_rule(self.RULE_PRESENCE, context_facts(state))
        return 1 if rule else 0

    def expected_visibility(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        rule = state.is_quote_summary_page and state.valid_rating_program
        if rule:
            tracer.log_rule(self.RULE_VISIBILITY, context_facts(state))
        return rule

    def expected_enablement(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        """Editable only on the first visit of Quote Summary; later visits
        show the chosen type read-only."""
        is_first_visit = state.visit_count_quote_summary == 1
        rule = state.is_quote_summary_page and is_first_visit and state.valid_rating_program
        if rule:
            tracer.log_rule(self.RULE_ENABLEMENT, context_facts(state))
        return rule

    def expected_value(self, state: TransactionState, tracer: BusinessRuleTracer) -> str:
        """The page defaults to New Business until the type is first changed;
        after that the committed value is expected."""
        field = self.field_state(state)
        rule = state.is_quote_summary_page and field.update_count == 0 and state.valid_rating_program
        if rule:
            tracer.log_rule(self.RULE_DEFAULT_VALUE, context_facts(state))
            return self.DEFAULTED_VALUE
        return field.value

    def expected_option_list(self, state: TransactionState, tracer: BusinessRuleTracer) -> List[str]:
        rule = state.is_quote_summary_page and state.valid_rating_program
        if not rule:
            return []
        options = self.CATALOGUE.descriptions()
        tracer.log_rule(self.RULE_OPTION_LIST, context_facts(state) + [("DROP_DOWN_VALUES", ", ".join(options))])
        return options

    def expected_required(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        rule = state.is_quote_summary_page and state.valid_rating_program
        if rule:
            tracer.log_rule(self.RULE_REQUIRED, context_facts(state))
        return rule

    async def apply_cascade(
        self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer, new_code: str
    ) -> None:
        from quoteqa.fields.new_business_credit import NewBusinessCreditDropDown

        credit_for = {
            self.NEW_BUSINESS.code: NewBusinessCreditDropDown.YES.code,
            self.TRANSFER.code: NewBusinessCreditDropDown.NO.code,
            self.REWRITE.code: NewBusinessCreditDropDown.NO.code,
            self.BLANK.code: NewBusinessCreditDropDown.YES.code,
        }
        if new_code not in credit_for:
            log_field_event(state.is_logging_on, f"{type(self).__name__}: no cascade for invalid value {new_code!r}")
            return

        previous_was_rewrite = self.field_state(state).previous_value == self.REWRITE.code
        await self.reset_new_business_credit(page, state, tracer, credit_for[new_code])
        if previous_was_rewrite and new_code != self.REWRITE.code:
            await self.reset_rewrite_reason(page, state, tracer)

    async def reset_new_business_credit(
        self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer, credit_code: str
    ) -> None:
        from quoteqa.fields.new_business_credit import NewBusinessCreditDropDown

        credit = self._registry.controller(NewBusinessCreditDropDown)
        await credit.commit_system_update(page, state, tracer, credit_code, cascade_change=False)

    async def reset_rewrite_reason(self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer) -> None:
        from quoteqa.fields.rewrite_reason import RewriteReasonDropDown

        rewrite_reason = self._registry.controller(RewriteReasonDropDown)
        await rewrite_reason.commit_system_update(
            page, state, tracer, RewriteReasonDropDown.BLANK.code, cascade_change=False
        )
