from typing import List

from quoteqa.fields.base import FieldController
from quoteqa.fields.catalogue import DropdownCatalogue, DropdownOption
from quoteqa.fields.lifecycle import context_facts
from quoteqa.fields.transaction_type import TransactionTypeDropDown
from quoteqa.state import BLANK_CODE, FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer


class RewriteReasonDropDown(FieldController):
    """Rewrite Reason dropdown, rendered only for Rewrite transactions."""

    BLANK = DropdownOption(code=BLANK_CODE, description="")
    COMPANY_REQUESTED = DropdownOption(code="01", description="Company Requested")
    INSURED_REQUESTED = DropdownOption(code="02", description="Insured Requested")
    RATING_PROGRAM_CHANGE = DropdownOption(code="03", description="Change in Rating Program")
    REINSTATEMENT_LAPSE = DropdownOption(code="04", description="Reinstatement After Lapse")

    CATALOGUE = DropdownCatalogue(BLANK, COMPANY_REQUESTED, INSURED_REQUESTED, RATING_PROGRAM_CHANGE, REINSTATEMENT_LAPSE)
    DEFAULTED_VALUE = BLANK.code
    FIELD_NAME = "rewrite_reason"
    FIELD_DESCRIPTION = "Rewrite Reason"
    UI_LOCATOR = 'select[name="rewriteReason"]'

    RULE_ENABLEMENT = 35
    RULE_VISIBILITY = 36
    RULE_DEFAULT_VALUE = 37
    RULE_PRESENCE = 38
    RULE_OPTION_LIST = 39
    RULE_REQUIRED = 40

    def field_state(self, state: TransactionState) -> FieldState:
        return state.rewrite_reason

    def _applies(self, state: TransactionState) -> bool:
        is_rewrite = state.transaction_type.value == TransactionTypeDropDown.REWRITE.code
        return state.is_quote_summary_page and state.valid_rating_program and is_rewrite

    def _facts(self, state: TransactionState):
        return context_facts(state) + [("TRANSACTION_TYPE", state.transaction_type.value)]

    def expected_presence(self, state: TransactionState, tracer: BusinessRuleTracer) -> int:
        if not self._applies(state):
            return 0
        tracer.log_rule(self.RULE_PRESENCE, self._facts(state))
        return 1

    def expected_visibility(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_VISIBILITY, self._facts(state))
        return True

    def expected_enablement(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_ENABLEMENT, self._facts(state))
        return True

    def expected_value(self, state: TransactionState, tracer: BusinessRuleTracer) -> str:
        field = self.field_state(state)
        if self._applies(state) and field.update_count == 0:
            tracer.log_rule(self.RULE_DEFAULT_VALUE, self._facts(state))
            return self.DEFAULTED_VALUE
        return field.value

    def expected_option_list(self, state: TransactionState, tracer: BusinessRuleTracer) -> List[str]:
        if not self._applies(state):
            return []
        options = self.CATALOGUE.descriptions()
        tracer.log_rule(self.RULE_OPTION_LIST, self._facts(state) + [("DROP_DOWN_VALUES", ", ".join(options))])
        return options

    def expected_required(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_REQUIRED, self._facts(state))
        return True
