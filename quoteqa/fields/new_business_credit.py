from typing import List

from quoteqa.fields.base import FieldController
from quoteqa.fields.catalogue import DropdownCatalogue, DropdownOption
from quoteqa.fields.lifecycle import context_facts
from quoteqa.fields.transaction_type import TransactionTypeDropDown
from quoteqa.state import BLANK_CODE, FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer


class NewBusinessCreditDropDown(FieldController):
    """New Business Credit dropdown.

    The application sets it from the transaction type: Yes and locked for New
    Business, No and editable for Transfer and Rewrite.
    """

    YES = DropdownOption(code="Y", description="Yes")
    NO = DropdownOption(code="N", description="No")
    BLANK = DropdownOption(code=BLANK_CODE, description="")

    CATALOGUE = DropdownCatalogue(YES, NO, BLANK)
    DEFAULTED_VALUE = YES.code
    FIELD_NAME = "new_business_credit"
    FIELD_DESCRIPTION = "New Business Credit"
    UI_LOCATOR = 'select[name="newBusinessCredit"]'

    RULE_VISIBILITY_TRANSFER_OR_REWRITE = 41
    RULE_ENABLEMENT = 45
    RULE_VISIBILITY_NEW_BUSINESS = 46
    RULE_DEFAULT_VALUE = 47
    RULE_PRESENCE = 48
    RULE_OPTION_LIST = 49
    RULE_REQUIRED = 50

    def field_state(self, state: TransactionState) -> FieldState:
        return state.new_business_credit

    def _applies(self, state: TransactionState) -> bool:
        return state.is_quote_summary_page and state.valid_rating_program

    @staticmethod
    def _is_transfer_or_rewrite(state: TransactionState) -> bool:
        return state.transaction_type.value in (
            TransactionTypeDropDown.TRANSFER.code,
            TransactionTypeDropDown.REWRITE.code,
        )

    def _facts(self, state: TransactionState):
        return context_facts(state) + [("TRANSACTION_TYPE", state.transaction_type.value)]

    def expected_presence(self, state: TransactionState, tracer: BusinessRuleTracer) -> int:
        if not self._applies(state):
            return 0
        tracer.log_rule(self.RULE_PRESENCE, context_facts(state))
        return 1

    def expected_visibility(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        # Transfer/Rewrite clause is grouped under the page and program checks
        applies = self._applies(state)
        new_business_rule = applies and state.transaction_type.value in (
            TransactionTypeDropDown.NEW_BUSINESS.code,
            TransactionTypeDropDown.BLANK.code,
        )
        transfer_or_rewrite_rule = applies and self._is_transfer_or_rewrite(state)
        if new_business_rule:
            tracer.log_rule(self.RULE_VISIBILITY_NEW_BUSINESS, self._facts(state))
        if transfer_or_rewrite_rule:
            tracer.log_rule(self.RULE_VISIBILITY_TRANSFER_OR_REWRITE, self._facts(state))
        return new_business_rule or transfer_or_rewrite_rule

    def expected_enablement(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        rule = self._applies(state) and self._is_transfer_or_rewrite(state)
        if rule:
            tracer.log_rule(self.RULE_ENABLEMENT, self._facts(state))
        return rule

    def expected_value(self, state: TransactionState, tracer: BusinessRuleTracer) -> str:
        field = self.field_state(state)
        if self._applies(state) and field.update_count == 0:
            tracer.log_rule(self.RULE_DEFAULT_VALUE, context_facts(state))
            return self.DEFAULTED_VALUE
        return field.value

    def expected_option_list(self, state: TransactionState, tracer: BusinessRuleTracer) -> List[str]:
        if not self._applies(state):
            return []
        options = self.CATALOGUE.descriptions()
        tracer.log_rule(self.RULE_OPTION_LIST, context_facts(state) + [("DROP_DOWN_VALUES", ", ".join(options))])
        return options

    def expected_required(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        rule = self._applies(state) and self._is_transfer_or_rewrite(state)
        if rule:
            tracer.log_rule(self.RULE_REQUIRED, self._facts(state))
        return rule
