from typing import List

from quoteqa.fields.base import FieldController
from quoteqa.fields.catalogue import DropdownCatalogue, DropdownOption
from quoteqa.fields.lifecycle import context_facts
from quoteqa.state import BLANK_CODE, FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer


class SourceOfBusinessDropDown(FieldController):
    """Source of Business dropdown of the Quote Summary page."""

    QUICK_QUOTE = DropdownOption(code="54", description="Quick Quote")
    AFFINITY_ONSITE = DropdownOption(code="37", description="Affinity Onsite")
    CUNA_ONSITE_VISIT = DropdownOption(code="51", description="CUNA - Onsite Visit")
    CUNA_LOCAL_MARKETING = DropdownOption(code="52", description="CUNA - Local Marketing")
    CUNA_REFERRAL = DropdownOption(code="53", description="CUNA - Referral")
    PRIOR_POLICYHOLDER = DropdownOption(code="09", description="Prior Policyholder")
    LM_COM = DropdownOption(code="15", description="LM.com")
    SOCIAL_MEDIA_FACEBOOK = DropdownOption(code="47", description="Social Media: Facebook")
    SOCIAL_MEDIA_LINKEDIN = DropdownOption(code="48", description="Social Media: LinkedIn")
    SON_DAUGHTER_REWRITE = DropdownOption(code="11", description="Son/Daughter Rewrite")
    DIRECT_DEALERSHIP_REFERRAL_PROGRAM = DropdownOption(code="45", description="Direct Dealership Referral Program")
    AFFINITY_DEALERSHIP_REFERRAL_PROGRAM = DropdownOption(code="38", description="Affinity Dealership Referral Program")
    SMALL_MORTGAGE_COMPANY_BANK_PARTNERSHIP = DropdownOption(
        code="46", description="Small Mortgage Company/Bank Partnerships"
    )
    REFERRAL_AFFINITY_BANK_LENDER = DropdownOption(code="39", description="Referral - Affinity Bank/Lender")
    REFERRAL = DropdownOption(code="10", description="Referral")
    PURCHASED_LEAD = DropdownOption(code="41", description="Purchased Lead")
    NETWORKING_GROUP = DropdownOption(code="42", description="Networking Group")
    SALES_GENIE = DropdownOption(code="43", description="SalesGenie")
    COMMUNITY_MARKETING_EVENT = DropdownOption(code="32", description="Community Marketing Event")
    GIFT_FOR_QUOTE = DropdownOption(code="44", description="Gift for Quote")
    ADVERTISING = DropdownOption(code="01", description="Advertising")
    OTHER = DropdownOption(code="56", description="Other")
    NAR_REFERRAL_PROGRAM = DropdownOption(code="55", description="NAR Referral Program")
    BLANK = DropdownOption(code=BLANK_CODE, description="")
    PRESENT_POLICYHOLDER = DropdownOption(code="08", description="Present Policyholder")

    CATALOGUE = DropdownCatalogue(
        QUICK_QUOTE,
        AFFINITY_ONSITE,
        CUNA_ONSITE_VISIT,
        CUNA_LOCAL_MARKETING,
        CUNA_REFERRAL,
        PRIOR_POLICYHOLDER,
        LM_COM,
        SOCIAL_MEDIA_FACEBOOK,
        SOCIAL_MEDIA_LINKEDIN,
        SON_DAUGHTER_REWRITE,
        DIRECT_DEALERSHIP_REFERRAL_PROGRAM,
        AFFINITY_DEALERSHIP_REFERRAL_PROGRAM,
        SMALL_MORTGAGE_COMPANY_BANK_PARTNERSHIP,
        REFERRAL_AFFINITY_BANK_LENDER,
        REFERRAL,
        PURCHASED_LEAD,
        NETWORKING_GROUP,
        SALES_GENIE,
        COMMUNITY_MARKETING_EVENT,
        GIFT_FOR_QUOTE,
        ADVERTISING,
        OTHER,
        NAR_REFERRAL_PROGRAM,
        BLANK,
        PRESENT_POLICYHOLDER,
    )
    DEFAULTED_VALUE = BLANK.code
    FIELD_NAME = "source_of_business"
    FIELD_DESCRIPTION = "Source of Business"
    UI_LOCATOR = 'select[name="sourceOfBusiness"]'

    RULE_ENABLEMENT = 25
    RULE_VISIBILITY = 26
    RULE_DEFAULT_VALUE = 27
    RULE_PRESENCE = 28
    RULE_OPTION_LIST = 29
    RULE_REQUIRED = 30

    def field_state(self, state: TransactionState) -> FieldState:
        return state.source_of_business

    def _applies(self, state: TransactionState) -> bool:
        return state.is_quote_summary_page and state.valid_rating_program

    def expected_presence(self, state: TransactionState, tracer: BusinessRuleTracer) -> int:
        if not self._applies(state):
            return 0
        tracer.log_rule(self.RULE_PRESENCE, context_facts(state))
        return 1

    def expected_visibility(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_VISIBILITY, context_facts(state))
        return True

    def expected_enablement(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_ENABLEMENT, context_facts(state))
        return True

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
        if not self._applies(state):
            return False
        tracer.log_rule(self.RULE_REQUIRED, context_facts(state))
        return True
