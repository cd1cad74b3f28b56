from enum import Enum

from pydantic import BaseModel, Field

BLANK_CODE = " "


class PageName(str, Enum):
    """Pages of the quoting application that carry tracked controls."""

    QUOTE_SUMMARY = "QuoteSummary"
    POLICY_INFO = "PolicyInfo"

    def __str__(self) -> str:
        return self.value


class FieldState(BaseModel):
    """Value history and last computed UI flags of one tracked control."""

    value: str = BLANK_CODE
    previous_value: str = BLANK_CODE
    update_count: int = Field(default=0, ge=0)
    is_enabled: bool = False
    is_visible: bool = False
    is_required_input: bool = False


class TransactionState(BaseModel):
    """The business transaction shared by every control of one scenario.

    Created once per scenario and mutated only by field controllers and page
    on-load handling. Validators read it and write back the UI flags of the
    control they validate.
    """

    # context
    current_active_page: PageName | None = None
    jurisdiction: str = ""
    rating_program_code: str = ""
    current_user_distribution_channel: str = ""
    is_omega1: bool = False
    is_omega2: bool = False
    visit_count_quote_summary: int = Field(default=0, ge=0)
    visit_count_policy_info: int = Field(default=0, ge=0)

    # diagnostics and per-page validation toggles
    is_logging_on: bool = False
    enable_dom_validation_quote_summary_page: bool = False
    enable_dom_validation_policy_info_page: bool = False

    # tracked controls
    transaction_type: FieldState = Field(default_factory=FieldState)
    source_of_business: FieldState = Field(default_factory=FieldState)
    rewrite_reason: FieldState = Field(default_factory=FieldState)
    new_business_credit: FieldState = Field(default_factory=FieldState)

    @property
    def valid_rating_program(self) -> bool:
        return self.is_omega1 or self.is_omega2

    @property
    def is_quote_summary_page(self) -> bool:
        return self.current_active_page == PageName.QUOTE_SUMMARY
