from quoteqa.fields import (
    FieldRegistry,
    NewBusinessCreditDropDown,
    RewriteReasonDropDown,
    SourceOfBusinessDropDown,
    TransactionTypeDropDown,
)
from quoteqa.pages import PolicyInfoPageValidator, QuoteSummaryPageValidator

CONTROL_TYPES = (
    TransactionTypeDropDown,
    SourceOfBusinessDropDown,
    RewriteReasonDropDown,
    NewBusinessCreditDropDown,
)
PAGE_VALIDATOR_TYPES = (QuoteSummaryPageValidator, PolicyInfoPageValidator)


def build_registry() -> FieldRegistry:
    """Create the controllers and page validators once, wired to each other
    through the returned registry."""
    registry = FieldRegistry()
    for control_type in CONTROL_TYPES:
        registry.register_controller(control_type(registry))
    for validator_type in PAGE_VALIDATOR_TYPES:
        registry.register_page(validator_type(registry))
    return registry
