from .base import PageValidator
from .policy_info import PolicyInfoPageValidator
from .quote_summary import QuoteSummaryPageValidator

__all__ = ["PageValidator", "PolicyInfoPageValidator", "QuoteSummaryPageValidator"]
