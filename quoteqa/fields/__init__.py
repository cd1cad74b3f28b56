from .base import FieldController
from .catalogue import DropdownCatalogue, DropdownOption
from .new_business_credit import NewBusinessCreditDropDown
from .registry import FieldRegistry, UnknownControlError
from .rewrite_reason import RewriteReasonDropDown
from .source_of_business import SourceOfBusinessDropDown
from .transaction_type import TransactionTypeDropDown

__all__ = [
    "DropdownCatalogue",
    "DropdownOption",
    "FieldController",
    "FieldRegistry",
    "NewBusinessCreditDropDown",
    "RewriteReasonDropDown",
    "SourceOfBusinessDropDown",
    "TransactionTypeDropDown",
    "UnknownControlError",
]
