from .transaction import BLANK_CODE, FieldState, PageName, TransactionState

__all__ = ["BLANK_CODE", "FieldState", "PageName", "TransactionState"]
