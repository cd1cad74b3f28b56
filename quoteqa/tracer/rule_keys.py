from enum import Enum
from typing import Dict, Union


class UnknownRuleKeyError(KeyError):
    """A rule fact used a key outside the business-rule vocabulary."""


class RuleKey(Enum):
    """Closed vocabulary of rule fact keys.

    Member names are the symbolic keys used by field controllers, values are
    the canonical business-rule terms written to the trace.
    """

    JURS = "jurisdiction"
    RATING_PROGRAM_CODE = "ratingProgramCode"
    USER_DISTRIBUTION_CHANNEL = "userDistributionChannel"
    DROP_DOWN_VALUES = "dropDownValues"
    CURRENT_ACTIVE_PAGE = "currentActivePage"
    TRANSACTION_TYPE = "transactionType"
    CUSTOMER = "customer"
    USER_LOCATION = "userLocation"
    PURCHASE = "purchase"
    ACCOUNT = "account"
    DISCOUNT = "discount"

    def __str__(self) -> str:
        return self.value


def _normalize(spelling: str) -> str:
    return spelling.strip().replace("-", "").replace("_", "").lower()


# Every accepted spelling: member names and canonical terms, in any case,
# with or without dashes and underscores
_ALIASES: Dict[str, RuleKey] = {}
for _member in RuleKey:
    _ALIASES[_normalize(_member.name)] = _member
    _ALIASES[_normalize(_member.value)] = _member


def resolve_rule_key(key: Union[RuleKey, str]) -> RuleKey:
    """Map a symbolic key to its vocabulary member.

    Accepts a member, its name or its canonical term, spelled in any case and
    with dashes or underscores ("JURS", "jurisdiction", "rating-program-code",
    "ratingProgramCode").

    Raises:
        UnknownRuleKeyError: the key is not part of the vocabulary.
    """
    if isinstance(key, RuleKey):
        return key
    if isinstance(key, str) and _normalize(key) in _ALIASES:
        return _ALIASES[_normalize(key)]
    raise UnknownRuleKeyError(f"Unknown business rule key: {key!r}")
