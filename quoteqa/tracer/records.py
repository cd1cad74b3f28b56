from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from quoteqa.tracer.rule_keys import RuleKey, UnknownRuleKeyError, resolve_rule_key

FactInput = Union["FactPair", Tuple[Union[RuleKey, str], Any], Dict[str, Any]]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class FactPair(BaseModel):
    """One key/value fact of a rule firing, key already resolved."""

    model_config = ConfigDict(frozen=True)

    key: RuleKey
    value: str

    @classmethod
    def of(cls, item: FactInput) -> "FactPair":
        if isinstance(item, FactPair):
            return item
        if isinstance(item, dict):
            if "key" not in item:
                raise UnknownRuleKeyError(f"Rule fact without a key: {item!r}")
            key, value = item["key"], item.get("value")
        else:
            key, value = item
        return cls(key=resolve_rule_key(key), value="" if value is None else str(value))


class RuleFact(BaseModel):
    """Rule number plus its ordered facts; equality and hash are structural."""

    model_config = ConfigDict(frozen=True)

    rule_number: int
    facts: Tuple[FactPair, ...] = ()

    @field_validator("facts", mode="before")
    @classmethod
    def _coerce_facts(cls, value):
        # UnknownRuleKeyError is a KeyError, so pydantic lets it through unwrapped
        return tuple(FactPair.of(item) for item in value)

    @classmethod
    def create(cls, rule_number: int, facts: Iterable[FactInput]) -> "RuleFact":
        return cls(rule_number=rule_number, facts=tuple(facts))

    def to_record(self, timestamp: str | None = None) -> Dict[str, Any]:
        """Build the persisted form of this firing."""
        return {
            "timestamp": timestamp or utc_timestamp(),
            "ruleNumber": self.rule_number,
            "keyValuePairs": [{"key": fact.key.value, "value": fact.value} for fact in self.facts],
        }
