import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable

from quoteqa.tracer.records import FactInput, RuleFact, utc_timestamp
from quoteqa.tracer.sinks import RuleSink


class TracerMode(str, Enum):
    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


class BusinessRuleTracer(ABC):
    """Records which business rule justified a field expectation.

    One tracer is created per scenario and handed to every controller call.
    """

    mode: TracerMode

    def __init__(self, sink: RuleSink):
        self.sink = sink

    def log_rule(self, rule_number: int, facts: Iterable[FactInput]) -> RuleFact:
        """Record that ``rule_number`` fired with ``facts``.

        Facts are ``(key, value)`` pairs whose keys must belong to the
        ``RuleKey`` vocabulary.

        Raises:
            UnknownRuleKeyError: a fact key is not in the vocabulary.
        """
        rule_fact = RuleFact.create(rule_number, facts)
        self._record(rule_fact)
        return rule_fact

    @abstractmethod
    def _record(self, rule_fact: RuleFact) -> None:
        pass

    @abstractmethod
    def flush(self) -> int:
        """Persist anything still buffered and return how many records were
        written."""


class ImmediateRuleTracer(BusinessRuleTracer):
    """Appends every firing to the sink as soon as it is logged."""

    mode = TracerMode.IMMEDIATE

    def _record(self, rule_fact: RuleFact) -> None:
        self.sink.write(rule_fact.to_record(utc_timestamp()))

    def flush(self) -> int:
        return 0


class DeferredRuleTracer(BusinessRuleTracer):
    """Buffers unique firings and writes them once, on flush.

    Identical ``(rule_number, facts)`` pairs logged repeatedly within one
    scenario are recorded a single time, in first-seen order.
    """

    mode = TracerMode.DEFERRED

    def __init__(self, sink: RuleSink):
        super().__init__(sink)
        self._buffer: Dict[RuleFact, None] = {}

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def _record(self, rule_fact: RuleFact) -> None:
        self._buffer.setdefault(rule_fact, None)

    def flush(self) -> int:
        if not self._buffer:
            return 0
        timestamp = utc_timestamp()
        records = [rule_fact.to_record(timestamp) for rule_fact in self._buffer]
        self._buffer.clear()
        if not self.sink.write_many(records):
            return 0
        logging.debug(f"Flushed {len(records)} unique rule firing(s) to {self.sink.describe()}")
        return len(records)


def create_tracer(mode: TracerMode | str, sink: RuleSink) -> BusinessRuleTracer:
    tracers = {
        TracerMode.IMMEDIATE: ImmediateRuleTracer,
        TracerMode.DEFERRED: DeferredRuleTracer,
    }
    return tracers[TracerMode(mode)](sink)
