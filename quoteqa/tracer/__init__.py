from .records import FactPair, RuleFact
from .rule_keys import RuleKey, UnknownRuleKeyError, resolve_rule_key
from .sinks import JsonLinesRuleSink, RuleSink, StreamRuleSink
from .tracer import BusinessRuleTracer, DeferredRuleTracer, ImmediateRuleTracer, TracerMode, create_tracer

__all__ = [
    "BusinessRuleTracer",
    "DeferredRuleTracer",
    "FactPair",
    "ImmediateRuleTracer",
    "JsonLinesRuleSink",
    "RuleFact",
    "RuleKey",
    "RuleSink",
    "StreamRuleSink",
    "TracerMode",
    "UnknownRuleKeyError",
    "create_tracer",
    "resolve_rule_key",
]
