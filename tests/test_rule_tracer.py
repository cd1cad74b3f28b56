import json
import logging

import pytest

from quoteqa.tracer import (
    DeferredRuleTracer,
    FactPair,
    ImmediateRuleTracer,
    JsonLinesRuleSink,
    RuleFact,
    RuleKey,
    TracerMode,
    UnknownRuleKeyError,
    create_tracer,
    resolve_rule_key,
)

FACTS = [("JURS", "NY"), ("RATING_PROGRAM_CODE", "OMG1"), ("USER_DISTRIBUTION_CHANNEL", "AGENT")]


def test_immediate_tracer_writes_each_firing(immediate_tracer, trace_records):
    immediate_tracer.log_rule(8, FACTS)
    immediate_tracer.log_rule(8, FACTS)

    records = trace_records()
    assert len(records) == 2
    assert records[0]["ruleNumber"] == 8
    assert records[0]["keyValuePairs"] == [
        {"key": "jurisdiction", "value": "NY"},
        {"key": "ratingProgramCode", "value": "OMG1"},
        {"key": "userDistributionChannel", "value": "AGENT"},
    ]
    assert records[0]["timestamp"]
    assert immediate_tracer.flush() == 0


def test_deferred_tracer_buffers_until_flush(deferred_tracer, trace_stream, trace_records):
    deferred_tracer.log_rule(8, FACTS)
    deferred_tracer.log_rule(8, FACTS)
    deferred_tracer.log_rule(6, FACTS)

    assert trace_stream.getvalue() == ""
    assert deferred_tracer.pending == 2

    assert deferred_tracer.flush() == 2
    records = trace_records()
    assert [r["ruleNumber"] for r in records] == [8, 6]
    # one flush, one timestamp
    assert records[0]["timestamp"] == records[1]["timestamp"]
    assert deferred_tracer.pending == 0


def test_deferred_flush_of_empty_buffer_writes_nothing(deferred_tracer, trace_stream):
    assert deferred_tracer.flush() == 0

    deferred_tracer.log_rule(7, FACTS)
    deferred_tracer.flush()
    written = trace_stream.getvalue()

    assert deferred_tracer.flush() == 0
    assert trace_stream.getvalue() == written


def test_deferred_dedup_is_sensitive_to_fact_order_and_values(deferred_tracer):
    deferred_tracer.log_rule(8, FACTS)
    deferred_tracer.log_rule(8, list(reversed(FACTS)))
    deferred_tracer.log_rule(8, FACTS[:2] + [("USER_DISTRIBUTION_CHANNEL", "DIRECT")])
    deferred_tracer.log_rule(48, FACTS)

    assert deferred_tracer.pending == 4


def test_unknown_rule_key_is_rejected(immediate_tracer, deferred_tracer, trace_stream):
    with pytest.raises(UnknownRuleKeyError):
        immediate_tracer.log_rule(5, [("POLICY_COLOUR", "red")])
    with pytest.raises(UnknownRuleKeyError):
        deferred_tracer.log_rule(5, FACTS + [("POLICY_COLOUR", "red")])

    assert deferred_tracer.pending == 0
    assert trace_stream.getvalue() == ""


def test_resolve_rule_key_spellings():
    assert resolve_rule_key(RuleKey.JURS) is RuleKey.JURS
    assert resolve_rule_key("rating-program-code") is RuleKey.RATING_PROGRAM_CODE
    assert resolve_rule_key("drop_down_values") is RuleKey.DROP_DOWN_VALUES
    assert resolve_rule_key("jurisdiction") is RuleKey.JURS
    assert resolve_rule_key("ratingProgramCode") is RuleKey.RATING_PROGRAM_CODE
    assert resolve_rule_key("user-distribution-channel") is RuleKey.USER_DISTRIBUTION_CHANNEL
    assert str(RuleKey.CUSTOMER) == "customer"
    for unknown in ("jurisdictionx", "", "rating program code"):
        with pytest.raises(UnknownRuleKeyError):
            resolve_rule_key(unknown)


def test_caller_spellings_are_traced_canonically(immediate_tracer, trace_records):
    immediate_tracer.log_rule(8, [("jurisdiction", "NY"), ("rating-program-code", "OMG1")])

    assert trace_records()[0]["keyValuePairs"] == [
        {"key": "jurisdiction", "value": "NY"},
        {"key": "ratingProgramCode", "value": "OMG1"},
    ]


def test_malformed_dict_fact_is_rejected(immediate_tracer, trace_stream):
    with pytest.raises(UnknownRuleKeyError):
        immediate_tracer.log_rule(8, [{"value": "NY"}])
    with pytest.raises(UnknownRuleKeyError):
        RuleFact(rule_number=8, facts=[{"name": "JURS", "value": "NY"}])

    assert trace_stream.getvalue() == ""


def test_rule_fact_accepts_pairs_and_dicts():
    from_tuples = RuleFact.create(18, [("JURS", "NY"), ("DROP_DOWN_VALUES", "New Business, Transfer")])
    from_dicts = RuleFact.create(
        18, [{"key": "JURS", "value": "NY"}, FactPair(key=RuleKey.DROP_DOWN_VALUES, value="New Business, Transfer")]
    )

    assert from_tuples == from_dicts
    assert hash(from_tuples) == hash(from_dicts)
    assert from_tuples.to_record("2026-01-01T00:00:00+00:00") == {
        "timestamp": "2026-01-01T00:00:00+00:00",
        "ruleNumber": 18,
        "keyValuePairs": [
            {"key": "jurisdiction", "value": "NY"},
            {"key": "dropDownValues", "value": "New Business, Transfer"},
        ],
    }


def test_sink_failure_is_logged_not_raised(immediate_tracer, deferred_tracer, trace_stream, caplog):
    trace_stream.close()

    with caplog.at_level(logging.ERROR):
        immediate_tracer.log_rule(8, FACTS)
        deferred_tracer.log_rule(8, FACTS)
        assert deferred_tracer.flush() == 0

    assert "Failed to write" in caplog.text
    assert deferred_tracer.pending == 0


def test_json_lines_sink_appends_to_file(tmp_path):
    path = tmp_path / "run" / "business_rule_trace.jsonl"
    tracer = ImmediateRuleTracer(JsonLinesRuleSink(str(path)))

    tracer.log_rule(8, FACTS)
    tracer.log_rule(7, FACTS)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["ruleNumber"] for line in lines] == [8, 7]


def test_create_tracer(sink):
    assert isinstance(create_tracer("immediate", sink), ImmediateRuleTracer)
    assert isinstance(create_tracer(TracerMode.DEFERRED, sink), DeferredRuleTracer)
    with pytest.raises(ValueError):
        create_tracer("sometimes", sink)
