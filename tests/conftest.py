import json
from io import StringIO
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from quoteqa.fields import (
    NewBusinessCreditDropDown,
    RewriteReasonDropDown,
    SourceOfBusinessDropDown,
    TransactionTypeDropDown,
)
from quoteqa.registry import build_registry
from quoteqa.state import PageName, TransactionState
from quoteqa.tracer import DeferredRuleTracer, ImmediateRuleTracer, StreamRuleSink


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        '--url',
        action='store',
        default=None,
        help='Quote application URL for live scenario runs (overrides config)',
    )


@pytest.fixture
def test_url(request: pytest.FixtureRequest) -> Optional[str]:
    return request.config.getoption('--url')


class FakeElement:
    def __init__(self, visible=True, enabled=True, value='', options=None, count=1):
        self.visible = visible
        self.enabled = enabled
        self.value = value
        self.options = list(options or [])
        self.count = count


class FakePageDriver:
    """In-memory page: selectors map to fake elements, unknown selectors
    match nothing."""

    def __init__(self):
        self.elements: Dict[str, FakeElement] = {}
        self.calls: List[Tuple[str, str]] = []
        self.selections: List[Tuple[str, str]] = []
        self.reactions: Dict[Tuple[str, str], Callable[['FakePageDriver'], None]] = {}

    def add(self, selector, **kwargs) -> FakeElement:
        self.elements[selector] = FakeElement(**kwargs)
        return self.elements[selector]

    def remove(self, selector) -> None:
        self.elements.pop(selector, None)

    def on_select(self, selector, value, reaction) -> None:
        """Emulate what the application does by itself after a selection."""
        self.reactions[(selector, value)] = reaction

    def selectors_touched(self) -> List[str]:
        return [selector for _, selector in self.calls]

    async def locate_count(self, selector):
        self.calls.append(('locate_count', selector))
        element = self.elements.get(selector)
        return element.count if element else 0

    async def is_visible(self, selector):
        self.calls.append(('is_visible', selector))
        element = self.elements.get(selector)
        return element.visible if element else False

    async def is_enabled(self, selector):
        self.calls.append(('is_enabled', selector))
        element = self.elements.get(selector)
        return element.enabled if element else False

    async def read_value(self, selector):
        self.calls.append(('read_value', selector))
        element = self.elements.get(selector)
        return element.value if element else ''

    async def read_options(self, selector):
        self.calls.append(('read_options', selector))
        element = self.elements.get(selector)
        return list(element.options) if element else []

    async def select(self, selector, value):
        self.calls.append(('select', selector))
        self.selections.append((selector, value))
        self.elements[selector].value = value
        reaction = self.reactions.get((selector, value))
        if reaction:
            reaction(self)


def _add_rewrite_reason(page: FakePageDriver) -> None:
    page.add(
        RewriteReasonDropDown.UI_LOCATOR,
        value=RewriteReasonDropDown.BLANK.code,
        options=RewriteReasonDropDown.CATALOGUE.descriptions(),
    )


def _credit(value, enabled):
    def react(page: FakePageDriver) -> None:
        element = page.elements[NewBusinessCreditDropDown.UI_LOCATOR]
        element.value = value
        element.enabled = enabled

    return react


def _transaction_type_reaction(credit_value, credit_enabled, with_rewrite_reason):
    set_credit = _credit(credit_value, credit_enabled)

    def react(page: FakePageDriver) -> None:
        set_credit(page)
        if with_rewrite_reason:
            _add_rewrite_reason(page)
        else:
            page.remove(RewriteReasonDropDown.UI_LOCATOR)

    return react


def build_quote_summary_page() -> FakePageDriver:
    """Quote Summary as first rendered for an Omega program, reacting to
    transaction type changes the way the application does."""
    page = FakePageDriver()
    page.add(
        TransactionTypeDropDown.UI_LOCATOR,
        value=TransactionTypeDropDown.NEW_BUSINESS.code,
        options=TransactionTypeDropDown.CATALOGUE.descriptions(),
    )
    page.add(
        SourceOfBusinessDropDown.UI_LOCATOR,
        value=SourceOfBusinessDropDown.BLANK.code,
        options=SourceOfBusinessDropDown.CATALOGUE.descriptions(),
    )
    page.add(
        NewBusinessCreditDropDown.UI_LOCATOR,
        enabled=False,
        value=NewBusinessCreditDropDown.YES.code,
        options=NewBusinessCreditDropDown.CATALOGUE.descriptions(),
    )

    locator = TransactionTypeDropDown.UI_LOCATOR
    page.on_select(locator, TransactionTypeDropDown.NEW_BUSINESS.code, _transaction_type_reaction('Y', False, False))
    page.on_select(locator, TransactionTypeDropDown.TRANSFER.code, _transaction_type_reaction('N', True, False))
    page.on_select(locator, TransactionTypeDropDown.REWRITE.code, _transaction_type_reaction('N', True, True))
    return page


@pytest.fixture
def page() -> FakePageDriver:
    return FakePageDriver()


@pytest.fixture
def quote_summary_page() -> FakePageDriver:
    return build_quote_summary_page()


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def state() -> TransactionState:
    return TransactionState(
        current_active_page=PageName.QUOTE_SUMMARY,
        jurisdiction='NY',
        rating_program_code='OMG1',
        current_user_distribution_channel='AGENT',
        is_omega1=True,
        is_omega2=False,
        visit_count_quote_summary=1,
    )


@pytest.fixture
def trace_stream() -> StringIO:
    return StringIO()


@pytest.fixture
def trace_records(trace_stream):
    def read():
        return [json.loads(line) for line in trace_stream.getvalue().splitlines()]

    return read


@pytest.fixture
def sink(trace_stream):
    return StreamRuleSink(trace_stream)


@pytest.fixture
def immediate_tracer(sink):
    return ImmediateRuleTracer(sink)


@pytest.fixture
def deferred_tracer(sink):
    return DeferredRuleTracer(sink)
