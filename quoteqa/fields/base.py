from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from quoteqa.actions.page_driver import PageDriver
from quoteqa.fields.catalogue import DropdownCatalogue
from quoteqa.fields.lifecycle import commit_value, log_field_event, validate_field
from quoteqa.state import FieldState, TransactionState
from quoteqa.tracer import BusinessRuleTracer

if TYPE_CHECKING:
    from quoteqa.fields.registry import FieldRegistry


class FieldController(ABC):
    """Contract shared by every tracked dropdown.

    A controller owns one control's catalogue, computes what the rule matrix
    expects of the control from a ``TransactionState``, asserts that against
    the live page and commits value changes back into the state. One instance
    per control type lives in a ``FieldRegistry``; controllers keep no
    per-scenario data of their own.
    """

    FIELD_NAME: str
    FIELD_DESCRIPTION: str
    UI_LOCATOR: str
    CATALOGUE: DropdownCatalogue
    DEFAULTED_VALUE: str

    def __init__(self, registry: "FieldRegistry"):
        self._registry = registry

    @abstractmethod
    def field_state(self, state: TransactionState) -> FieldState:
        """Return this control's slot in ``state``."""

    # catalogue lookups

    @classmethod
    def code_for(cls, description: str) -> str:
        return cls.CATALOGUE.code_for(description)

    @classmethod
    def description_for(cls, code: str) -> str:
        return cls.CATALOGUE.description_for(code)

    # rule expectations: each logs the matching rule exactly when it matches

    @abstractmethod
    def expected_presence(self, state: TransactionState, tracer: BusinessRuleTracer) -> int:
        pass

    @abstractmethod
    def expected_visibility(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        pass

    @abstractmethod
    def expected_enablement(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        pass

    @abstractmethod
    def expected_required(self, state: TransactionState, tracer: BusinessRuleTracer) -> bool:
        pass

    @abstractmethod
    def expected_value(self, state: TransactionState, tracer: BusinessRuleTracer) -> str:
        pass

    @abstractmethod
    def expected_option_list(self, state: TransactionState, tracer: BusinessRuleTracer) -> List[str]:
        pass

    # page interaction

    async def get_element_value(self, page: PageDriver, state: TransactionState) -> str:
        value = await page.read_value(self.UI_LOCATOR) or ""
        log_field_event(
            state.is_logging_on,
            f"{type(self).__name__}.get_element_value: '{self.description_for(value)}' ({value!r})",
        )
        return value

    async def validate(self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer) -> None:
        await validate_field(self, page, state, tracer)

    async def commit_user_update(
        self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer, new_code: str
    ) -> None:
        """Select ``new_code`` on the page, commit it and run the change
        handler with cascades enabled."""
        await page.select(self.UI_LOCATOR, new_code)
        commit_value(self.field_state(state), new_code)
        log_field_event(
            state.is_logging_on,
            f"{type(self).__name__}.commit_user_update: '{self.description_for(new_code)}' ({new_code!r})",
        )
        await self.on_change(page, state, tracer, new_code)

    async def commit_system_update(
        self,
        page: PageDriver,
        state: TransactionState,
        tracer: BusinessRuleTracer,
        new_code: str,
        cascade_change: bool,
    ) -> None:
        """Commit a value the application set by itself, without touching the
        page. ``cascade_change`` is passed on to ``on_change``."""
        commit_value(self.field_state(state), new_code)
        log_field_event(
            state.is_logging_on,
            f"{type(self).__name__}.commit_system_update: '{self.description_for(new_code)}' ({new_code!r})",
        )
        await self.on_change(page, state, tracer, new_code, cascade=cascade_change)

    async def on_change(
        self,
        page: PageDriver,
        state: TransactionState,
        tracer: BusinessRuleTracer,
        new_code: str,
        cascade: bool = True,
    ) -> None:
        """React to a committed change.

        With ``cascade`` off only the event is logged; sibling resets and page
        validation are skipped so mutually resetting controls cannot recurse.
        """
        if new_code in self.CATALOGUE:
            description = self.description_for(new_code) or "BLANK"
        else:
            description = "INVALID_VALUE"
        log_field_event(state.is_logging_on, f"{type(self).__name__} OnChange Triggered: {description.upper()}")
        if not cascade:
            return
        await self.apply_cascade(page, state, tracer, new_code)
        await self.validate_active_page(page, state, tracer)

    async def apply_cascade(
        self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer, new_code: str
    ) -> None:
        """Reset dependent controls after a change. Most controls have none."""

    async def validate_active_page(self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer) -> None:
        validator = self._registry.find_page_validator(state.current_active_page)
        if validator is not None and validator.dom_validation_enabled(state):
            await validator.validate_dom_states(page, state, tracer)
