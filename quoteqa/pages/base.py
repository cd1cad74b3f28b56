import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple, Type

from quoteqa.actions.page_driver import PageDriver
from quoteqa.fields.base import FieldController
from quoteqa.state import PageName, TransactionState
from quoteqa.tracer import BusinessRuleTracer

if TYPE_CHECKING:
    from quoteqa.fields.registry import FieldRegistry


class PageValidator(ABC):
    """Validates every tracked control of one page.

    Controls are validated in ``CONTROLS`` order; each validation is
    independent, the order only fixes the order of the rule trace.
    """

    PAGE_NAME: PageName
    CONTROLS: Tuple[Type[FieldController], ...] = ()

    def __init__(self, registry: "FieldRegistry"):
        self._registry = registry

    @abstractmethod
    def dom_validation_enabled(self, state: TransactionState) -> bool:
        pass

    @abstractmethod
    def record_visit(self, state: TransactionState) -> int:
        """Increment and return the visit counter of this page."""

    def controllers(self) -> List[FieldController]:
        return [self._registry.controller(control) for control in self.CONTROLS]

    async def validate_dom_states(self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer) -> None:
        logging.debug(f"Validating DOM states of {self.PAGE_NAME} ({len(self.CONTROLS)} controls)")
        for controller in self.controllers():
            await controller.validate(page, state, tracer)

    async def on_load(self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer) -> None:
        """Make this the active page, count the visit and validate it when
        its DOM validation is switched on."""
        state.current_active_page = self.PAGE_NAME
        visit = self.record_visit(state)
        logging.info(f"Entered page {self.PAGE_NAME} (visit {visit})")
        if self.dom_validation_enabled(state):
            await self.validate_dom_states(page, state, tracer)
