import logging
from datetime import datetime
from typing import Optional

from quoteqa.actions import FieldAssertionError, PageDriver
from quoteqa.data import ScenarioConfiguration, ScenarioResult, ScenarioStatus, ScenarioStep, StepAction
from quoteqa.fields import FieldRegistry
from quoteqa.registry import build_registry
from quoteqa.state import TransactionState
from quoteqa.tracer import BusinessRuleTracer


class ScenarioRunner:
    """Plays the steps of one scenario against a page and validates the
    tracked controls along the way."""

    def __init__(self, registry: Optional[FieldRegistry] = None):
        self.registry = registry or build_registry()

    @staticmethod
    def build_state(scenario: ScenarioConfiguration) -> TransactionState:
        state = TransactionState.model_validate(scenario.initial_state)
        # The active page is only ever set by loading one
        state.current_active_page = None
        return state

    def resolve_code(self, step: ScenarioStep) -> str:
        controller = self.registry.controller_for_field(step.field)
        if step.code is not None:
            return step.code
        if step.description is None:
            raise ValueError(f"Select step on '{step.field}' needs a code or a description")
        code = controller.code_for(step.description)
        if not code:
            raise ValueError(f"'{step.description}' is not an option of '{step.field}'")
        return code

    async def run_step(
        self, page: PageDriver, state: TransactionState, tracer: BusinessRuleTracer, step: ScenarioStep
    ) -> None:
        if step.action == StepAction.LOAD:
            await self.registry.page_validator(step.page).on_load(page, state, tracer)

        elif step.action == StepAction.SELECT:
            if not step.field:
                raise ValueError("Select step needs a field")
            controller = self.registry.controller_for_field(step.field)
            await controller.commit_user_update(page, state, tracer, self.resolve_code(step))

        elif step.action == StepAction.VALIDATE:
            # Rules are evaluated against the active page only
            page_name = state.current_active_page
            if page_name is None:
                raise ValueError("Validate step before any page was loaded")
            if step.page is not None and step.page != page_name:
                raise ValueError(f"Validate step names page '{step.page}' but the active page is '{page_name}'")
            if step.field:
                await self.registry.controller_for_field(step.field).validate(page, state, tracer)
            else:
                await self.registry.page_validator(page_name).validate_dom_states(page, state, tracer)

    async def run(
        self, page: PageDriver, scenario: ScenarioConfiguration, tracer: BusinessRuleTracer
    ) -> ScenarioResult:
        """Run ``scenario`` from its start page.

        Args:
            page: driver of the page the quote application is shown in
            scenario: the scenario to play
            tracer: receives the business rules fired by the scenario

        Returns:
            ScenarioResult: FAILED with the first error message when a step
            raises, PASSED otherwise. The tracer is flushed either way.
        """
        result = ScenarioResult(
            scenario_name=scenario.name,
            status=ScenarioStatus.RUNNING,
            start_time=datetime.now(),
        )
        logging.info(f"Running scenario: {scenario.name} ({len(scenario.steps)} steps)")

        try:
            state = self.build_state(scenario)
            await self.registry.page_validator(scenario.start_page).on_load(page, state, tracer)

            for step in scenario.steps:
                await self.run_step(page, state, tracer, step)
                result.steps_completed += 1

            result.status = ScenarioStatus.PASSED
            logging.info(f"Scenario passed: {scenario.name}")

        except FieldAssertionError as e:
            result.status = ScenarioStatus.FAILED
            result.error_message = str(e)
            logging.error(f"Scenario {scenario.name} failed at step {result.steps_completed + 1}: {e}")

        except Exception as e:
            result.status = ScenarioStatus.FAILED
            result.error_message = f"{type(e).__name__}: {e}"
            logging.error(f"Scenario {scenario.name} raised an error: {e}", exc_info=True)

        finally:
            result.rules_flushed = tracer.flush()
            result.end_time = datetime.now()

        return result
