import logging
from datetime import datetime
from typing import List, Optional

from quoteqa.actions import PlaywrightPageDriver
from quoteqa.browser import BrowserSession
from quoteqa.data import RunConfiguration, ScenarioConfiguration, ScenarioResult, ScenarioStatus
from quoteqa.executor.scenario_runner import ScenarioRunner
from quoteqa.tracer import JsonLinesRuleSink, create_tracer
from quoteqa.utils import GetLog


class SuiteExecutor:
    """Runs the enabled scenarios of a run configuration one after another,
    each in its own browser session."""

    def __init__(self, runner: Optional[ScenarioRunner] = None):
        self.runner = runner or ScenarioRunner()

    async def run(self, run_config: RunConfiguration) -> List[ScenarioResult]:
        GetLog.get_log(level=run_config.log_level)
        trace_path = run_config.tracer.path or GetLog.rule_trace_path()

        scenarios = run_config.get_enabled_scenarios()
        if not scenarios:
            logging.warning("No enabled scenarios found")
            return []

        logging.info(
            f"Starting {len(scenarios)} scenario(s) against {run_config.target_url}, "
            f"tracer mode {run_config.tracer.mode.value}, trace file {trace_path}"
        )
        results = []
        for scenario in scenarios:
            results.append(await self._run_scenario(run_config, scenario, trace_path))

        passed = sum(1 for r in results if r.status == ScenarioStatus.PASSED)
        logging.info(f"Suite completed: {passed}/{len(results)} scenario(s) passed")
        return results

    async def _run_scenario(
        self, run_config: RunConfiguration, scenario: ScenarioConfiguration, trace_path: str
    ) -> ScenarioResult:
        tracer = create_tracer(run_config.tracer.mode, JsonLinesRuleSink(trace_path))
        session = BrowserSession(browser_config=run_config.browser_config)
        try:
            await session.initialize()
            await session.navigate_to(run_config.target_url)
            page = PlaywrightPageDriver(session.get_page())
            return await self.runner.run(page, scenario, tracer)
        except Exception as e:
            # Browser start or navigation failed before the scenario could run
            logging.error(f"Failed to prepare scenario {scenario.name}: {e}", exc_info=True)
            return ScenarioResult(
                scenario_name=scenario.name,
                status=ScenarioStatus.FAILED,
                error_message=f"{type(e).__name__}: {e}",
                rules_flushed=tracer.flush(),
                start_time=datetime.now(),
                end_time=datetime.now(),
            )
        finally:
            await session.close()
