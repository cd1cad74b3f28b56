from .scenario_runner import ScenarioRunner
from .suite_executor import SuiteExecutor

__all__ = ["ScenarioRunner", "SuiteExecutor"]
