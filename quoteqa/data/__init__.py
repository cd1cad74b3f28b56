from .test_structures import (
    RunConfiguration,
    ScenarioConfiguration,
    ScenarioResult,
    ScenarioStatus,
    ScenarioStep,
    StepAction,
    TracerConfiguration,
)

__all__ = [
    "ScenarioStatus",
    "StepAction",
    "ScenarioStep",
    "ScenarioConfiguration",
    "TracerConfiguration",
    "RunConfiguration",
    "ScenarioResult",
]
