from modular_optimization.core import (
    Model,
    NoOpObserver,
    Observer,
    OptimizationProblem,
    Snapshot,
)
from modular_optimization.optimization import (
    EvaluationError,
    ModelEvaluationError,
    ProblemEvaluationError,
)
from modular_optimization.optimization.golden_section import (
    Action,
    GoldenSectionConfig,
    Goal,
    Solution,
    Status,
    maximize,
    maximize_unobserved,
    minimize,
    minimize_unobserved,
)
from modular_optimization.validation import InvalidBracketError, SolverConfigurationError

__all__ = [
    "Model",
    "NoOpObserver",
    "Observer",
    "OptimizationProblem",
    "Snapshot",

    "EvaluationError",
    "ModelEvaluationError",
    "ProblemEvaluationError",
    "InvalidBracketError",
    "SolverConfigurationError",

    "Action",
    "GoldenSectionConfig",
    "Goal",
    "Solution",
    "Status",

    "minimize",
    "maximize",
    "minimize_unobserved",
    "maximize_unobserved",
]
