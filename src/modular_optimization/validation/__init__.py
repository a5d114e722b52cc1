from modular_optimization.validation.exceptions import (
    InvalidBracketError,
    SolverConfigurationError,
)

__all__ = [
    "InvalidBracketError",
    "SolverConfigurationError",
]
