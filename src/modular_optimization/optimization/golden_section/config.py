from __future__ import annotations

from math import isfinite

from pydantic import BaseModel, ConfigDict, Field, model_validator

from modular_optimization.validation.exceptions import SolverConfigurationError


class GoldenSectionConfig(BaseModel):
    max_iters: int = Field(
        default=100,
        description=(
            "Maximum number of shrink iterations after the two initial evaluations. "
            "This is the only hard bound on the work a single call performs."
        ),
    )
    x_abs_tol: float = Field(
        default=1e-12,
        description="Absolute tolerance on the distance between the two interior points.",
    )
    x_rel_tol: float = Field(
        default=1e-12,
        description=(
            "Relative tolerance on the distance between the two interior points, "
            "scaled by the larger of their magnitudes."
        ),
    )
    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_limits(self):
        """ensures the iteration cap and tolerances can actually terminate a search."""
        if self.max_iters < 1:
            raise SolverConfigurationError(
                f"max_iters must be at least 1, got {self.max_iters}."
            )
        if not isfinite(self.x_abs_tol) or self.x_abs_tol < 0.0:
            raise SolverConfigurationError(
                f"x_abs_tol must be finite and non-negative, got {self.x_abs_tol!r}."
            )
        if not isfinite(self.x_rel_tol) or self.x_rel_tol < 0.0:
            raise SolverConfigurationError(
                f"x_rel_tol must be finite and non-negative, got {self.x_rel_tol!r}."
            )
        if self.x_abs_tol == 0.0 and self.x_rel_tol == 0.0:
            raise SolverConfigurationError(
                "At least one of x_abs_tol and x_rel_tol must be positive."
            )
        return self

    @classmethod
    def default(cls) -> "GoldenSectionConfig":
        """100 iterations with 1e-12 absolute and relative tolerances."""
        return cls()
