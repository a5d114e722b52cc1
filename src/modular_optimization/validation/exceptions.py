class SolverConfigurationError(Exception):
    """
    Raised when solver parameters are not usable, e.g. a non-positive
      iteration cap, a negative or non-finite tolerance, or tolerances that
      are both zero (in which case convergence can never be reached).
    """


class InvalidBracketError(Exception):
    """
    Raised when the outer bounds handed to a bracketing solver are not finite
      or are not strictly increasing. Raised before any evaluation occurs.
    """
