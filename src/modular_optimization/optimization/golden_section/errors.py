class SearchInvariantError(Exception):
    """
    Raised when the search reaches a state it should never be able to reach,
      e.g. both interior points scoring as the sentinel worst value after
      initialization. Signals a logic error rather than an evaluation failure.
    """
