from enum import Enum


class Action(Enum):
    """
    STOP_EARLY   : stop now and return the best real point found so far.
    ASSUME_WORSE : treat the evaluated point as worse than the other interior
                   point. The search shrinks away from it and it never becomes
                   the best point. Recovers a failed evaluation, or steers the
                   search away from a region that evaluated fine.

    Returning ``None`` from an observer accepts the real outcome.
    """

    STOP_EARLY = "stop_early"
    ASSUME_WORSE = "assume_worse"
