"""Striking and takedown accuracy."""

from typing import Optional

from ..datasource.models import Fighter


def accuracy(
    landed: Optional[int],
    attempted: Optional[int],
    precomputed: Optional[int] = None,
) -> int:
    """
    Accuracy percentage from landed/attempted counts.

    A value already supplied by the data source takes precedence. Without
    attempts (or without landed data) the result is 0. Halves round up, and
    the result is kept within 0-100.

    Args:
        landed: Number landed
        attempted: Number attempted
        precomputed: Accuracy percentage supplied by the source

    Returns:
        Integer percentage
    """
    if precomputed is not None:
        pct = precomputed
    elif not landed or not attempted or attempted <= 0:
        return 0
    else:
        pct = int(100 * landed / attempted + 0.5)
    return max(0, min(100, pct))


def striking_accuracy(fighter: Fighter) -> int:
    """Significant strike accuracy for a fighter."""
    return accuracy(
        fighter.sig_strikes_landed,
        fighter.sig_strikes_attempted,
        fighter.sig_strike_accuracy,
    )


def takedown_accuracy(fighter: Fighter) -> int:
    """Takedown accuracy for a fighter."""
    return accuracy(
        fighter.takedowns_landed,
        fighter.takedowns_attempted,
        fighter.takedown_accuracy,
    )
