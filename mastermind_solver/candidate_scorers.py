from typing import Optional

from mastermind_solver.colors import Color

Pools = list[Optional[list[Color]]]


def _occurrences(pools: Pools) -> dict[Color, int]:
    """
    Counts how many open pools each color appears in.

    Dict order is the order colors are first encountered scanning pools by position, then pool order,
    which is what scorers fall back on to break ties.
    """
    counts: dict[Color, int] = {}
    for pool in pools:
        if not pool:
            continue
        for color in pool:
            counts[color] = counts.get(color, 0) + 1
    return counts


class LeastOccurrenceScorer:

    """
    Picks the color of a position's pool that appears in the fewest open pools overall.

    Scarce colors are tried first: a color shared by many positions is likely to be placed later anyway,
    while a scarce one narrows the remaining search space faster. Ties go to the color encountered first.
    """

    TESTING_ENABLED = True
    NAME = "least"

    def choose(self, pools: Pools, position: int) -> Color:
        pool = pools[position]
        if not pool:
            raise ValueError(f"Position {position} has no color to choose from.")

        counts = _occurrences(pools)
        return min((color for color in counts if color in pool), key=lambda color: counts[color])


class MostOccurrenceScorer:

    """
    Picks the color of a position's pool that appears in the most open pools overall.

    The opposite heuristic to LeastOccurrenceScorer, kept for comparison in simulations. Ties go to the
    color encountered first.
    """

    TESTING_ENABLED = True
    NAME = "most"

    def choose(self, pools: Pools, position: int) -> Color:
        pool = pools[position]
        if not pool:
            raise ValueError(f"Position {position} has no color to choose from.")

        counts = _occurrences(pools)
        return max((color for color in counts if color in pool), key=lambda color: counts[color])


SCORERS = {scorer.NAME: scorer for scorer in (LeastOccurrenceScorer, MostOccurrenceScorer)}


def get_scorer(name: str):
    try:
        return SCORERS[name]
    except KeyError:
        raise ValueError(f"Unknown scorer '{name}', expected one of ({', '.join(SCORERS)}).") from None
