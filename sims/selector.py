import math
from enum import Enum

import numpy as np

ACCEPTANCE_PROBABILITY = 0.6  # Chance of taking each ranked candidate during exploration


class UndefinedProbabilityError(ValueError):
    """Raised when ranking reaches the undefined (both sides dead) sentinel."""


class ExplorationPolicy(Enum):
    FIXED = "fixed"
    WEIGHTED = "weighted"


class FixedAcceptance:
    '''
    Accepts each candidate with the same probability regardless of its estimate.
    Walking the ranking best to worst gives a geometric bias toward strong moves.
    '''
    def __init__(self, probability=ACCEPTANCE_PROBABILITY):
        if not 0.0 < probability <= 1.0:
            raise ValueError(f"acceptance probability must be in (0, 1], got {probability}")
        self.probability = probability

    def threshold(self, estimate):
        return self.probability


class WeightedAcceptance:
    '''
    Accepts each candidate with its own estimated win probability.
    '''
    def threshold(self, estimate):
        return estimate


def make_acceptance(policy, probability=ACCEPTANCE_PROBABILITY):
    if policy is ExplorationPolicy.FIXED:
        return FixedAcceptance(probability)
    if policy is ExplorationPolicy.WEIGHTED:
        return WeightedAcceptance()
    raise ValueError(f"Unknown exploration policy: {policy}")


def rank_successors(estimate, candidates):
    """
    Sort candidate states by descending estimated win probability.

    Args:
        estimate: Callable returning the win probability of a state for the mover
        candidates: Successor states in generation order

    Returns:
        List of (state, probability) tuples, best first. Ties keep generation order.
    """
    scored = []
    for state in candidates:
        p = estimate(state)
        if math.isnan(p):
            raise UndefinedProbabilityError(f"No win probability defined for candidate state {state}")
        scored.append((state, p))
    return sorted(scored, key=lambda item: -item[1])


def select_successor(ranked, deterministic, rng=None, acceptance=None):
    """
    Pick one state from a ranking produced by rank_successors.

    Deterministic selection returns the best candidate. Otherwise each candidate,
    best first, is accepted when a fresh uniform draw falls below the policy's
    threshold; the worst candidate is returned if none is accepted.
    """
    if not ranked:
        return None
    if deterministic:
        return ranked[0][0]

    rng = rng if rng is not None else np.random.default_rng()
    acceptance = acceptance if acceptance is not None else FixedAcceptance()
    for state, p in ranked:
        if rng.random() < acceptance.threshold(p):
            return state
    return ranked[-1][0]
