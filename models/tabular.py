from enum import Enum

import numpy as np
import torch

from games.chopsticks import NUM_COUNTS, ChopsticksGame, Perspective
from models.symmetric_table import SymmetricPairTable
from sims.selector import FixedAcceptance, rank_successors, select_successor

DTYPE = torch.float32
UNDEFINED = float('nan')  # Win probability of the unreachable both-dead cell


class CellKind(Enum):
    BOTH_DEAD = 0
    HOME_DEAD = 1
    AWAY_DEAD = 2
    OPEN = 3


def classify_cell(home, away):
    home_dead = home[0] == 0 and home[1] == 0
    away_dead = away[0] == 0 and away[1] == 0
    if home_dead and away_dead:
        return CellKind.BOTH_DEAD
    if home_dead:
        return CellKind.HOME_DEAD
    if away_dead:
        return CellKind.AWAY_DEAD
    return CellKind.OPEN


BOUNDARY_PROBABILITIES = {
    CellKind.BOTH_DEAD: UNDEFINED,
    CellKind.HOME_DEAD: 0.0,  # certain loss
    CellKind.AWAY_DEAD: 1.0,  # certain win
}


def open_unit_draw(rng):
    # Uniform draw on the open interval (0, 1)
    p = rng.random()
    while p == 0.0:
        p = rng.random()
    return p


class TabularModel:
    '''
    Tabular win-probability estimator for Chopsticks.
    Probabilities and sample sizes are stored in nested SymmetricPairTables keyed by
    [home pair][away pair], so hand order never matters for a lookup.
    Every state is read from the model's own point of view: home is the model's hands.
    Probabilities start random in (0, 1), except the boundary cells which are fixed:
    home dead -> 0, away dead -> 1, both dead -> undefined (NaN, unreachable).
    Sample sizes start at 1 so no open cell is ever treated as certain.
    '''
    def __init__(self, rng=None, initializer=None, acceptance=None):
        """
        Args:
            rng: numpy Generator used for seeding and exploration draws
            initializer: Optional callable (home, away) -> float seeding open cells
            acceptance: Exploration acceptance policy (FixedAcceptance by default)
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.acceptance = acceptance if acceptance is not None else FixedAcceptance()
        if initializer is None:
            initializer = lambda home, away: open_unit_draw(self.rng)

        def seed(home, away):
            kind = classify_cell(home, away)
            if kind is CellKind.OPEN:
                return initializer(home, away)
            return BOUNDARY_PROBABILITIES[kind]

        self.probabilities = SymmetricPairTable(
            NUM_COUNTS,
            lambda home0, home1: SymmetricPairTable(
                NUM_COUNTS, lambda away0, away1: seed((home0, home1), (away0, away1))))
        self.sample_sizes = SymmetricPairTable(
            NUM_COUNTS, lambda _i, _j: SymmetricPairTable(NUM_COUNTS, lambda _k, _l: 1))

    def probability(self, state):
        home, away = state
        return self.probabilities[home][away]

    def sample_size(self, state):
        home, away = state
        return self.sample_sizes[home][away]

    def predict(self, state, deterministic=False, perspective=Perspective.HOME):
        """
        Choose the next state for the side designated by perspective.

        Returns:
            The successor state in the caller's orientation, or None if no legal move exists
        """
        own_state = perspective.orient(state)
        candidates = ChopsticksGame.get_successors(own_state)
        if not candidates:
            return None
        ranked = rank_successors(self.probability, candidates)
        chosen = select_successor(ranked, deterministic, self.rng, self.acceptance)
        return perspective.orient(chosen)

    def predict_reversed(self, state, deterministic=False):
        # predict for the side stored as the second element of state
        return self.predict(state, deterministic, Perspective.AWAY)

    def fit(self, trajectory, won, perspective=Perspective.HOME):
        """
        Every-visit Monte-Carlo update of each state in a finished game.

        Each occurrence moves the running mean toward the outcome:
            p' = (p * n + won) / (n + 1),  n' = n + 1
        Boundary cells keep their fixed probability but still count the visit.
        """
        target = 1.0 if won else 0.0
        for state in trajectory:
            home, away = perspective.orient(state)
            n = self.sample_sizes[home][away]
            if classify_cell(home, away) is CellKind.OPEN:
                p = self.probabilities[home][away]
                self.probabilities[home][away] = (p * n + target) / (n + 1)
            self.sample_sizes[home][away] = n + 1

    def fit_reversed(self, trajectory, won):
        # fit for the side stored as the second element of each state
        self.fit(trajectory, won, Perspective.AWAY)

    def to_tensor(self):
        """Dense (5, 5, 5, 5) tensor of win probabilities indexed [home0, home1, away0, away1]."""
        return self._dense(self.probabilities, DTYPE)

    def sample_sizes_tensor(self):
        return self._dense(self.sample_sizes, torch.int64)

    @staticmethod
    def _dense(table, dtype):
        dense = torch.empty((NUM_COUNTS,) * 4, dtype=dtype)
        for home0 in range(NUM_COUNTS):
            for home1 in range(NUM_COUNTS):
                inner = table[home0, home1]
                for away0 in range(NUM_COUNTS):
                    for away1 in range(NUM_COUNTS):
                        dense[home0, home1, away0, away1] = inner[away0, away1]
        return dense

    def __repr__(self):
        explored = sum(n > 1 for _, inner in self.sample_sizes.cells() for _, n in inner.cells())
        return "TabularModel(cells={}, explored={})".format(
            sum(1 for _, inner in self.probabilities.cells() for _ in inner.cells()), explored)
