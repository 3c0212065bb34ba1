from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from games.chopsticks import INITIAL_STATE, ChopsticksGame, Perspective
from models.tabular import TabularModel
from sims.selector import make_acceptance


@dataclass
class SelfPlayStats:
    games: int = 0
    wins_a: int = 0
    wins_b: int = 0
    abandoned: int = 0  # games cut off by max_plies, never fitted
    plies: int = 0


def play_game(model_a, model_b, rng, max_plies=None, deterministic=False):
    """
    Play one game between two models.
    States are stored from model_a's side: the first hand-pair is model_a's,
    model_b acts on the same states through Perspective.AWAY.

    Returns:
        trajectory: list of states from the initial state to the last ply
        winner: Perspective.HOME if model_a won, Perspective.AWAY if model_b won,
                None if the game was cut off by max_plies
    """
    trajectory = [INITIAL_STATE]
    # False -> model_a moves, True -> model_b moves; random first mover prevents bias
    turn = bool(rng.integers(2))
    while True:
        if max_plies is not None and len(trajectory) > max_plies:
            return trajectory, None
        if turn:
            next_state = model_b.predict(trajectory[-1], deterministic, Perspective.AWAY)
        else:
            next_state = model_a.predict(trajectory[-1], deterministic, Perspective.HOME)
        if next_state is None:
            raise RuntimeError(f"No legal move from non-terminal state {trajectory[-1]}")
        trajectory.append(next_state)

        winner = ChopsticksGame.winner(next_state)
        if winner is not None:
            return trajectory, winner
        turn = not turn


def self_play(model_a, model_b, num_games, rng=None, show_progress=True, max_plies=None):
    """
    Train two models against each other.
    Every state of a finished game is fitted into both models, each with the outcome
    from its own side (every-visit Monte-Carlo).

    Args:
        model_a: TabularModel owning the first hand-pair of each state
        model_b: TabularModel owning the second hand-pair of each state
        num_games: Number of games to play
        rng: numpy Generator choosing the first mover of each game
        show_progress: Whether to show progress bar
        max_plies: Optional safety limit, longer games are abandoned without fitting

    Returns:
        SelfPlayStats for the run
    """
    rng = rng if rng is not None else np.random.default_rng()
    stats = SelfPlayStats()

    iterator = range(num_games)
    if show_progress:
        iterator = tqdm(iterator, desc="Self-play")

    for _ in iterator:
        trajectory, winner = play_game(model_a, model_b, rng, max_plies)
        stats.plies += len(trajectory) - 1
        if winner is None:
            stats.abandoned += 1
            continue
        won_a = winner is Perspective.HOME
        model_a.fit(trajectory, won_a)
        model_b.fit_reversed(trajectory, not won_a)
        stats.games += 1
        if won_a:
            stats.wins_a += 1
        else:
            stats.wins_b += 1
    return stats


def train(config):
    """
    Build two independently seeded models and run self-play on them.

    Returns:
        (model_a, model_b, stats)
    """
    seeds = np.random.SeedSequence(config.seed).spawn(3)
    models = []
    for seed in seeds[:2]:
        acceptance = make_acceptance(config.exploration, config.acceptance_probability)
        models.append(TabularModel(rng=np.random.default_rng(seed), acceptance=acceptance))
    model_a, model_b = models
    stats = self_play(model_a, model_b, config.num_games, rng=np.random.default_rng(seeds[2]),
                      show_progress=config.show_progress, max_plies=config.max_plies)
    return model_a, model_b, stats


class RandomMover:
    """Baseline opponent picking uniformly among legal successors."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def predict(self, state, deterministic=False, perspective=Perspective.HOME):
        candidates = ChopsticksGame.get_successors(perspective.orient(state))
        if not candidates:
            return None
        return perspective.orient(candidates[self.rng.integers(len(candidates))])


def evaluate(model, opponent=None, num_games=100, rng=None, deterministic=True, max_plies=200):
    """
    Play model against an opponent and count results from model's side.
    opponent=None plays against a RandomMover. Games reaching max_plies count as draws.

    Returns:
        Dict with wins, losses, draws and win_rate
    """
    rng = rng if rng is not None else np.random.default_rng()
    if opponent is None:
        opponent = RandomMover(rng)
    results = {'wins': 0, 'losses': 0, 'draws': 0}
    for _ in range(num_games):
        _, winner = play_game(model, opponent, rng, max_plies, deterministic)
        if winner is None:
            results['draws'] += 1
        elif winner is Perspective.HOME:
            results['wins'] += 1
        else:
            results['losses'] += 1
    results['win_rate'] = results['wins'] / num_games if num_games else 0.0
    return results
