"""
Training configuration for the tabular self-play trainer.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from sims.selector import ACCEPTANCE_PROBABILITY, ExplorationPolicy


@dataclass
class TrainingConfig:
    """Configuration for a self-play training run."""

    num_games: int = 5000
    seed: Optional[int] = None  # None draws fresh OS entropy

    # Exploration
    exploration: ExplorationPolicy = ExplorationPolicy.FIXED
    acceptance_probability: float = ACCEPTANCE_PROBABILITY

    # Safety limit on plies per game, None leaves games unbounded
    max_plies: Optional[int] = None

    show_progress: bool = True

    def __post_init__(self):
        if isinstance(self.exploration, str):
            self.exploration = ExplorationPolicy(self.exploration)
        if self.num_games < 0:
            raise ValueError(f"num_games must be non-negative, got {self.num_games}")
        if not 0.0 < self.acceptance_probability <= 1.0:
            raise ValueError(
                f"acceptance_probability must be in (0, 1], got {self.acceptance_probability}")
        if self.max_plies is not None and self.max_plies < 1:
            raise ValueError(f"max_plies must be positive, got {self.max_plies}")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['exploration'] = self.exploration.value
        return d


def get_fast_config() -> TrainingConfig:
    """Small run for tests and debugging."""
    return TrainingConfig(num_games=50, seed=0, max_plies=1000, show_progress=False)
