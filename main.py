"""
Train two tabular Chopsticks models by self-play, then advise moves read from stdin.

Usage:
    python main.py
    python main.py --games 20000 --seed 7
    echo "1 1 1 1" | python main.py --games 1000 --no-progress
"""

import argparse

from sims.selector import ExplorationPolicy
from utils.config import TrainingConfig
from utils.inference import serve
from utils.trainer import train


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Self-play trainer and move advisor for Chopsticks",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--games', type=int, default=TrainingConfig.num_games,
                        help='Number of self-play games')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (omit for a fresh run)')
    parser.add_argument('--exploration', type=str, default=ExplorationPolicy.FIXED.value,
                        choices=[p.value for p in ExplorationPolicy],
                        help='Exploration acceptance policy')
    parser.add_argument('--acceptance', type=float, default=TrainingConfig.acceptance_probability,
                        help='Acceptance probability for the fixed policy')
    parser.add_argument('--max-plies', type=int, default=None,
                        help='Abandon self-play games longer than this')
    parser.add_argument('--no-progress', action='store_true',
                        help='Hide the self-play progress bar')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = TrainingConfig(
        num_games=args.games,
        seed=args.seed,
        exploration=args.exploration,
        acceptance_probability=args.acceptance,
        max_plies=args.max_plies,
        show_progress=not args.no_progress,
    )
    model, _, _ = train(config)
    print("Training complete.", flush=True)
    serve(model)


if __name__ == "__main__":
    main()
