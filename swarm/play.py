"""
Launch the game in a window, or play random headless episodes
"""

import argparse
import os

from swarm.configs.game_config import BEST_SCORE_FILE, GAME_CONFIG, WINDOW_CONFIG
from swarm.core.engine import SimulationEngine
from swarm.storage import JsonBestScoreStore, MemoryBestScoreStore


def main():
    parser = argparse.ArgumentParser(description="Swarm Shooter")
    parser.add_argument("--headless", action="store_true",
                        help="Play random episodes without a window")
    parser.add_argument("--episodes", type=int, default=1,
                        help="Number of headless episodes")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")
    parser.add_argument("--best-score-file", type=str, default=BEST_SCORE_FILE,
                        help="JSON file holding the best score")
    parser.add_argument("--no-save", action="store_true",
                        help="Keep the best score in memory only")
    parser.add_argument("--verbose", type=int, default=1)
    args = parser.parse_args()

    if args.episodes < 1:
        parser.error("--episodes must be at least 1")

    if args.no_save:
        store = MemoryBestScoreStore()
    else:
        store = JsonBestScoreStore(os.path.expanduser(args.best_score_file))

    if args.headless:
        from swarm.env import run_random_episode

        for episode in range(args.episodes):
            seed = None if args.seed is None else args.seed + episode
            print(f"Episode {episode + 1}/{args.episodes}")
            run_random_episode(render=False, seed=seed, best_score_store=store)
        return

    from swarm.window import play

    engine = SimulationEngine(best_score_store=store, seed=args.seed,
                              verbose=args.verbose, **GAME_CONFIG)
    play(engine, **WINDOW_CONFIG)
    print(f"Final score: {engine.score}  Best: {engine.best_score}")


if __name__ == "__main__":
    main()
