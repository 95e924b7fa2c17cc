"""Simulate a game with random agents and print the game log."""

from taki.agents.random_agent import RandomAgent
from taki.orchestration.game_runner import GameRunner


def main():
    agents = {
        "p1": RandomAgent("Bot1", seed=1),
        "p2": RandomAgent("Bot2", seed=2),
        "p3": RandomAgent("Bot3", seed=3),
        "p4": RandomAgent("Bot4", seed=4),
    }

    runner = GameRunner(agents, seed=42, max_turns=2000)
    result = runner.run()

    for line in runner.state.history:
        print(f"> {line}")

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
