"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Taki card game for a table of players at one terminal")


def _parse_names(names: str, players: int) -> list[str]:
    parts = [s.strip() for s in names.split(",") if s.strip()]
    if not parts:
        return [f"Player {i}" for i in range(1, players + 1)]
    if len(parts) != players:
        raise typer.BadParameter(f"Got {len(parts)} names for {players} players.")
    if len(set(parts)) != len(parts):
        raise typer.BadParameter("Player names must be unique.")
    return parts


@app.command()
def play(
    players: int = typer.Option(
        4,
        "--players",
        "-n",
        min=2,
        max=10,
        envvar="TAKI_PLAYERS",
        help="Number of players at the table",
    ),
    names: str = typer.Option(
        "",
        "--names",
        envvar="TAKI_NAMES",
        help="Comma-separated player names (e.g. Dana,Omer,Noa,Yael)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="TAKI_SEED", help="Random seed"),
) -> None:
    """Play a hot-seat game at this terminal."""
    from taki.agents.human_agent import HumanAgent
    from taki.display import ConsolePresenter
    from taki.orchestration.game_runner import GameRunner

    player_names = _parse_names(names, players)
    agents = {name: HumanAgent(name=name) for name in player_names}
    runner = GameRunner(agents, presenter=ConsolePresenter(), seed=seed)
    try:
        result = runner.run()
    except (EOFError, KeyboardInterrupt):
        typer.echo("\nGame aborted.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Winner: {result.winner}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-n", min=2, max=10, envvar="TAKI_PLAYERS"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="TAKI_SEED", help="Random seed"),
    max_turns: int = typer.Option(2000, "--max-turns", "-t", min=1, help="Stop after this many turns"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print every event"),
) -> None:
    """Auto-play a game with random agents."""
    from taki.agents.random_agent import RandomAgent
    from taki.display import ConsolePresenter, SilentPresenter
    from taki.orchestration.game_runner import GameRunner

    player_names = _parse_names("", players)
    agents = {
        name: RandomAgent(name=name, seed=None if seed is None else seed + i)
        for i, name in enumerate(player_names)
    }
    presenter = ConsolePresenter(show_hands=False) if verbose else SilentPresenter()
    runner = GameRunner(agents, presenter=presenter, seed=seed, max_turns=max_turns)
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None (turn limit)'}")
    typer.echo(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    app()
