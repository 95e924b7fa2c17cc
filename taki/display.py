"""Terminal presentation of game events."""

from typing import Any

import typer

from taki.agent.protocol import Event
from taki.engine import PlayerView


def format_player_view(pv: PlayerView) -> str:
    """Format the table as seen by the player whose turn it is."""
    lines = [
        f"=== {pv.player}'s hand ===",
        " ".join(str(c) for c in pv.my_hand),
        "",
        "=== Top card ===",
        str(pv.top_card),
        "",
        "=== Color in effect ===",
        pv.last_color.value.upper(),
        "",
        "=== Card counts ===",
    ]
    for name, count in pv.num_cards_per_player.items():
        lines.append(f"  {name}: {count} cards")
    lines.extend([
        "",
        "=== Direction ===",
        "forward" if pv.direction == 1 else "reversed",
    ])
    if pv.skipped_players:
        lines.extend(["", "=== Losing next turn ===", ", ".join(pv.skipped_players)])
    return "\n".join(lines)


class ConsolePresenter:
    """Prints every event to the terminal."""

    def __init__(self, show_hands: bool = True):
        self._show_hands = show_hands

    def notify(self, event: Event, payload: dict[str, Any]) -> None:
        if event == Event.TURN_STARTED:
            typer.echo(f"\n--- {payload['message']} ---")
            if self._show_hands:
                typer.echo(format_player_view(payload["view"]))
        elif event == Event.GAME_WON:
            typer.secho(payload["message"], bold=True)
        elif event == Event.INVALID_CHOICE:
            typer.echo(payload["message"], err=True)
        else:
            typer.echo(payload["message"])


class SilentPresenter:
    """Drops every event. The game history still records them."""

    def notify(self, event: Event, payload: dict[str, Any]) -> None:
        return None
