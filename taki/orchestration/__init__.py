"""Game orchestration."""

from taki.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
