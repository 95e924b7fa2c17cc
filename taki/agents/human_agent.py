"""Human agent - reads decisions from the terminal."""

from typing import Optional

from taki.engine import Card

YES = ("y", "yes")
NO = ("n", "no")


class HumanAgent:
    """Agent that prompts the human for input via terminal.

    EOFError from a closed stdin is not caught here; the CLI handles it.
    """

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_number(self, prompt: str, min_value: int, max_value: int) -> int:
        print(f"\n{prompt}")
        while True:
            raw = input(f"Enter number ({min_value}-{max_value}): ").strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and min_value <= value <= max_value:
                return value
            print(f"Invalid. Please enter a number between {min_value} and {max_value}.")

    def choose_yes_no(self, prompt: str) -> bool:
        print(f"\n{prompt}")
        while True:
            raw = input("Please type 'yes' or 'no': ").strip().lower()
            if raw in YES:
                return True
            if raw in NO:
                return False
            print("Invalid input. Please type 'yes' or 'no'.")

    def choose_card(
        self,
        prompt: str,
        options: list[Card],
        allow_close: bool,
    ) -> Optional[int]:
        print(f"\n--- {prompt} ---")
        for i, card in enumerate(options):
            print(f"  {i}: {card}")
        close_index = len(options)
        if allow_close:
            print(f"  {close_index}: CLOSE")

        while True:
            raw = input("Enter number: ").strip()
            try:
                idx = int(raw)
            except ValueError:
                idx = -1
            if 0 <= idx < len(options):
                return idx
            if allow_close and idx == close_index:
                return None
            print("Invalid. Try again.")
