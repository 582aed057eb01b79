"""
Attempt Row Model

Letter-entry buffer for the row a player is currently typing into.
The first letter of the target is pre-filled and cannot be edited.
"""

from typing import List


class AttemptRow:
    """Letters typed into one board row, bounded by the word length."""

    def __init__(self, row_index: int, word_length: int, first_letter: str):
        self.row_index = row_index
        self.word_length = max(1, word_length)
        self.first_letter = first_letter.upper()
        self._letters: List[str] = [self.first_letter]

    @property
    def letters(self) -> List[str]:
        return list(self._letters)

    @property
    def locked_prefix(self) -> int:
        return 1

    def is_full(self) -> bool:
        return len(self._letters) == self.word_length

    def add_letter(self, letter: str) -> bool:
        if not letter or len(letter) != 1 or not letter.isalpha():
            return False
        if self.is_full():
            return False
        self._letters.append(letter.upper())
        return True

    def remove_letter(self) -> bool:
        if len(self._letters) <= self.locked_prefix:
            return False
        self._letters.pop()
        return True

    def clear(self) -> None:
        self._letters = [self.first_letter]

    def text(self) -> str:
        return "".join(self._letters)
