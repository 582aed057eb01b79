"""
Word Bank Service

Supplies a random target word of a requested length.
"""

import random
from typing import Dict, List, Optional
from ..config.game_settings import load_word_list, placeholder_word
from ..utils.game_logger import game_logger


class WordBank:
    """
    Word source keyed by word length.

    Never fails a round: when no word of the requested length is available,
    a deterministic placeholder of that length is returned instead.
    """

    def __init__(self, words_by_length: Optional[Dict[int, List[str]]] = None,
                 rng: Optional[random.Random] = None):
        self.words_by_length: Dict[int, List[str]] = {
            length: [word.upper() for word in words]
            for length, words in (words_by_length or {}).items()
        }
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Optional[str] = None, rng: Optional[random.Random] = None) -> "WordBank":
        return cls(load_word_list(path), rng=rng)

    def available_lengths(self) -> List[int]:
        return sorted(length for length, words in self.words_by_length.items() if words)

    def get_word_by_length(self, length: int) -> str:
        words = self.words_by_length.get(length)
        if not words:
            game_logger.logger.warning(f"No {length}-letter words available, using placeholder")
            return placeholder_word(length)
        return self.rng.choice(words)
