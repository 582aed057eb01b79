"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm used by every round.
"""

from typing import List, Optional, Sequence
from ..models.game import LetterFeedback, LetterResult


def evaluate_guess(target: str, guess: str) -> List[LetterResult]:
    """
    Compare a guess against the target word letter by letter.

    Exact matches are resolved first. Remaining guess letters then claim the
    leftmost unconsumed target position holding the same letter, so each
    target letter satisfies at most one guess letter.

    Callers must pass strings of equal length.
    """
    length = len(target)
    consumed = [False] * length
    feedback: List[Optional[LetterFeedback]] = [None] * length

    # First pass: exact position matches
    for i in range(length):
        if guess[i] == target[i]:
            feedback[i] = LetterFeedback.CORRECT
            consumed[i] = True

    # Second pass: letters present elsewhere
    for i in range(length):
        if feedback[i] is LetterFeedback.CORRECT:
            continue

        feedback[i] = LetterFeedback.ABSENT
        for j in range(length):
            if not consumed[j] and guess[i] == target[j]:
                consumed[j] = True
                feedback[i] = LetterFeedback.PRESENT
                break

    return [LetterResult(letter, status) for letter, status in zip(guess, feedback)]


def is_all_correct(results: Optional[Sequence[LetterResult]]) -> bool:
    """True iff there is at least one result and every letter is CORRECT."""
    if not results:
        return False
    return all(result.feedback is LetterFeedback.CORRECT for result in results)
