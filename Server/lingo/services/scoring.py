"""Round scoring rules."""

from ..config.game_settings import ATTEMPT_BONUS, BASE_SCORE


def calculate_score(attempts_used: int,
                    solved_by_main_player: bool,
                    max_attempts: int,
                    base_score: int = BASE_SCORE,
                    attempt_bonus: int = ATTEMPT_BONUS) -> int:
    """Points for a correct guess.

    The main player earns a bonus for every attempt left unused; a steal
    earns the flat base score.
    """
    if solved_by_main_player:
        return base_score + max(0, (max_attempts - attempts_used) * attempt_bonus)
    return base_score
