"""
Game Service

Hosts one match for the front end. HTTP and WebSocket handlers only queue
commands here; the tick loop applies them and advances the match clock, so
the match has a single writer.
"""

import time
from collections import deque
from typing import Callable, Deque, Optional, Tuple
from ..models.game import MatchState
from ..utils.game_logger import game_logger
from .match_controller import MatchController


class GameService:
    """
    Command inbox and tick driver for a single match.

    This class handles:
    - Queueing player inputs from any thread
    - Applying queued inputs in arrival order at the start of each tick
    - Advancing the match clock after the inputs
    """

    COMMANDS = (
        'ready', 'submit_guess', 'skip', 'type_letter', 'delete_letter',
        'submit_row', 'press_enter', 'reset'
    )

    def __init__(self, match: MatchController):
        self.match = match
        self._inbox: Deque[Tuple[str, tuple]] = deque()
        self._running = False

    def enqueue(self, command: str, *args) -> bool:
        """Queue an input command. Unknown commands are rejected."""
        if command not in self.COMMANDS:
            return False
        self._inbox.append((command, args))
        return True

    def pending_commands(self) -> int:
        return len(self._inbox)

    def pump(self) -> int:
        """Apply every queued command; returns how many were applied."""
        applied = 0
        while self._inbox:
            command, args = self._inbox.popleft()
            self._apply(command, args)
            applied += 1
        return applied

    def tick(self, elapsed_seconds: float) -> None:
        self.pump()
        self.match.advance(elapsed_seconds)

    def snapshot(self) -> MatchState:
        return self.match.snapshot()

    def _apply(self, command: str, args: tuple) -> None:
        handlers = {
            'ready': self.match.ready,
            'submit_guess': self.match.submit_guess,
            'skip': self.match.skip,
            'type_letter': self.match.add_letter,
            'delete_letter': self.match.remove_letter,
            'submit_row': self.match.submit_current_row,
            'press_enter': self.match.press_enter,
            'reset': self.match.reset,
        }
        result = handlers[command](*args)
        if command in ('type_letter', 'delete_letter'):
            return
        game_logger.log_game_event(
            'command_applied', source='service', command=command,
            accepted=command == 'reset' or bool(result),
            phase=self.match.phase.value
        )

    def run_tick_loop(self,
                      interval: float = 0.1,
                      sleep: Callable[[float], None] = time.sleep,
                      clock: Callable[[], float] = time.monotonic,
                      max_ticks: Optional[int] = None) -> None:
        """Drive the match until stop() is called (or max_ticks have run)."""
        self._running = True
        last = clock()
        ticks = 0
        game_logger.logger.info(f"Tick loop started (interval={interval}s)")

        while self._running:
            now = clock()
            try:
                self.tick(now - last)
            except Exception as e:
                game_logger.log_error(None, e, 'tick')
            last = now
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            sleep(interval)

        self._running = False
        game_logger.logger.info("Tick loop stopped")

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running
