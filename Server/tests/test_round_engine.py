from lingo.models.game import GamePhase, LetterFeedback, Player


def exhaust_main_phase(engine, guess='SLATE'):
    engine.ready()
    for _ in range(engine.max_attempts):
        engine.submit_guess(guess)


def test_begin_lays_out_locked_board(make_engine, sink):
    engine = make_engine()
    assert sink.names() == ['setup_board', 'lock_input', 'update_round', 'update_scores', 'show_ready_phase']
    assert sink.last('setup_board') == (5, 5, 'C')
    assert sink.last('update_round') == (1, 5, 1)
    assert engine.phase is GamePhase.WAITING_FOR_READY
    assert not engine.can_type


def test_inputs_ignored_before_ready(make_engine):
    engine = make_engine()
    assert engine.submit_guess('CRANE') is None
    assert engine.skip() is False
    assert engine.add_letter('A') is False
    engine.advance(100)
    assert engine.attempts_used == 0
    assert engine.phase is GamePhase.WAITING_FOR_READY


def test_ready_starts_main_phase(make_engine, sink):
    engine = make_engine()
    assert engine.ready() is True
    assert engine.phase is GamePhase.WAITING_FOR_PLAYER_GUESS
    assert engine.current_player is Player.ONE
    assert engine.time_remaining == 30.0
    assert sink.last('set_active_row') == (0,)
    assert sink.last('show_main_phase') == (1, 1, 30.0)
    assert engine.ready() is False


def test_correct_first_guess_scores_150(make_engine, sink):
    engine = make_engine()
    engine.ready()
    results = engine.submit_guess('crane')

    assert [r.feedback for r in results] == [LetterFeedback.CORRECT] * 5
    assert engine.phase is GamePhase.ROUND_ENDED
    assert engine.scoreboard.totals() == (150, 0)
    assert engine.solved_by is Player.ONE
    assert sink.last('show_correct_word') == ('CRANE',)
    assert sink.last('update_scores') == (150, 0)
    assert engine.submit_guess('CRANE') is None


def test_solve_on_last_attempt_scores_110(make_engine):
    engine = make_engine()
    engine.ready()
    for _ in range(4):
        engine.skip()
    engine.submit_guess('CRANE')
    assert engine.scoreboard.totals() == (110, 0)


def test_invalid_guesses_do_not_consume_attempts(make_engine):
    engine = make_engine()
    engine.ready()
    for guess in ('CRAN', 'CRANES', '', None, 12345, '   '):
        assert engine.submit_guess(guess) is None
    assert engine.attempts_used == 0
    assert engine.history == []


def test_guess_is_trimmed_and_uppercased(make_engine):
    engine = make_engine()
    engine.ready()
    assert engine.submit_guess('  cRaNe ') is not None
    assert engine.phase is GamePhase.ROUND_ENDED


def test_wrong_guess_moves_to_next_row(make_engine, sink):
    engine = make_engine()
    engine.ready()
    engine.advance(0)
    engine.advance(10)
    assert engine.time_remaining == 20.0

    results = engine.submit_guess('SLATE')

    assert results is not None
    assert engine.attempts_used == 1
    assert engine.time_remaining == 30.0
    assert sink.last('show_guess_result')[0] == 0
    assert sink.last('set_active_row') == (1,)
    assert sink.last('show_main_phase') == (1, 2, 30.0)


def test_five_wrong_guesses_enter_steal_phase(make_engine, sink):
    engine = make_engine()
    engine.ready()
    for attempt in range(4):
        engine.submit_guess('SLATE')
        assert engine.phase is GamePhase.WAITING_FOR_PLAYER_GUESS

    engine.submit_guess('SLATE')

    assert engine.phase is GamePhase.WAITING_FOR_STEAL_GUESS
    assert engine.attempts_used == 5
    assert engine.current_player is Player.TWO
    assert engine.steal_row_index == 5
    assert sink.last('create_steal_row') == (5,)
    assert sink.last('show_steal_phase') == (2, 15.0)
    assert sink.count('set_active_row') == 5


def test_single_attempt_round_steals_after_one_miss(make_engine):
    engine = make_engine(max_attempts=1)
    engine.ready()
    engine.submit_guess('SLATE')
    assert engine.phase is GamePhase.WAITING_FOR_STEAL_GUESS


def test_timeout_counts_as_a_used_attempt(make_engine, sink):
    engine = make_engine()
    engine.ready()
    engine.advance(0)
    engine.advance(30)

    assert engine.attempts_used == 1
    assert engine.time_remaining == 30.0
    assert sink.last('set_active_row') == (1,)
    assert engine.history == []


def test_timer_expiry_fires_once(make_engine):
    engine = make_engine()
    engine.ready()
    engine.advance(0)
    engine.advance(31)
    assert engine.attempts_used == 1
    engine.advance(1)
    assert engine.attempts_used == 1
    assert engine.time_remaining == 29.0


def test_timer_updates_reach_status(make_engine, sink):
    engine = make_engine()
    engine.ready()
    engine.advance(0)
    engine.advance(1)
    assert sink.last('update_main_timer') == (1, 1, 29.0)


def test_guess_and_timeout_in_same_tick_use_one_attempt(make_engine):
    engine = make_engine()
    engine.ready()
    engine.advance(0)
    engine.advance(29.9)

    engine.submit_guess('SLATE')
    # this tick would have expired the old timer; the guess already moved on
    engine.advance(0.5)

    assert engine.attempts_used == 1
    assert engine.time_remaining == 30.0
    engine.advance(0.5)
    assert engine.time_remaining == 29.5


def test_ready_tick_does_not_run_timer(make_engine):
    engine = make_engine()
    engine.ready()
    engine.advance(5)
    assert engine.time_remaining == 30.0


def test_skip_consumes_attempt_without_feedback(make_engine, sink):
    engine = make_engine()
    engine.ready()
    assert engine.skip() is True
    assert engine.attempts_used == 1
    assert engine.history == []
    assert sink.count('show_guess_result') == 0


def test_successful_steal_scores_flat_100(make_engine, sink):
    engine = make_engine()
    engine.ready()
    for _ in range(5):
        engine.skip()
    assert engine.skip() is False

    engine.submit_guess('CRANE')

    assert engine.phase is GamePhase.ROUND_ENDED
    assert engine.scoreboard.totals() == (0, 100)
    assert engine.solved_by is Player.TWO
    assert sink.last('show_guess_result')[0] == 5
    assert engine.history[-1].steal is True


def test_failed_steal_ends_round_without_points(make_engine, sink):
    engine = make_engine()
    exhaust_main_phase(engine)

    engine.submit_guess('SLATE')

    assert engine.phase is GamePhase.ROUND_ENDED
    assert engine.scoreboard.totals() == (0, 0)
    assert engine.solved_by is None
    assert sink.last('show_correct_word') == ('CRANE',)
    assert engine.submit_guess('CRANE') is None
    assert engine.scoreboard.totals() == (0, 0)


def test_steal_timeout_ends_round(make_engine, sink):
    engine = make_engine()
    exhaust_main_phase(engine)
    results_shown = sink.count('show_guess_result')

    engine.advance(0)
    engine.advance(15)

    assert engine.phase is GamePhase.ROUND_ENDED
    assert sink.count('show_guess_result') == results_shown
    assert sink.last('show_correct_word') == ('CRANE',)
    assert sink.last('lock_input') == ()


def test_steal_with_second_player_starting(make_engine):
    engine = make_engine(starting_player=Player.TWO)
    exhaust_main_phase(engine)
    assert engine.current_player is Player.ONE
    engine.submit_guess('CRANE')
    assert engine.scoreboard.totals() == (100, 0)


def test_round_completion_waits_for_delay(make_engine):
    engine = make_engine()
    engine.ready()
    engine.submit_guess('CRANE')

    assert engine.completed == []
    engine.scheduler.advance(0.5)
    assert engine.completed == []
    engine.scheduler.advance(0.5)
    assert engine.completed == [engine]


def test_teardown_cancels_completion(make_engine):
    engine = make_engine()
    engine.ready()
    engine.submit_guess('CRANE')
    engine.teardown()
    engine.scheduler.advance(5)
    assert engine.completed == []


def test_typing_into_the_active_row(make_engine, sink):
    engine = make_engine()
    engine.ready()

    assert engine.add_letter('r')
    assert sink.last('show_row_letters') == (0, ['C', 'R'])
    assert engine.remove_letter()
    assert sink.last('show_row_letters') == (0, ['C'])
    assert engine.remove_letter() is False

    for letter in 'RANE':
        engine.add_letter(letter)
    assert engine.add_letter('S') is False
    assert engine.submit_current_row() is not None
    assert engine.phase is GamePhase.ROUND_ENDED


def test_partial_row_cannot_be_submitted(make_engine):
    engine = make_engine()
    engine.ready()
    engine.add_letter('R')
    assert engine.submit_current_row() is None
    assert engine.press_enter() is False
    assert engine.attempts_used == 0


def test_enter_means_ready_while_waiting(make_engine):
    engine = make_engine()
    assert engine.press_enter() is True
    assert engine.phase is GamePhase.WAITING_FOR_PLAYER_GUESS


def test_new_row_starts_from_locked_letter(make_engine):
    engine = make_engine()
    engine.ready()
    engine.add_letter('R')
    engine.add_letter('A')
    engine.submit_guess('SLATE')
    assert engine.active_row.row_index == 1
    assert engine.active_row.letters == ['C']


def test_snapshot_hides_word_until_round_ends(make_engine):
    engine = make_engine()
    engine.ready()
    engine.submit_guess('SLATE')
    state = engine.snapshot()
    assert state.target_word is None
    assert state.phase == 'waiting_for_player_guess'
    assert state.active_row == 1
    assert state.guess_results[0][:3] == (0, 1, 'SLATE')

    engine.submit_guess('CRANE')
    state = engine.snapshot()
    assert state.target_word == 'CRANE'
    assert state.time_remaining is None
    assert state.guess_results[1][3] == [(letter, 'CORRECT') for letter in 'CRANE']
