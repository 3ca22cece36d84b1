import pytest

from button_system import AnimationCategory, Button
from game_system import (
    AwaitInputState, GameConfig, GamePhase, OutOfRangeError, RoundOutcome, RoundTransitionPolicy, Score,
    ShowPatternState, TimingConfig,
)

from conftest import DT, run_until_phase


def play_round_perfectly(manager):
    """Wait for the input phase and press back the whole pattern in one frame"""
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    for button in manager.state.pattern.pattern:
        manager.queue_press(button)
    manager.step(DT)


def test_starts_in_show_pattern_with_one_entry(make_manager, presentation):
    manager = make_manager([Button.RED])

    assert manager.phase is GamePhase.SHOW_PATTERN
    assert isinstance(manager.current_state, ShowPatternState)
    assert manager.state.pattern.pattern == [Button.RED]
    assert manager.score == Score(0, 0)
    assert presentation.scores == [Score(0, 0)]


def test_scenario_reveal_then_complete(make_manager, presentation, sound):
    manager = make_manager([Button.RED, Button.GREEN])

    # Four frames to the first reveal tick
    for _ in range(4):
        manager.step(DT)
    assert presentation.transitions == [(Button.RED, AnimationCategory.LIT)]
    assert manager.phase is GamePhase.SHOW_PATTERN

    # The next reveal tick finds the pattern exhausted
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    assert manager.state.pattern.progress == 0

    manager.queue_press(Button.RED)
    manager.step(DT)

    assert manager.last_outcome is RoundOutcome.COMPLETE
    assert manager.score == Score(current=1, high=1)
    assert manager.phase is GamePhase.SHOW_PATTERN
    assert manager.state.pattern.pattern == [Button.RED, Button.GREEN]
    assert presentation.scores[-1] == Score(1, 1)
    assert sound.played == [
        (Button.RED, AnimationCategory.LIT),
        (Button.RED, AnimationCategory.PRESSED),
    ]


def test_scenario_continue_then_mistake(make_manager):
    manager = make_manager([Button.RED, Button.GREEN])
    play_round_perfectly(manager)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    assert manager.state.pattern.pattern == [Button.RED, Button.GREEN]

    manager.queue_press(Button.RED)
    manager.step(DT)
    assert manager.last_outcome is RoundOutcome.CONTINUE
    assert manager.state.pattern.progress == 1
    assert manager.phase is GamePhase.AWAIT_INPUT

    manager.queue_press(Button.BLUE)
    manager.step(DT)
    assert manager.last_outcome is RoundOutcome.MISTAKE
    assert manager.score == Score(current=0, high=1)
    assert manager.phase is GamePhase.SHOW_PATTERN
    # A brand new pattern was started
    assert len(manager.state.pattern) == 1


def test_mistake_clears_pattern_before_next_round(make_manager):
    manager = make_manager([Button.RED, Button.GREEN])
    play_round_perfectly(manager)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)

    next_state = manager.current_state.update(0.0, [Button.YELLOW])

    assert isinstance(next_state, ShowPatternState)
    assert len(manager.state.pattern) == 0
    assert manager.state.pattern.progress == 0
    assert manager.score.current == 0


def test_mistake_resets_regardless_of_pattern_length(make_manager):
    for rounds_won in range(5):
        manager = make_manager([Button.GREEN] * 10)
        for _ in range(rounds_won):
            play_round_perfectly(manager)
        run_until_phase(manager, GamePhase.AWAIT_INPUT)
        assert len(manager.state.pattern) == rounds_won + 1

        manager.current_state.update(0.0, [Button.RED])

        assert len(manager.state.pattern) == 0
        assert manager.score.current == 0
        assert manager.score.high == rounds_won


def test_scenario_single_entry_completes(make_manager):
    manager = make_manager([Button.RED, Button.BLUE])
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    assert manager.state.pattern.pattern == [Button.RED]

    manager.queue_press(Button.RED)
    manager.step(DT)

    assert manager.last_outcome is RoundOutcome.COMPLETE
    assert manager.score.current == 1
    assert len(manager.state.pattern) == 2


def test_presses_during_show_pattern_are_ignored(make_manager, sound):
    manager = make_manager([Button.RED])

    manager.queue_press(Button.RED)
    manager.queue_press(Button.GREEN)
    manager.step(DT)

    assert manager.phase is GamePhase.SHOW_PATTERN
    assert manager.last_outcome is None
    assert manager.state.animator.is_idle()
    assert sound.played == []
    assert manager.state.pattern.progress == 0


def test_presses_queued_after_round_end_are_dropped(make_manager):
    manager = make_manager([Button.RED, Button.GREEN])
    run_until_phase(manager, GamePhase.AWAIT_INPUT)

    manager.queue_press(Button.RED)     # completes the round
    manager.queue_press(Button.YELLOW)  # would be a mistake in the next round
    manager.step(DT)

    assert manager.score == Score(1, 1)
    assert manager.state.pattern.pattern == [Button.RED, Button.GREEN]


def test_await_input_never_entered_with_empty_pattern(make_manager):
    manager = make_manager()
    for _ in range(30):
        steps = run_until_phase(manager, GamePhase.AWAIT_INPUT)
        assert steps > 0
        assert isinstance(manager.current_state, AwaitInputState)
        assert len(manager.state.pattern) > 0
        # Alternate between losing and winning rounds
        if len(manager.state.pattern) % 3 == 0:
            manager.queue_press(Button.YELLOW if manager.state.pattern.current() is not Button.YELLOW
                                else Button.RED)
            manager.step(DT)
        else:
            for button in manager.state.pattern.pattern:
                manager.queue_press(button)
            manager.step(DT)


def test_perfect_play_grows_pattern_and_score(make_manager):
    manager = make_manager()
    for round_number in range(1, 11):
        play_round_perfectly(manager)
        assert manager.score == Score(round_number, round_number)
        assert len(manager.state.pattern) == round_number + 1


def test_timeout_applies_before_press_in_same_frame(make_manager, presentation):
    manager = make_manager([Button.RED, Button.RED])
    play_round_perfectly(manager)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    presentation.transitions.clear()

    manager.queue_press(Button.RED)
    manager.step(DT)              # pressed, 0.5s left
    manager.step(DT)              # 0.25s left
    manager.queue_press(Button.RED)
    manager.step(DT)              # timer hits zero, then the press restarts it

    assert manager.last_outcome is RoundOutcome.COMPLETE
    assert manager.state.animator.category_of(Button.RED) is AnimationCategory.PRESSED
    assert presentation.transitions == [(Button.RED, AnimationCategory.PRESSED)]


def test_overwrite_policy_lets_reveal_interrupt_press(make_manager, presentation):
    slow_press = GameConfig(timing=TimingConfig(press_duration_s=2.0),
                            round_transition_policy=RoundTransitionPolicy.OVERWRITE)
    manager = make_manager([Button.RED, Button.RED], game_config=slow_press)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    presentation.transitions.clear()

    manager.queue_press(Button.RED)
    manager.step(DT)
    for _ in range(4):
        manager.step(DT)

    assert presentation.transitions == [
        (Button.RED, AnimationCategory.PRESSED),
        (Button.RED, AnimationCategory.LIT),
    ]


def test_wait_policy_holds_reveal_until_press_finishes(make_manager, presentation):
    slow_press = GameConfig(timing=TimingConfig(press_duration_s=2.0),
                            round_transition_policy=RoundTransitionPolicy.WAIT_FOR_ANIMATIONS)
    manager = make_manager([Button.RED, Button.RED], game_config=slow_press)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    presentation.transitions.clear()

    manager.queue_press(Button.RED)
    manager.step(DT)
    while (Button.RED, AnimationCategory.LIT) not in presentation.transitions:
        manager.step(DT)

    assert presentation.transitions == [
        (Button.RED, AnimationCategory.PRESSED),
        (Button.RED, AnimationCategory.INACTIVE),
        (Button.RED, AnimationCategory.LIT),
    ]


def test_reset_starts_new_game_and_keeps_high_score(make_manager, presentation):
    manager = make_manager([Button.RED, Button.GREEN, Button.BLUE])
    play_round_perfectly(manager)
    run_until_phase(manager, GamePhase.AWAIT_INPUT)
    manager.queue_press(Button.RED)

    manager.reset()

    assert manager.phase is GamePhase.SHOW_PATTERN
    assert manager.state.pattern.pattern == [Button.BLUE]
    assert manager.score == Score(current=0, high=1)
    assert manager.last_outcome is None

    manager.step(DT)
    assert manager.state.animator.is_idle()
    assert presentation.scores[-1] == Score(0, 1)


def test_await_input_rejects_empty_pattern(make_manager):
    manager = make_manager()
    manager.state.pattern.clear()

    with pytest.raises(OutOfRangeError):
        AwaitInputState(manager).on_enter()
