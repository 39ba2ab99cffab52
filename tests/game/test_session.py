"""Tests for HuntSession — the click-order collaborator."""

from __future__ import annotations

import random

import pytest

from gombaszedo.core.enums import PieceRule
from gombaszedo.core.move_rules import legal_moves
from gombaszedo.core.path_generator import (
    FailureReason,
    GenerationFailure,
    GenerationResult,
    InvalidTargetLength,
    PathGenerator,
)
from gombaszedo.core.types import A1, A4, D4, H1, H4, H8
from gombaszedo.game.interfaces import ClickOutcome, HuntPhase
from gombaszedo.game.session import HuntSession

ROOK_PATH = (A1, H1, H8, H4, A4, D4)


class _FixedGenerator:
    """Returns a canned result and records the requested lengths."""

    board_size = 8

    def __init__(self, result: GenerationResult) -> None:
        self._result = result
        self.requests: list[tuple[PieceRule, int]] = []

    def generate(self, rule: PieceRule, target_length: int) -> GenerationResult:
        self.requests.append((rule, target_length))
        return self._result


def _session(result: GenerationResult = ROOK_PATH[:5]) -> HuntSession:
    return HuntSession(_FixedGenerator(result))  # type: ignore[arg-type]


class TestNewGame:
    def test_successful_board(self) -> None:
        session = _session()
        assert session.new_game(PieceRule.ROOK, 5)
        assert session.phase == HuntPhase.PLAYING
        assert session.sequence == ROOK_PATH[:5]
        assert session.progress == 0
        assert session.remaining == 5
        assert session.expected_square == A1
        assert session.mushrooms == frozenset(ROOK_PATH[:5])
        assert session.mover_square is None

    def test_requests_mushroom_count(self) -> None:
        gen = _FixedGenerator(ROOK_PATH[:3])
        session = HuntSession(gen)  # type: ignore[arg-type]
        session.new_game(PieceRule.KNIGHT, 3)
        assert gen.requests == [(PieceRule.KNIGHT, 3)]

    def test_generation_failure(self) -> None:
        session = _session(GenerationFailure(FailureReason.EXHAUSTED, 300, 900))
        assert not session.new_game(PieceRule.BISHOP, 5)
        assert session.phase == HuntPhase.GENERATION_FAILED
        assert session.sequence == ()
        assert session.click(A1) == ClickOutcome.NO_GAME

    def test_failure_clears_previous_board(self) -> None:
        gen = _FixedGenerator(ROOK_PATH[:5])
        session = HuntSession(gen)  # type: ignore[arg-type]
        session.new_game(PieceRule.ROOK, 5)
        gen._result = GenerationFailure(FailureReason.EXHAUSTED, 1, 1)
        session.new_game(PieceRule.ROOK, 5)
        assert session.mushrooms == frozenset()

    def test_count_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            _session().new_game(PieceRule.ROOK, 0)

    def test_count_must_fit_board(self) -> None:
        session = _session()
        with pytest.raises(InvalidTargetLength):
            session.new_game(PieceRule.QUEEN, 63, with_mover=True)
        assert session.phase == HuntPhase.NOT_STARTED

    def test_wrong_length_result_rejected(self) -> None:
        session = _session(ROOK_PATH[:2])
        with pytest.raises(ValueError):
            session.new_game(PieceRule.ROOK, 5)

    def test_load_without_prepare(self) -> None:
        with pytest.raises(RuntimeError):
            _session().load_result(ROOK_PATH)


class TestClicks:
    def test_collect_in_order(self) -> None:
        session = _session()
        session.new_game(PieceRule.ROOK, 5)
        outcomes = [session.click(sq) for sq in ROOK_PATH[:5]]
        assert outcomes == [ClickOutcome.CORRECT] * 4 + [ClickOutcome.COMPLETED]
        assert session.phase == HuntPhase.WON
        assert session.remaining == 0
        assert session.expected_square is None

    def test_wrong_order_keeps_progress(self) -> None:
        session = _session()
        session.new_game(PieceRule.ROOK, 5)
        assert session.click(H1) == ClickOutcome.WRONG_ORDER
        assert session.progress == 0
        assert session.index_of(H1) == 1

    def test_empty_square(self) -> None:
        session = _session()
        session.new_game(PieceRule.ROOK, 5)
        assert session.click(D4) == ClickOutcome.NOT_A_MUSHROOM
        assert session.progress == 0

    def test_collected_square_is_no_longer_a_mushroom(self) -> None:
        session = _session()
        session.new_game(PieceRule.ROOK, 5)
        session.click(A1)
        assert session.click(A1) == ClickOutcome.NOT_A_MUSHROOM
        assert session.index_of(A1) is None
        assert session.progress == 1

    def test_no_game_before_start(self) -> None:
        assert _session().click(A1) == ClickOutcome.NO_GAME

    def test_clicks_after_win_are_ignored(self) -> None:
        session = _session()
        session.new_game(PieceRule.ROOK, 5)
        for sq in ROOK_PATH[:5]:
            session.click(sq)
        assert session.click(A1) == ClickOutcome.NO_GAME


class TestMover:
    def test_mover_split(self) -> None:
        gen = _FixedGenerator(ROOK_PATH)
        session = HuntSession(gen)  # type: ignore[arg-type]
        assert session.new_game(PieceRule.ROOK, 5, with_mover=True)
        assert gen.requests == [(PieceRule.ROOK, 6)]
        assert session.mover_square == A1
        assert session.sequence == ROOK_PATH[1:]
        assert A1 not in session.mushrooms

    def test_mover_follows_collection(self) -> None:
        session = _session(ROOK_PATH)
        session.new_game(PieceRule.ROOK, 5, with_mover=True)
        session.click(H1)
        assert session.mover_square == H1
        assert session.click(A1) == ClickOutcome.NOT_A_MUSHROOM
        assert session.mover_square == H1


class TestEvents:
    def test_events_fire(self) -> None:
        session = _session()
        phases: list[HuntPhase] = []
        collected: list[tuple[int, int]] = []
        mistakes: list[ClickOutcome] = []
        wins: list[bool] = []
        session.events.on_phase_changed.append(phases.append)
        session.events.on_collected.append(lambda sq, n: collected.append((sq, n)))
        session.events.on_mistake.append(lambda sq, outcome: mistakes.append(outcome))
        session.events.on_won.append(lambda: wins.append(True))

        session.new_game(PieceRule.ROOK, 5)
        session.click(D4)
        for sq in ROOK_PATH[:5]:
            session.click(sq)

        assert phases == [HuntPhase.GENERATING, HuntPhase.PLAYING, HuntPhase.WON]
        assert collected == [(sq, i + 1) for i, sq in enumerate(ROOK_PATH[:5])]
        assert mistakes == [ClickOutcome.NOT_A_MUSHROOM]
        assert wins == [True]


class TestWithRealGenerator:
    @pytest.mark.parametrize("rule", list(PieceRule))
    def test_full_game(self, rule: PieceRule) -> None:
        session = HuntSession(PathGenerator(rng=random.Random(17)))
        assert session.new_game(rule, 5, with_mover=True)

        mover = session.mover_square
        assert mover is not None
        assert session.sequence[0] in legal_moves(mover, rule)
        for sq in session.sequence:
            assert session.expected_square == sq
            assert session.click(sq).is_correct
        assert session.phase == HuntPhase.WON
