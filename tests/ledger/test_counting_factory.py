from src.attendance_ledger.attendance_ledger.core.enums import CountingPolicy, MarkerMode
from src.attendance_ledger.attendance_ledger.ledger.counting.factory import CountingStrategyFactory
from src.attendance_ledger.attendance_ledger.ledger.counting.non_empty_strategy import NonEmptyCounting
from src.attendance_ledger.attendance_ledger.ledger.counting.present_only_strategy import PresentOnlyCounting
from src.attendance_ledger.attendance_ledger.sheets.model import Cell


def test_time_mode_counts_any_marker():
    strategy = CountingStrategyFactory().for_mode(MarkerMode.TIME)

    assert isinstance(strategy, NonEmptyCounting)
    assert strategy.counts(Cell.of("09:15:30"))
    assert not strategy.counts(Cell.empty())


def test_status_mode_counts_present_only():
    strategy = CountingStrategyFactory().for_mode(MarkerMode.STATUS)

    assert isinstance(strategy, PresentOnlyCounting)
    assert strategy.counts(Cell.of(" Present "))
    assert not strategy.counts(Cell.of("absent"))
    assert not strategy.counts(Cell.of("09:15:30"))


def test_explicit_policy_overrides_mode():
    strategy = CountingStrategyFactory(policy=CountingPolicy.NON_EMPTY).for_mode(MarkerMode.STATUS)

    assert isinstance(strategy, NonEmptyCounting)
