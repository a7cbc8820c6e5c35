from attendance_dashboard.attendance.factory import AttendanceStrategyFactory
from attendance_dashboard.attendance.strategies.absent_strategy import AbsentStrategy
from attendance_dashboard.attendance.strategies.late_strategy import LateStrategy
from attendance_dashboard.attendance.strategies.normal_strategy import NormalStrategy
from attendance_dashboard.attendance.strategies.unclassified_strategy import UnclassifiedStrategy
from attendance_dashboard.shifts.model import Shift

MORNING = Shift(shift_code="SH1", shift_name="Morning", start_time="08:00", end_time="17:00", grace_period=5)


def test_factory_checkin_on_time_within_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(clock_in_time="08:05", shift=MORNING, tolerance_minutes=5)

    assert isinstance(strategy, NormalStrategy)


def test_factory_checkin_late_after_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(clock_in_time="08:06", shift=MORNING, tolerance_minutes=5)

    assert isinstance(strategy, LateStrategy)


def test_factory_without_shift_is_unclassified():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkin(clock_in_time="08:00", shift=None, tolerance_minutes=0), UnclassifiedStrategy)


def test_factory_missing_clock_in_is_absent():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkin(clock_in_time="", shift=MORNING, tolerance_minutes=5), AbsentStrategy)
    assert isinstance(factory.for_checkin(clock_in_time="-", shift=MORNING, tolerance_minutes=5), AbsentStrategy)


def test_late_strategy_notes_minutes_late():
    decision = LateStrategy().decide_checkin(clock_in_time="08:20", shift=MORNING, tolerance_minutes=5)

    assert decision.note == "20 min after 08:00"
