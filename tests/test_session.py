from battherm.common.enums import BatteryStatus
from battherm.history.buffers import LiveBuffer, SnapshotBuffer
from battherm.models.samples import LiveSample, SnapshotPoint
from battherm.sensors.broadcast import BatteryBroadcast
from battherm.session import BatterySession

from conftest import make_broadcast


def test_first_reading_seeds_live_buffer(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250))
    assert session.live.frozen() == (LiveSample(0, 25.0),)
    assert session.reading.temperature_c == 25.0


def test_later_readings_do_not_seed_again(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250))
    session.on_broadcast(make_broadcast(tenths=260))
    assert len(session.live) == 1
    assert session.reading.temperature_c == 26.0


def test_broadcast_parsing_updates_reading(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=312, level=3, scale=4, status=BatteryStatus.FULL))
    assert session.reading.battery_percent == 75.0
    assert session.reading.temperature_c == 31.2
    assert session.reading.is_charging is True


def test_absent_temperature_keeps_previous_value(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250))
    session.on_broadcast(BatteryBroadcast(level=50, scale=100))
    assert session.reading.temperature_c == 25.0
    assert session.reading.battery_percent == 50.0


def test_malformed_scale_is_absent_battery(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(level=50, scale=0))
    assert session.reading.battery_percent is None
    assert session.reading.temperature_c == 25.0


def test_live_tick_waits_for_temperature(session: BatterySession) -> None:
    assert session.live_tick() is None
    assert session.elapsed_seconds == 0

    session.on_broadcast(make_broadcast(tenths=300))
    assert session.live_tick() == LiveSample(1, 30.0)
    assert session.elapsed_seconds == 1


def test_61_ticks_after_seed(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250))
    for _ in range(61):
        session.live_tick()

    seconds = [s.second for s in session.live]
    assert seconds == list(range(1, 62))


def test_snapshot_tick_requires_temperature_and_battery(session: BatterySession) -> None:
    session.on_broadcast(BatteryBroadcast(level=80, scale=100))
    assert session.snapshot_tick() is None

    session.on_broadcast(make_broadcast(tenths=250, level=-1))
    assert session.snapshot_tick() is None
    assert len(session.snapshots) == 0

    session.on_broadcast(make_broadcast(tenths=250, level=80))
    assert session.snapshot_tick() == SnapshotPoint(0, 25.0, 80.0)


def test_snapshot_uses_shared_session_clock(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250, level=80))
    for _ in range(60):
        session.live_tick()
    point = session.snapshot_tick()
    assert point is not None and point.second == 60


def test_snapshot_tick_skips_when_clock_has_not_advanced(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250, level=80))
    session.live_tick()
    assert session.snapshot_tick() is not None
    assert session.snapshot_tick() is None
    assert len(session.snapshots) == 1


def test_injected_buffers_are_used() -> None:
    live = LiveBuffer(window_seconds=10)
    snapshots = SnapshotBuffer(capacity=2)
    session = BatterySession(live=live, snapshots=snapshots)
    assert session.live is live
    assert session.snapshots is snapshots

    session.on_broadcast(make_broadcast(tenths=250, level=80))
    for _ in range(3):
        for _ in range(20):
            session.live_tick()
        session.snapshot_tick()

    assert [s.second for s in session.live] == list(range(50, 61))
    assert [p.second for p in session.snapshots] == [40, 60]

    session.view.toggle()
    assert session.view.frozen_points == snapshots.frozen()
