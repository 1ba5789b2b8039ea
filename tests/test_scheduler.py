import asyncio

from battherm.scheduling import SamplingScheduler, SamplingSettings
from battherm.session import BatterySession

from conftest import make_broadcast

FAST = SamplingSettings(live_interval_ms=1, snapshot_interval_ms=5)


def test_sampling_settings_defaults() -> None:
    settings = SamplingSettings()
    assert settings.live_interval == 1.0
    assert settings.snapshot_interval == 60.0


def test_scheduler_runs_both_ticks(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast(tenths=250, level=80))

    async def main() -> None:
        async with SamplingScheduler(session, FAST) as scheduler:
            assert scheduler.running
            await asyncio.sleep(0.1)
        assert not scheduler.running

    asyncio.run(main())

    assert session.elapsed_seconds > 0
    assert len(session.live) > 1
    assert len(session.snapshots) >= 1
    seconds = [p.second for p in session.snapshots]
    assert seconds == sorted(set(seconds))
    assert all(p.second <= session.elapsed_seconds for p in session.snapshots)


def test_clock_stays_put_without_temperature(session: BatterySession) -> None:
    async def main() -> None:
        async with SamplingScheduler(session, FAST):
            await asyncio.sleep(0.03)

    asyncio.run(main())

    assert session.elapsed_seconds == 0
    assert len(session.live) == 0
    assert len(session.snapshots) == 0


def test_start_and_stop_are_idempotent(session: BatterySession) -> None:
    scheduler = SamplingScheduler(session, FAST)

    async def main() -> None:
        await scheduler.stop()
        scheduler.start()
        tasks = list(scheduler._tasks)
        scheduler.start()
        assert scheduler._tasks == tasks
        await scheduler.stop()
        await scheduler.stop()

    asyncio.run(main())
    assert not scheduler.running


def test_ticks_after_stop_do_not_fire(session: BatterySession) -> None:
    session.on_broadcast(make_broadcast())
    scheduler = SamplingScheduler(session, FAST)

    async def main() -> int:
        scheduler.start()
        await asyncio.sleep(0.02)
        await scheduler.stop()
        stopped_at = session.elapsed_seconds
        await asyncio.sleep(0.02)
        return stopped_at

    stopped_at = asyncio.run(main())
    assert session.elapsed_seconds == stopped_at
