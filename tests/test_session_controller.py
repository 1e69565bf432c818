from chrono_tui.session_controller import SessionController
from chrono_tui.session_log import SessionLog
from chrono_tui.shared import Command

def test_begin_starts_running(engine, clock):
    controller = SessionController(engine)
    controller.begin()
    clock.advance(2)
    snap = controller.snapshot()
    assert snap.running
    assert not snap.paused
    assert snap.displayString == '00:00:02.000'
    assert snap.laps == []

def test_quit_stops_loop_without_touching_engine(engine, clock):
    controller = SessionController(engine)
    controller.begin()
    clock.advance(1)
    assert controller.dispatch(Command.Quit) is False
    assert engine.running
    assert controller.dispatch(Command.Lap) is True

def test_toggle_pauses_then_resumes(engine, clock):
    controller = SessionController(engine)
    controller.begin()
    clock.advance(1)
    controller.dispatch(Command.TogglePauseResume)
    assert controller.snapshot().paused
    clock.advance(5)
    assert controller.snapshot().displayString == '00:00:01.000'
    controller.dispatch(Command.TogglePauseResume)
    assert not controller.snapshot().paused
    clock.advance(0.5)
    assert controller.snapshot().displayString == '00:00:01.500'

def test_snapshot_lap_rows_carry_deltas(engine, clock):
    controller = SessionController(engine)
    controller.begin()
    for step in (0.5, 0.75, 0.25):
        clock.advance(step)
        controller.dispatch(Command.Lap)
    rows = controller.snapshot().laps
    assert [r.time for r in rows] == [
        '00:00:00.500', '00:00:01.250', '00:00:01.500',
    ]
    assert [r.delta for r in rows] == [
        None, '00:00:00.750', '00:00:00.250',
    ]
    assert rows[1].render(1) == 'Lap 2: 00:00:01.250  (+00:00:00.750)'

def test_reset_clears_laps(engine, clock):
    controller = SessionController(engine)
    controller.begin()
    clock.advance(1)
    controller.dispatch(Command.Lap)
    controller.dispatch(Command.TogglePauseResume)
    controller.dispatch(Command.Reset)
    snap = controller.snapshot()
    assert snap.laps == []
    assert not snap.paused
    assert snap.displayString == '00:00:00.000'

def test_events_are_mirrored_to_log(engine, clock, wall, tmp_path):
    sessionLog = SessionLog(tmp_path, started_at=wall())
    controller = SessionController(engine, sessionLog, wallClock=wall)
    with sessionLog.Context():
        controller.begin()
        clock.advance(1.5)
        wall.advance(1.5)
        controller.dispatch(Command.Lap)
        controller.dispatch(Command.TogglePauseResume)
        controller.dispatch(Command.Reset)
        controller.dispatch(Command.Quit)
    lines = sessionLog.path.read_text(encoding='utf-8').splitlines()
    assert lines == [
        '[2025-03-14 09:26:53] Session Started',
        'Lap 1 at: 2025-03-14 09:26:54 - Time: 00:00:01.500',
        'Reset at: 2025-03-14 09:26:54',
    ]

def test_lap_before_start_is_not_logged(engine, wall, tmp_path):
    sessionLog = SessionLog(tmp_path, started_at=wall())
    controller = SessionController(engine, sessionLog, wallClock=wall)
    with sessionLog.Context():
        controller.dispatch(Command.Lap)
    assert sessionLog.path.read_text(encoding='utf-8') == ''

def test_broken_log_does_not_stop_controller(engine, clock, wall, tmp_path):
    blocker = tmp_path / 'not_a_dir'
    blocker.write_text('x', encoding='utf-8')
    sessionLog = SessionLog(blocker, started_at=wall())
    controller = SessionController(engine, sessionLog, wallClock=wall)
    with sessionLog.Context():
        assert not sessionLog.is_open
        controller.begin()
        clock.advance(1)
        assert controller.dispatch(Command.Lap)
        assert controller.dispatch(Command.Reset)
    assert controller.snapshot().laps == []
