import pytest

from asteroids.app import main, run
from asteroids.game import Game


class RecordingRenderer:
    def __init__(self, log, init_ok=True):
        self.log = log
        self.init_ok = init_ok

    def init(self):
        self.log.append("init")
        return self.init_ok

    def render(self):
        self.log.append("render")

    def exit(self):
        self.log.append("exit")


class RecordingController:
    def __init__(self, log, frames):
        self.log = log
        self.frames = frames
        self.tick_time = 1.0 / 60
        self.quit = False

    def do_user_interactions(self):
        self.log.append("interact")
        self.frames -= 1
        if self.frames <= 0:
            self.quit = True

    def do_game_events(self):
        self.log.append("events")

    def exit_game(self):
        return self.quit


class RecordingTimer:
    def __init__(self, log):
        self.log = log
        self.delays = []

    def reset(self):
        self.log.append("reset")

    def tick_and_delay(self, tick_time):
        self.log.append("delay")
        self.delays.append(tick_time)


def test_run_loops_until_controller_quits():
    log = []
    controller = RecordingController(log, frames=2)
    timer = RecordingTimer(log)
    status = run(Game(), RecordingRenderer(log), controller, timer)
    assert status == 0
    assert log == [
        "init",
        "reset", "render", "interact", "events", "delay",
        "reset", "render", "interact",
        "exit",
    ]
    assert timer.delays == [controller.tick_time]


def test_run_stops_when_renderer_cannot_start():
    log = []
    status = run(Game(), RecordingRenderer(log, init_ok=False), RecordingController(log, 3), RecordingTimer(log))
    assert status == 1
    assert log == ["init"]


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--sound-dir" in capsys.readouterr().out