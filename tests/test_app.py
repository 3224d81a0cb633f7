import pygame
import pytest
from sc8pr.util import customEv
from hanoi8pr import Puzzle
from hanoi8pr.app import Hanoi, printState, play, main, parseArgs, USAGE


def test_print_state(capsys):
    printState(Puzzle(2), 0)
    printState(([3], [2], [1]), 12)
    out = capsys.readouterr().out.splitlines()
    assert out == ["       0: [2, 1] [] []", "      12: [3] [2] [1]"]


def test_console_play(capsys):
    p = play(2, speed=0)
    assert p.isSolved(2)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "       0: [2, 1] [] []",
        "       1: [2] [1] []",
        "       2: [] [1] [2]",
        "       3: [] [] [2, 1]"]


def test_main_console(capsys):
    assert main(["3", "0"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 8


def test_parse_args():
    assert parseArgs([]) == (3, 1.0, "")
    assert parseArgs(["5", "2.5", "out.gif"]) == (5, 2.5, "out.gif")
    assert parseArgs(["40", "0"]) == (40, 0, "")


@pytest.mark.parametrize("args", [["three"], ["0"], ["2.5"], ["3", "fast"],
    ["3", "-1"], ["3", "nan"], ["3", "9"], ["31"], ["3", "1", "a.gif", "x"]])
def test_main_rejects_bad_arguments(args, capsys):
    assert main(args) == 2
    err = capsys.readouterr().err
    assert err.startswith("hanoi8pr: ")
    assert USAGE in err


def click(app, gr):
    "Send a left click to the centre of a graphic"
    pos = gr.rect.center
    for t in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        app.evMgr.dispatch(pygame.event.Event(t, pos=pos, button=1))


def key(app, k, u=""):
    app.evMgr.dispatch(pygame.event.Event(pygame.KEYDOWN, key=k, unicode=u, mod=0))


def label(btn): return btn[-1].data


@pytest.fixture
def app(pg):
    sk = Hanoi(2, speed=5)
    sk.mouse = customEv(pos=(0, 0))
    sk.key = None
    sk.setup()
    sk.draw(pygame.Surface(sk.size))
    return sk


def test_controls_initial(app):
    assert app["Solve"].enabled
    assert not app["Pause"].enabled
    assert label(app["Pause"]) == "Pause"
    assert app["Status"].data == "Moves: 0 / 3"
    assert app["Level"].data == "2"
    assert app["Speed"].val == 5


def test_solve_button(app):
    click(app, app["Solve"])
    assert app.animator.isRunning
    assert not app["Solve"].enabled
    assert app["Pause"].enabled
    for i in range(1000):
        if not app.animator.isRunning: break
        app.ondraw(None)
    assert app.puzzle.isSolved(2)
    assert app["Status"].data == "Solved in 3 moves"
    assert not app["Pause"].enabled
    assert not app["Solve"].enabled


def test_pause_button(app):
    click(app, app["Solve"])
    app.ondraw(None)
    click(app, app["Pause"])
    assert app.animator.isPaused
    assert label(app["Pause"]) == "Play"
    click(app, app["Towers"])
    assert app.animator.isRunning
    assert label(app["Pause"]) == "Pause"


def test_disabled_button_ignores_clicks(app):
    click(app, app["Pause"])
    assert app.animator.isStopped
    assert label(app["Pause"]) == "Pause"


def test_reset_button(app):
    click(app, app["Solve"])
    app.ondraw(None)
    click(app, app["Reset"])
    assert app.animator.isStopped
    assert app.puzzle.state == ([2, 1], [], [])
    assert app["Solve"].enabled
    assert not app["Pause"].enabled


def test_reset_invalid_level(app):
    app["Level"].config(data="0")
    click(app, app["Reset"])
    assert app.puzzle.level == 2
    assert app["Level"].data == "2"
    assert app["Status"].data.startswith("Level must")


def test_type_level(app):
    click(app, app["Level"])
    assert app["Level"].focussed
    key(app, pygame.K_BACKSPACE, "\b")
    key(app, pygame.K_a, "a")
    key(app, pygame.K_4, "4")
    assert app["Level"].data == "4"
    key(app, pygame.K_RETURN, "\r")
    assert not app["Level"].focussed
    assert app.puzzle.level == 4
    assert app["Status"].data == "Moves: 0 / 15"


def test_speed_slider(app):
    slider = app["Speed"]
    r = slider.rect
    app.evMgr.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN,
        pos=(r.left + 1, r.centery), button=1))
    assert slider.val == 0
    assert app.animator.rate == 0
    assert app["SpeedLabel"].data == "Speed: 0.0x"


def test_frame_time(app):
    assert app.frameTime == pytest.approx(1 / app.frameRate)


def test_quit(app):
    app.evMgr.dispatch(pygame.event.Event(pygame.QUIT))
    assert app.quit
