# Copyright 2026 The hanoi8pr contributors
#
# This file is part of "hanoi8pr", an application built on "sc8pr"
# (Copyright 2015-2023 D.G. MacCarthy <https://dmaccarthy.github.io/sc8pr>).
#
# "hanoi8pr" is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# "hanoi8pr" is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with "hanoi8pr".  If not, see <http://www.gnu.org/licenses/>.

"""Animation of the Towers of Hanoi problem. Usage:

from hanoi8pr.app import play
play(disks=6, speed=1, record="")

Type a level and click 'Reset' to change the number of disks, then
click 'Solve'. The speed slider scales the animation rate from 0 to 5;
clicking the towers pauses or resumes the animation. Set the speed to
0 or None to print the moves to the console without opening a window.
Pass a .gif file name as 'record' to save the animation."""

import sys
from sc8pr import Sketch, TOP, LEFT, TOPLEFT
from sc8pr.text import Text
from sc8pr.gui.button import Button
from sc8pr.gui.slider import Slider
from hanoi8pr.textinput import LevelInput
from hanoi8pr.puzzle import Puzzle, checkLevel
from hanoi8pr.solver import solve, moveCount
from hanoi8pr.tower import Animator, TowerCanvas
from hanoi8pr.record import GifRecorder

TITLE = "Tower of Hanoi"
USAGE = "usage: python -m hanoi8pr [disks] [speed] [record.gif]"


def button(text, size=(75, 28)):
    "Create a Button with a text label"
    return Button(size).textIcon(Text(text).config(fontSize=16))

def setLabel(btn, text):
    "Change the label of a button created by 'button'"
    btn[-1].config(data=text)


class Hanoi(Sketch):
    "Window with the towers, a speed slider and the level / solve controls"
    towerSize = 880, 400
    maxLevel = 30
    dirtyRegions = None

    def __init__(self, level=3, speed=1, record=None, verbose=False):
        self.puzzle = Puzzle(level)
        self.animator = Animator(self.puzzle).setRate(speed)
        self.animator.onmove = self.onmove
        self.animator.onsolved = self.onsolved
        self.recorder = record
        self.verbose = verbose
        super().__init__((900, 540))

    @property
    def frameTime(self):
        "Seconds of animation represented by one frame"
        return (self.timeFactor if self.realTime else 1) / self.frameRate

    def setup(self):
        "Add the tower canvas and the controls below it"
        cx = self.center[0]
        self["Towers"] = TowerCanvas(self.towerSize, self.animator).config(
            anchor=TOP, pos=(cx, 10))

        # Speed slider
        y = self.towerSize[1] + 40
        self["SpeedLabel"] = Text(self._speedText()).config(anchor=LEFT,
            pos=(cx - 160, y), fontSize=18)
        self["Speed"] = Slider((200, 16), lower=0, upper=self.animator.maxRate,
            steps=50).config(anchor=LEFT, pos=(cx - 40, y), bg="#f0f0f0",
            val=self.animator.rate)

        # Level input and buttons
        y += 40
        x = cx - 215
        self["LevelLabel"] = lbl = Text("Level:").config(anchor=LEFT,
            pos=(x, y), fontSize=18)
        x += lbl.width + 5
        self["Level"] = ti = LevelInput(self.puzzle.level).config(anchor=LEFT, pos=(x, y))
        x += ti.width + 10
        for name in ("Reset", "Solve", "Pause"):
            self[name] = button(name).config(anchor=LEFT, pos=(x, y))
            x += 85
        self["Pause"].enabled = False

        # Status line
        self["Status"] = Text(" ").config(anchor=TOPLEFT, pos=(10, y + 30),
            fontSize=15, color="#404040")
        self.message()

    def _speedText(self):
        return "Speed: {:.1f}x".format(self.animator.rate)

    def message(self, msg=None):
        "Show a message, or the move count, in the status line"
        if msg is None:
            p = self.puzzle
            msg = "Moves: {} / {}".format(p.moves, moveCount(p.level))
        status = self["Status"]
        if status.data != msg: status.config(data=msg)

    def ondraw(self, ev=None):
        "Advance the animation by one frame and record it"
        a = self.animator
        if a.isRunning:
            a.step(self.frameTime)
            if a.isRunning: self.message()
        if self.recorder is not None: self.recorder.capture(self)

    def reset(self):
        "Apply the typed level and return the disks to the first pile"
        ti = self["Level"]
        n = ti.level
        a = self.animator
        if n is None or n > self.maxLevel:
            a.reset()
            ti.config(data=str(a.level))
            self.message("Level must be a whole number from 1 to {}".format(self.maxLevel))
        else:
            a.reset(n)
            self.message()
        self["Solve"].enabled = True
        pause = self["Pause"]
        setLabel(pause, "Pause")
        pause.enabled = False

    def togglePause(self):
        a = self.animator
        if a.isRunning:
            a.pause()
            setLabel(self["Pause"], "Play")
        elif a.isPaused:
            a.play()
            setLabel(self["Pause"], "Pause")

    def onaction(self, ev):
        "Handle button clicks and level input"
        gr = ev.target
        if gr is self["Solve"]:
            if self.animator.isStopped:
                self.animator.solve()
                self.message()
            gr.enabled = False
            self["Pause"].enabled = True
        elif gr is self["Reset"]:
            self.reset()
        elif gr is self["Level"]:
            if gr.level != self.puzzle.level: self.reset()
        elif gr is self["Pause"]:
            self.togglePause()

    def onchange(self, ev):
        "Change the animation rate when the slider moves"
        if ev.target is self["Speed"]:
            self.animator.setRate(ev.target.val)
            self["SpeedLabel"].config(data=self._speedText())

    def ontoggle(self, ev):
        if self["Pause"].enabled: self.togglePause()

    def onmove(self, puzzle):
        if self.verbose: printState(puzzle, puzzle.moves)

    def onsolved(self, puzzle):
        pause = self["Pause"]
        setLabel(pause, "Pause")
        pause.enabled = False
        self.message("Solved in {} moves".format(puzzle.moves))

    def onquit(self, ev):
        "Write the recording before quitting"
        self.quit = True
        rec = self.recorder
        if rec is not None and len(rec):
            print("Saving", rec.save(), file=sys.stderr)


def printState(towers, i):
    "Print the current state of the towers"
    if isinstance(towers, Puzzle): towers = towers.state
    print("{:8d}: {} {} {}".format(i, *towers))

def play(disks=3, speed=1, record="", verbose=False):
    "Run the program"
    if speed: # Play animation
        rec = GifRecorder(record) if record else None
        return Hanoi(disks, speed, rec, verbose).play(TITLE, mode=0)
    else:     # Console only; no animation
        puzzle = Puzzle(disks)
        printState(puzzle, 0)
        for p in solve(disks).apply(puzzle):
            printState(p, p.moves)
        return puzzle

def parseArgs(args):
    "Convert command line arguments to (disks, speed, record)"
    if len(args) > 3: raise ValueError("too many arguments")
    disks, speed, record = 3, 1.0, ""
    if args:
        try: disks = checkLevel(int(args[0]))
        except ValueError:
            raise ValueError("disks must be a positive whole number, not {!r}".format(args[0])) from None
    if len(args) > 1:
        try: speed = float(args[1])
        except ValueError: speed = None
        if speed is None or not 0 <= speed <= Animator.maxRate:
            raise ValueError("speed must be a number from 0 to {:g}, not {!r}".format(
                Animator.maxRate, args[1]))
    if len(args) > 2: record = args[2]
    if speed and disks > Hanoi.maxLevel:
        raise ValueError("the animation supports 1 to {} disks".format(Hanoi.maxLevel))
    return disks, speed, record

def main(args=None):
    "Command line entry point; return the exit status"
    if args is None: args = sys.argv[1:]
    try: disks, speed, record = parseArgs(args)
    except ValueError as e:
        print("hanoi8pr: {}\n{}".format(e, USAGE), file=sys.stderr)
        return 2
    play(disks, speed, record)
    return 0

if __name__ == "__main__": sys.exit(main())
