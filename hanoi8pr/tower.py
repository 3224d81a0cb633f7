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

"""Animation of a Puzzle being solved. The Animator feeds moves from a
Solution to the Puzzle one at a time and tracks the disk in flight;
TowerCanvas redraws the piles from the puzzle state every frame.

Each move is animated in three legs (up, across, down) of 'legTime'
seconds each at rate 1. The puzzle is updated when the disk lifts, so
stopping part way through leaves it in a legal state."""

import pygame
from sc8pr import Canvas
from sc8pr.util import rgba
from hanoi8pr.puzzle import checkLevel
from hanoi8pr.solver import solve

STOPPED = "stopped"
RUNNING = "running"
PAUSED = "paused"

def lerp(p1, p2, f):
    "Point a fraction f of the way from p1 to p2"
    return p1[0] + f * (p2[0] - p1[0]), p1[1] + f * (p2[1] - p1[1])


class Layout:
    "Geometry of the bases, poles and disks for a given level"
    diskWidth = 30
    diskHeight = 25

    def __init__(self, level, diskWidth=None, diskHeight=None, offset=(0,0)):
        self.level = level
        if diskWidth is not None: self.diskWidth = diskWidth
        if diskHeight is not None: self.diskHeight = diskHeight
        self.offset = offset

    def __repr__(self):
        return "<Layout level={} disk={:.1f}x{:.1f}>".format(self.level,
            self.diskWidth, self.diskHeight)

    @property
    def baseWidth(self): return (self.level + 1) * self.diskWidth

    @property
    def baseHeight(self): return self.diskHeight * 2 / 3

    @property
    def poleHeight(self): return (self.level + 1) * self.diskHeight

    @property
    def padding(self): return self.baseWidth / 2

    @property
    def gap(self): return 1.5 * self.baseWidth

    @property
    def size(self):
        "Width and height needed to draw the three towers"
        b = self.baseWidth
        return 5 * b, self.padding * 1.5 + self.poleHeight + self.baseHeight

    def fit(self, size):
        "Return a Layout scaled down (if necessary) and centred within size"
        w, h = self.size
        f = min(1, size[0] / w, size[1] / h)
        layout = Layout(self.level, f * self.diskWidth, f * self.diskHeight)
        w, h = layout.size
        layout.offset = (size[0] - w) / 2, (size[1] - h) / 2
        return layout

    def poleX(self, pile):
        return self.offset[0] + pile * self.gap + self.baseWidth

    @property
    def poleTop(self): return self.offset[1] + self.padding

    @property
    def poleBottom(self): return self.poleTop + self.poleHeight

    @property
    def liftY(self):
        "Height of the disk centre as it moves between poles"
        return self.poleTop - self.diskHeight / 2

    def baseRect(self, pile):
        b = self.baseWidth
        return pygame.Rect(self.poleX(pile) - b / 2, self.poleBottom, b, self.baseHeight)

    def slot(self, pile, i):
        "Centre of the i-th disk from the bottom of a pile"
        return self.poleX(pile), self.poleBottom - (i + 0.5) * self.diskHeight

    def diskRect(self, size, center):
        w = size * self.diskWidth
        h = self.diskHeight
        return pygame.Rect(center[0] - w / 2, center[1] - h / 2, w, h)


class MoveAnimation:
    "The path of one disk from its old slot to its new one"
    legTime = 0.5

    def __init__(self, disk, source, destination, fromSlot, toSlot):
        self.disk = disk
        self.source = source
        self.destination = destination
        self.fromSlot = fromSlot
        self.toSlot = toSlot
        self.time = 0

    @property
    def duration(self): return 3 * self.legTime

    @property
    def done(self): return self.time >= self.duration

    def advance(self, t):
        "Advance the animation; return the unused portion of t"
        used = min(t, self.duration - self.time)
        self.time += used
        return t - used

    def finish(self): self.time = self.duration

    def path(self, layout):
        "Corner points of the path: slot, above source, above destination, slot"
        y = layout.liftY
        return (layout.slot(self.source, self.fromSlot),
            (layout.poleX(self.source), y), (layout.poleX(self.destination), y),
            layout.slot(self.destination, self.toSlot))

    def pos(self, layout):
        "Current centre of the disk"
        pts = self.path(layout)
        leg = min(int(self.time / self.legTime), 2)
        f = min(1, self.time / self.legTime - leg)
        return lerp(pts[leg], pts[leg + 1], f)


class Animator:
    """Play, pause and stop the solution of a puzzle. Call 'step' with
    the elapsed time to advance the animation."""
    rate = 1.0
    maxRate = 5.0
    onmove = None
    onsolved = None

    def __init__(self, puzzle, target=2):
        if target not in (1, 2):
            raise ValueError("Target pile must be 1 or 2; not {}".format(target))
        self.puzzle = puzzle
        self.target = target
        self.status = STOPPED
        self.current = None
        self._moves = None

    @property
    def isRunning(self): return self.status == RUNNING

    @property
    def isPaused(self): return self.status == PAUSED

    @property
    def isStopped(self): return self.status == STOPPED

    @property
    def level(self): return self.puzzle.level

    @property
    def solved(self): return self.puzzle.isSolved(self.target)

    def setRate(self, rate):
        self.rate = max(0, min(self.maxRate, rate))
        return self

    def solve(self):
        "Start animating the solution from the initial state"
        if self.status == STOPPED:
            p = self.puzzle
            if p.moves: p.initialize(p.level)
            t = self.target
            self._moves = iter(solve(p.level, 0, t, 3 - t))  # disks start on pile 0
            self.current = None
            self.status = RUNNING
        return self

    def pause(self):
        if self.status == RUNNING: self.status = PAUSED
        return self

    def play(self):
        if self.status == PAUSED: self.status = RUNNING
        return self

    def toggle(self):
        "Pause if running; resume if paused"
        return self.pause() if self.status == RUNNING else self.play()

    def stop(self):
        "Stop the animation; the disk in flight lands on its new pile"
        self.status = STOPPED
        self._moves = None
        self.current = None
        return self

    def reset(self, level=None):
        "Stop and return all disks to the first pile"
        if level is None: level = self.puzzle.level
        else: checkLevel(level)
        self.stop()
        self.puzzle.initialize(level)
        return self

    def _next(self):
        "Apply the next move and start its animation"
        try: m = next(self._moves)
        except StopIteration: return None
        p = self.puzzle
        fromSlot = len(p[m.source]) - 1
        disk = p.move(*m)
        self.current = MoveAnimation(disk, m.source, m.destination,
            fromSlot, len(p[m.destination]) - 1)
        if self.onmove: self.onmove(p)
        return self.current

    def step(self, seconds):
        "Advance the animation by the given time, scaled by the rate"
        t = seconds * self.rate
        while t > 0 and self.status == RUNNING:
            if self.current is None and self._next() is None:
                self._finish()
                break
            t = self.current.advance(t)
            if self.current.done:
                self.current = None
                if self.solved: self._finish()
        return self

    def _finish(self):
        self.stop()
        if self.onsolved: self.onsolved(self.puzzle)


class TowerCanvas(Canvas):
    "Draws the bases, poles and disks of the animator's puzzle"
    baseColor = rgba("black")
    poleWeight = 3
    diskColor = rgba("white")
    diskBorder = rgba("black")
    diskWidth = Layout.diskWidth
    diskHeight = Layout.diskHeight

    def __init__(self, size, animator, bg="white"):
        super().__init__(size, bg)
        self.animator = animator
        self._layout = None

    def setDiskSize(self, diskWidth=None, diskHeight=None):
        "Change the unscaled disk size and redraw"
        if diskWidth is not None: self.diskWidth = diskWidth
        if diskHeight is not None: self.diskHeight = diskHeight
        self._layout = None
        return self

    def resize(self, size, resizeContent=None):
        super().resize(size, resizeContent)
        self._layout = None

    @property
    def layout(self):
        "Layout for the current level, fitted to the canvas"
        lvl = self.animator.level
        lo = self._layout
        if lo is None or lo.level != lvl:
            lo = Layout(lvl, self.diskWidth, self.diskHeight).fit(self._size)
            self._layout = lo
        return lo

    def draw(self, srf=None, mode=3):
        "Draw the background, then the towers from the puzzle state"
        r = super().draw(srf, mode)
        srf.set_clip(self.clipRect)
        layout = self.layout
        x0, y0 = r.topleft
        for i in range(3):
            pygame.draw.rect(srf, self.baseColor, layout.baseRect(i).move(x0, y0))
            x = layout.poleX(i) + x0
            pygame.draw.line(srf, self.baseColor, (x, layout.poleTop + y0),
                (x, layout.poleBottom + y0), self.poleWeight)
        anim = self.animator.current
        for i, pile in enumerate(self.animator.puzzle.piles):
            for j, disk in enumerate(pile):
                if anim and disk is anim.disk: pos = anim.pos(layout)
                else: pos = layout.slot(i, j)
                self._drawDisk(srf, disk, layout.diskRect(disk.size, pos).move(x0, y0))
        srf.set_clip(None)
        return r

    def _drawDisk(self, srf, disk, rect):
        pygame.draw.rect(srf, self.diskColor, rect)
        pygame.draw.rect(srf, self.diskBorder, rect, 1)

    def onclick(self, ev):
        "Pause or resume when the towers are clicked"
        self.bubble("ontoggle", ev)
