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

"""Generate the moves that solve the Towers of Hanoi. Usage:

for move in solve(4): puzzle.move(*move)

A Solution can be iterated as many times as needed; each pass
regenerates the same sequence without storing it."""

from collections import namedtuple
from hanoi8pr.puzzle import checkLevel, PILES

Move = namedtuple("Move", ["source", "destination"])


def moveCount(n):
    "Number of moves needed to solve an n-disk puzzle"
    return 2 ** checkLevel(n) - 1

def moveDisks(n, start=0, moveTo=2, temp=1):
    """Generate the moves of the recursive solution: n-1 disks to temp,
    the largest to moveTo, then n-1 disks onto it. Pending sub-problems
    are kept on a list rather than the call stack, so any level works."""
    todo = [(n, start, moveTo, temp, False)]
    while todo:
        n, start, moveTo, temp, ready = todo.pop()
        if ready or n == 1: yield Move(start, moveTo)
        else:
            todo.append((n-1, temp, moveTo, start, False))
            todo.append((n, start, moveTo, temp, True))
            todo.append((n-1, start, temp, moveTo, False))


class Solution:
    "A lazy, restartable sequence of moves"

    def __init__(self, n, source=0, destination=2, auxiliary=1):
        checkLevel(n)
        piles = source, destination, auxiliary
        if sorted(piles) != list(range(PILES)):
            raise ValueError("Piles must be a permutation of 0, 1, 2; not {}".format(piles))
        self.level = n
        self.source = source
        self.destination = destination
        self.auxiliary = auxiliary

    def __iter__(self):
        return moveDisks(self.level, self.source, self.destination, self.auxiliary)

    def __len__(self): return moveCount(self.level)

    def __repr__(self):
        return "<{} level={} {}->{} via {}>".format(type(self).__name__,
            self.level, self.source, self.destination, self.auxiliary)

    def apply(self, puzzle):
        "Apply each move to the puzzle, yielding the puzzle after each one"
        for m in self:
            puzzle.move(*m)
            yield puzzle


def solve(n, source=0, destination=2, auxiliary=1):
    "Return the moves that transfer n disks from source to destination"
    return Solution(n, source, destination, auxiliary)
