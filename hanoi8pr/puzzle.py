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

"""Puzzle state for the Towers of Hanoi: three piles of disks and a
move operation that refuses to place a larger disk on a smaller one.
Nothing in this module knows about pygame."""

PILES = 3


class HanoiError(Exception):
    "Base class for puzzle errors"


class InvalidLevel(HanoiError, ValueError):
    "The number of disks is not a positive integer"

    def __init__(self, level):
        super().__init__("Level must be a positive integer, not {!r}".format(level))
        self.level = level


class IllegalMove(HanoiError, ValueError):
    "The move would break the stacking rule or names a bad pile"

    def __init__(self, source, destination, reason):
        msg = "Cannot move from pile {} to pile {}: {}"
        super().__init__(msg.format(source, destination, reason))
        self.source = source
        self.destination = destination


def checkLevel(n):
    "Raise InvalidLevel unless n is an integer >= 1"
    if type(n) is bool or not isinstance(n, int) or n < 1:
        raise InvalidLevel(n)
    return n


class Disk:
    "A disk identified by its size rank (1 = smallest)"
    __slots__ = "size",

    def __init__(self, size): self.size = size

    def __repr__(self): return "Disk({})".format(self.size)

    def __int__(self): return self.size

    def __eq__(self, other):
        return isinstance(other, Disk) and other.size == self.size

    def __lt__(self, other): return self.size < other.size

    def __hash__(self): return hash(self.size)


class Pile:
    """An ordered stack of disks, stored bottom to top;
    sizes always decrease towards the top"""

    def __init__(self, disks=()):
        self._disks = []
        for d in disks: self.push(d)

    def __len__(self): return len(self._disks)

    def __iter__(self): return iter(self._disks)

    def __getitem__(self, i): return self._disks[i]

    def __str__(self): return str(self.sizes)

    def __repr__(self): return "Pile({})".format(self.sizes)

    @property
    def top(self):
        "The smallest disk currently on the pile, or None"
        d = self._disks
        return d[-1] if d else None

    @property
    def sizes(self): return [d.size for d in self._disks]

    def accepts(self, disk):
        top = self.top
        return top is None or disk < top

    def push(self, disk):
        if not isinstance(disk, Disk): disk = Disk(disk)
        if not self.accepts(disk):
            raise ValueError("{} cannot rest on {}".format(disk, self.top))
        self._disks.append(disk)

    def pop(self): return self._disks.pop()

    def clear(self): self._disks.clear()


class Puzzle:
    "Three piles holding all the disks of an N-disk Towers of Hanoi"

    def __init__(self, level=3):
        self.piles = tuple(Pile() for i in range(PILES))
        self.initialize(level)

    def initialize(self, n):
        "Reset to n disks, all on pile 0"
        self._level = checkLevel(n)
        for p in self.piles: p.clear()
        for size in range(n, 0, -1): self.piles[0].push(Disk(size))
        self.moves = 0
        return self

    @property
    def level(self): return self._level

    def __getitem__(self, i): return self.piles[i]

    def __str__(self): return "{} {} {}".format(*self.piles)

    def __repr__(self):
        return "<{} level={} moves={}: {}>".format(type(self).__name__,
            self._level, self.moves, self)

    @property
    def state(self):
        "Sizes on each pile, bottom to top"
        return tuple(p.sizes for p in self.piles)

    def top(self, i):
        return self.piles[i].top

    def copy(self):
        "Return an independent puzzle in the same state"
        p = Puzzle(self._level)
        for dst, src in zip(p.piles, self.piles):
            dst.clear()
            for d in src: dst.push(Disk(d.size))
        p.moves = self.moves
        return p

    def _check(self, source, destination):
        "Raise IllegalMove if the move cannot be made"
        for i in (source, destination):
            if type(i) is bool or not isinstance(i, int) or not 0 <= i < PILES:
                raise IllegalMove(source, destination, "no pile {!r}".format(i))
        if source == destination:
            raise IllegalMove(source, destination, "same pile")
        disk = self.piles[source].top
        if disk is None:
            raise IllegalMove(source, destination, "source pile is empty")
        if not self.piles[destination].accepts(disk):
            raise IllegalMove(source, destination, "disk {} is larger than disk {}".format(
                disk.size, self.piles[destination].top.size))
        return disk

    def isLegal(self, source, destination):
        try: self._check(source, destination)
        except IllegalMove: return False
        return True

    def move(self, source, destination):
        "Move the top disk from the source pile to the destination pile"
        self._check(source, destination)
        disk = self.piles[source].pop()
        self.piles[destination].push(disk)
        self.moves += 1
        return disk

    def isSolved(self, target=2):
        "Check whether all disks are on the target pile"
        return len(self.piles[target]) == self._level
