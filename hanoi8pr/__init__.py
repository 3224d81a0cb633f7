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

"""Towers of Hanoi puzzle engine with a pygame animation.

from hanoi8pr import Puzzle, solve
puzzle = Puzzle(4)
for move in solve(4): puzzle.move(*move)

Run 'python -m hanoi8pr' (or hanoi8pr.app.play) for the animation."""

version = 1, 0, "a1"
print("hanoi8pr {}.{}.{}".format(*version))

from hanoi8pr.puzzle import Puzzle, Pile, Disk, HanoiError, InvalidLevel, IllegalMove
from hanoi8pr.solver import solve, Solution, Move, moveCount
