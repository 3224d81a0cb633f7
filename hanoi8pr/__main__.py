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

import sys
from hanoi8pr.app import main

sys.exit(main())
