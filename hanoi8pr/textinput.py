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

"""Text input for the number of disks. sc8pr.gui.textinput connects to
the tkinter clipboard when it is imported, so this control is built
directly on sc8pr.text.Text."""

import pygame
from pygame.constants import K_BACKSPACE, K_ESCAPE
from sc8pr.text import Text, Font
from sc8pr.util import style, rgba


class LevelInput(Text):
    """Digits-only input: handles onkeydown, onblur;
    triggers onchange, onaction"""
    focusable = True
    cursorTime = 1.0
    cursorOn = 0.35
    fontSize = 18
    padding = 4
    weight = 1
    bg = rgba("white")
    maxLength = 2
    minWidth = 28

    def __init__(self, level=""):
        super().__init__(str(level))
        self.cursorStatus = False

    @property
    def level(self):
        "The typed level, or None if the text is not a positive number"
        try: n = int(self.data)
        except ValueError: return None
        return n if n > 0 else None

    @property
    def hasFocus(self):
        sk = self.sketch
        return sk is not None and sk.evMgr.focus is self

    def _startCursor(self):
        sk = self.sketch
        self.stale = True
        self.cursorStatus = True
        self.cursorStart = sk.frameCount if sk else 0

    def draw(self, srf):
        "Blink the cursor while the input has the focus"
        if self.hasFocus:
            sk = self.sketch
            start = getattr(self, "cursorStart", None)
            t = None if start is None else (sk.frameCount - start) / sk.frameRate
            if t is None or t > self.cursorTime: self._startCursor()
            elif (t < self.cursorOn) is not self.cursorStatus:
                self.cursorStatus = not self.cursorStatus
                self.stale = True
        elif self.cursorStatus:
            self.cursorStatus = False
            self.stale = True
        return super().draw(srf)

    def render(self):
        font = Font.get(self.font, self.fontSize, self.fontStyle)
        txt = font.render(self.data, True, self.color)
        w, h = txt.get_size()
        srf = pygame.Surface((max(w + 2, self.minWidth), h), pygame.SRCALPHA)
        srf.blit(txt, (0, 0))
        if self.cursorStatus:
            pygame.draw.line(srf, self.color, (w, 0), (w, h - 1), 2)
        return style(srf, self.bg, self.border, self.weight, self.padding)

    def onkeydown(self, ev):
        "Edit the level; Enter or Escape submits it"
        u = ev.unicode
        if u in ("\n", "\r") or ev.key == K_ESCAPE:
            self.blur(True)
            return
        data = self.data
        if ev.key == K_BACKSPACE: data = data[:-1]
        elif u.isdigit() and len(data) < self.maxLength: data += u
        if data != self.data:
            self.config(data=data)
            self._startCursor()
            self.bubble("onchange", ev)

    def onblur(self, ev):
        self.cursorStatus = False
        self.stale = True
        if hasattr(self, "cursorStart"): del self.cursorStart
        self.bubble("onaction", ev)
