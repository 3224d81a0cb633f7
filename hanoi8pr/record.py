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

"""Record sketch frames and save them as an animated GIF using Pillow.
Frames are held zlib-compressed until they are saved."""

import sys, zlib
import pygame
import PIL.Image


class GifRecorder:
    """Call 'capture' once per frame; every 'interval' frames the display
    is stored as compressed RGB data until 'save' is called."""
    maxFrames = 3000
    level = 6

    def __init__(self, filename, interval=2):
        self.filename = filename
        self.interval = interval
        self.frames = []
        self.frameRate = 60
        self.dropped = 0

    def __len__(self): return len(self.frames)

    @property
    def nbytes(self):
        "Memory used by the stored frames"
        return sum(len(f[0]) for f in self.frames)

    def capture(self, sk):
        "Store the current frame if it falls on the interval"
        if sk.frameCount % self.interval == 0:
            self.frameRate = sk.frameRate
            self.append(sk.image)

    def append(self, srf):
        data = zlib.compress(pygame.image.tostring(srf, "RGB"), self.level)
        size = srf.get_size()
        if self.frames and self.frames[-1][:2] == [data, size]:
            self.frames[-1][2] += 1
        elif len(self.frames) < self.maxFrames:
            self.frames.append([data, size, 1])
        else:
            if not self.dropped:
                print("GifRecorder: {} frame limit reached; later frames are not recorded".format(
                    self.maxFrames), file=sys.stderr)
            self.dropped += 1
        return self

    def images(self):
        "Generate (PIL.Image, repeat count) for the stored frames"
        for data, size, n in self.frames:
            yield PIL.Image.frombytes("RGB", size, zlib.decompress(data)), n

    def save(self, filename=None):
        "Write the frames to an animated GIF"
        if filename is None: filename = self.filename
        if not self.frames:
            raise ValueError("No frames have been recorded")
        imgs, counts = zip(*self.images())
        ms = 1000 * self.interval / self.frameRate
        imgs[0].save(filename, save_all=True, append_images=list(imgs[1:]),
            duration=[round(ms * n) for n in counts], loop=0)
        if self.dropped:
            print("GifRecorder: {} frames were dropped from {}".format(self.dropped,
                filename), file=sys.stderr)
        return filename
