import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest
from sc8pr.text import Font


@pytest.fixture
def pg():
    "Initialize pygame (headless) for tests that render text or surfaces"
    pygame.init()
    yield pygame
    Font.dumpCache()
    pygame.quit()
