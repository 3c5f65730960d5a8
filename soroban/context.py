from dataclasses import dataclass


@dataclass
class AppContext:
    """Window size, pointer position and sound flags shared by the sketch parts."""

    width: int = 1
    height: int = 1
    mouse_x: float = -1.0
    mouse_y: float = -1.0
    sound_started: bool = False
    sound_muted: bool = False

    def __post_init__(self):
        self.resize(self.width, self.height)

    def resize(self, width, height):
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    def move_pointer(self, x, y):
        self.mouse_x = x
        self.mouse_y = y

    @property
    def audio_enabled(self):
        return self.sound_started and not self.sound_muted
