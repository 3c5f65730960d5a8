import random

import pygame

from soroban.audio import AMBIENCE

AMBIENCE_END = pygame.USEREVENT + 1


class AmbienceScheduler:
    """Keeps one track playing on the ambience channel, chaining to the next when it ends.

    With ``shuffle`` the next track is a random one; otherwise the loaded
    tracks are walked in order and wrap around.
    """

    def __init__(self, board, tracks=AMBIENCE, rng=None, shuffle=True, end_event=AMBIENCE_END):
        self.board = board
        self.tracks = tuple(tracks)
        self.rng = rng or random
        self.shuffle = shuffle
        self.end_event = end_event
        self.running = False
        self.current = None
        self.index = 0

    @property
    def channel(self):
        return self.board.ambience_channel

    def _available(self):
        return [(sid, vol) for sid, vol in self.tracks if self.board.has(sid)]

    def _pick(self, available):
        if self.shuffle:
            return self.rng.choice(available)
        self.index %= len(available)
        track = available[self.index]
        self.index += 1
        return track

    def _play_next(self):
        available = self._available()
        if not available or self.channel is None or not self.board.context.audio_enabled:
            self.current = None
            return False
        sound_id, volume = self._pick(available)
        self.current = sound_id
        self.channel.set_endevent(self.end_event)
        self.channel.set_volume(volume)
        self.channel.play(self.board.sounds[sound_id])
        return True

    def start(self):
        if self.channel is not None and self.channel.get_busy():
            self.running = True
            return True
        if not self.running:
            self.index = 0
        self.running = True
        return self._play_next()

    def handle_end(self):
        # halting the channel also posts the end event
        if not self.running:
            return False
        if self.channel is not None and self.channel.get_busy():
            return False
        return self._play_next()

    def stop(self):
        self.running = False
        self.current = None
        if self.channel is not None:
            self.channel.stop()
