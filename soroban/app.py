import argparse
from pathlib import Path

import pygame

from soroban.abacus import Abacus
from soroban.ambience import AMBIENCE_END, AmbienceScheduler
from soroban.audio import AMBIENCE, BG_CLICK_SFX, CLICK_SFX, SoundId
from soroban.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from soroban.controller import InteractionController
from soroban.hud import Hud
from soroban.launcher import Launcher
from soroban.saturn import DisruptedSaturn
from soroban.sketch import DEFAULT_ASSETS, Sketch
from soroban.sun import TheSun
from soroban.turbulence import Turbulence


class PlanetarySoroban(Sketch):
    """A five-digit soroban whose beads are ringed planets, over a starfield."""

    title = "Planetary Soroban"
    sound_ids = tuple(sid for sid, _ in AMBIENCE) + (SoundId.BEAD, SoundId.RESET) + CLICK_SFX + BG_CLICK_SFX

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, assets_dir=DEFAULT_ASSETS,
                 muted=False, value=0, rng=None):
        super().__init__(width, height, assets_dir, muted, rng)
        self.abacus = Abacus()
        if value:
            self.abacus.set_total_value(value)
            self.abacus.snap()

        self.ambience = AmbienceScheduler(self.board)
        self.controller = InteractionController(self.abacus, self.board, self.context)
        self.hud = Hud()
        self.resize(width, height)

    # --------- Sound ---------
    def on_audio_start(self):
        self.ambience.start()

    def on_audio_stop(self):
        self.ambience.stop()
        self.board.stop_all()

    # --------- Event handling ---------
    def handle_event(self, event):
        if super().handle_event(event):
            return True
        if event.type == AMBIENCE_END:
            self.ambience.handle_end()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.controller.press(*event.pos)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.controller.reset()
        return False

    # --------- Frame ---------
    def update(self):
        super().update()
        self.abacus.update()

    def draw(self):
        self.draw_background()

        layer = pygame.Surface((self.context.width, self.context.height), pygame.SRCALPHA)
        self.abacus.draw(layer)
        self.screen.blit(layer, (0, 0))

        self.hud.draw(self.screen, self.abacus.get_total_value(), self.context)
        pygame.display.flip()


SKETCHES = {
    "menu": Launcher,
    "soroban": PlanetarySoroban,
    "saturn": DisruptedSaturn,
    "sun": TheSun,
    "turbulence": Turbulence,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Planetary Soroban and its companion space sketches")
    parser.add_argument('--sketch', choices=sorted(SKETCHES), default='soroban',
                        help='Sketch to open; "menu" shows the landing page (default: soroban)')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH)
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT)
    parser.add_argument('--duration', type=float, default=None,
                        help='Seconds to run each sketch before exiting (useful for headless testing).')
    parser.add_argument('--assets', type=Path, default=DEFAULT_ASSETS,
                        help='Directory holding the sound files (default: ./assets)')
    parser.add_argument('--mute', action='store_true', help='Start with sound off (m toggles)')
    parser.add_argument('--value', type=int, default=0, help='Number shown on the abacus at start')
    args = parser.parse_args(argv)
    if args.value < 0:
        parser.error('--value must be non-negative')

    name = args.sketch
    width, height = args.width, args.height
    try:
        # the landing page hands over to the sketch picked on it
        while name:
            options = dict(assets_dir=args.assets, muted=args.mute)
            if name == 'soroban':
                options['value'] = args.value
            app = SKETCHES[name](width, height, **options)
            name = app.run(duration=args.duration)
            width, height = app.context.width, app.context.height
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
