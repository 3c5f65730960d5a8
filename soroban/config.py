# ========================
# Canvas
# ========================
FPS = 60
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 900
BG = (0, 0, 0)
NUM_STARS = 5000

# ========================
# Abacus geometry
# ========================
ART_SCALE_BASE = 0.8   # share of the window the abacus may occupy
COLS = 5               # digits
BEAD_RADIUS = 60       # planet radius in artwork units
COL_SPACE = 220        # horizontal distance between rods

GAP = BEAD_RADIUS * 2 + 15
BEAM_GAP = GAP * 0.5
SLOT_COUNT = 8
ART_W = COLS * COL_SPACE
ART_H = 6 * GAP + BEAM_GAP
ART_PAD_W = 100
ART_PAD_H = 200


def build_slots():
    """Vertical offsets of the 8 bead slots, slot 0 at the top."""
    slots = []
    acc = 0.0
    for i in range(SLOT_COUNT):
        slots.append(acc)
        acc += BEAM_GAP if i == 2 else GAP
    return tuple(slots)


SLOTS = build_slots()

HEAVEN_UP = 0
HEAVEN_DOWN = 1
EARTH_MIN_SLOT = 3
EARTH_MAX_SLOT = 7
EARTH_REST = (4, 5, 6, 7)
EARTH_COUNT = len(EARTH_REST)

# Hit radii, in multiples of the scaled bead radius
HEAVEN_HIT = 1.5
EARTH_HIT = 1.2
LANE_HIT = 1.5

# ========================
# Animation
# ========================
MOVE_LERP = 0.08       # fraction of remaining distance per frame
MOVE_THRESHOLD = 0.3   # snap-to-target distance

# ========================
# HUD
# ========================
HUD_MARGIN = 20
HUD_FONT_SIZE = 16
HUD_FONTS = "jetbrainsmono,dejavusansmono,menlo,consolas,monospace"
VALUE_COLOR = (255, 240, 0)
TEXT_COLOR = (255, 255, 255)
RESET_X = 150
RESET_W = 80
RESET_H = 50

# ========================
# Audio
# ========================
AMBIENCE_TRACKS = (
    ("Ambience.mp3", 0.5),
    ("Ambience2.mp3", 0.1),
    ("Ambience3.mp3", 0.08),
)
BEAD_FILE = "Bead.wav"
RESET_FILE = "Reset Button.wav"
CLICK_FILES = ("SFX1-Trang.wav", "SFX2-Trang.wav")
BG_CLICK_FILES = (
    "Ambience_Click _1.wav",
    "Ambience_Click_2.wav",
    "Ambience_Click_3.wav",
)

VOLUME_BEAD = 0.5
VOLUME_CLICK = 0.05
VOLUME_BG_CLICK = 0.01
VOLUME_RESET = 0.1

# ========================
# Landing page
# ========================
MENU_STARS = 2000
MENU_FADE_SPEED = 0.03
MENU_LINE_SPEED = 0.025
MENU_HOVER_LERP = 0.1
MENU_LABEL_SIZE = 24
MENU_DOTS = (
    # (x, y) as window fractions, label, radius, border, sketch launched
    ((0.10, 0.2), "", 5, True, None),
    ((0.20, 0.4), "Planetary Soroban", 5, True, "soroban"),
    ((0.40, 0.6), "Disrupted Saturn", 5, True, "saturn"),
    ((0.60, 0.7), "The Sun", 5, True, "sun"),
    ((0.75, 0.4), "Turbulence", 5, True, "turbulence"),
    ((0.90, 0.5), "", 0, False, None),
    ((0.85, 0.2), "", 5, True, None),
)
MENU_CONNECTIONS = ((0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (4, 6))
MENU_CLICK_FILE = "blipSelect2.wav"
SLIDE_FILE = "slide.wav"
VOLUME_MENU_AMBIENCE = 0.4
VOLUME_MENU_CLICK = 0.8
VOLUME_MENU_SLIDE = 0.8

# ========================
# Disrupted Saturn
# ========================
SATURN_STARS = 1000
SATURN_FPS = 60
PLANET_SHARE = 0.35          # planet radius as a share of the shorter window side
RING_SPAWN_FRAMES = 10
RING_COUNT_MIN = 3
RING_COUNT_MAX = 70
RING_CLICK_MIN = 3
RING_CLICK_MAX = 20
RING_FADE_SLOW = 2
RING_FADE_FAST = 8
RING_FADE_KNEE = 80          # alpha below which a ring fades fast
RING_SPEED_START = 0.005
RING_SPEED = 0.02
RING_SPEED_FRAMES = 30
RING_HIT_INNER = 0.7
RING_HIT_OUTER = 2.0
PLANET_AMBIENCE_FILE = "ambience-edited.mp3"
RINGS_AMBIENCE_FILE = "rings.wav"
ATMOSPHERE_FILES = (
    "saturn_atmosphere.wav",
    "saturn_atmosphere-2.wav",
    "saturn_atmosphere-3.wav",
)
RING_FADE_FILES = (
    "ring disappearing.wav",
    "ring disappearing 2.wav",
    "rings disappearing-3.wav",
)

# ========================
# The Sun
# ========================
SUN_STARS = 5000
SUN_FPS = 60
SUN_DIAMETER = 500
RAY_COUNT_MIN = 80
RAY_COUNT_MAX = 149
RAY_INNER = SUN_DIAMETER // 2 + 10
RAY_LENGTH = 750
RAY_SEGMENTS = 40
RAY_ALPHA_INNER = 200
RAY_ALPHA_OUTER = 30
RAY_SPIN_MIN = 0.0001        # radians per frame, counter clockwise
RAY_SPIN_MAX = 0.0005
PULSE_SPEED_MIN = 10
PULSE_SPEED_MAX = 80
PULSE_REACH = 1.5            # times the longer window side
PULSE_BURST_MIN = 1
PULSE_BURST_MAX = 5
AUTO_PULSE_ALPHA = 128
AUTO_PULSE_MS = (2000, 5000)
SUN_PLAYLIST_FILES = ("sfx4.wav", "sfx6.wav", "space1.wav", "space2.wav", "space3.wav")
SUN_CLICK_FILE = "sfx5.wav"

# ========================
# Turbulence
# ========================
TURBULENCE_STARS = 2000
TURBULENCE_FPS = 30
BOUNDARY_DIAMETER = 650
BOUNDARY_MARGIN = 200        # centre keeps this far inside the boundary
BOUNDARY_MIN_SHARE = 0.1
BOUNDARY_MAX_SHARE = 0.95
BOUNDARY_KEY_STEP = 50
BOUNDARY_WHEEL_STEP = 15
TRAIL_FADE_ALPHA = 40
NOISE_STEP = 0.02
NOISE_SWING = 30
ATTRACTION = 7.5
ORBITER_COUNT = (17, 19)
ORBIT_RADIUS = (40, 200)
ORBIT_SPEED = (0.1, 0.3)
TRAIL_LENGTH = (7, 11)
STROKE_WIDTH = 2
TURBULENCE_FILES = {
    "storm": "storm.wav",
    "tone": "track4_tone12.wav",
    "blip": "blipSelect2tin.wav",
    "breathe": "breathe.wav",
    "jumpscare": "jumpscare.wav",
    "increase": "increase.wav",
    "decrease": "decrease.wav",
}
VOLUME_STORM = 0.4
VOLUME_TONE = 0.8
VOLUME_SLIDE = 1.0
VOLUME_BLIP = 0.6
VOLUME_BREATHE = 0.1
VOLUME_JUMPSCARE = 0.7
VOLUME_RESIZE = 0.1
VOLUME_SPACE2 = 0.5
BREATHE_MS = (5000, 10000)
JUMPSCARE_MS = (120000, 180000)
SPACE2_MS = 120000
