import math

from soroban.config import (
    BEAD_RADIUS,
    EARTH_COUNT,
    EARTH_HIT,
    EARTH_MAX_SLOT,
    EARTH_MIN_SLOT,
    EARTH_REST,
    HEAVEN_DOWN,
    HEAVEN_HIT,
    HEAVEN_UP,
    LANE_HIT,
    SLOTS,
)
from soroban.planet import Planet

HEAVEN = "heaven"
EARTH = "earth"


def plan_earth_move(slots, index, step):
    """Return the earth slots after moving bead ``index`` by ``step`` (-1 up, +1 down).

    Beads in the way are pushed along first. Returns None when the bead or any
    bead it has to push would leave [EARTH_MIN_SLOT, EARTH_MAX_SLOT]; the input
    is never modified.
    """
    slots = tuple(slots)
    if not 0 <= index < len(slots):
        return None
    target = slots[index] + step
    if target < EARTH_MIN_SLOT or target > EARTH_MAX_SLOT:
        return None
    neighbour = index + step
    if 0 <= neighbour < len(slots) and slots[neighbour] == target:
        slots = plan_earth_move(slots, neighbour, step)
        if slots is None:
            return None
    return slots[:index] + (target,) + slots[index + 1:]


def slots_valid(slots):
    if len(slots) != EARTH_COUNT:
        return False
    if any(s < EARTH_MIN_SLOT or s > EARTH_MAX_SLOT for s in slots):
        return False
    return all(a < b for a, b in zip(slots, slots[1:]))


def digit_value(heaven_slot, earth_slots):
    value = 5 if heaven_slot == HEAVEN_DOWN else 0
    for i, slot in enumerate(earth_slots):
        if slot != EARTH_MIN_SLOT + i:
            break
        value += 1
    return value


class SorobanColumn:
    """One rod: a heaven bead worth 5 and four earth beads worth 1 each."""

    def __init__(self, x, slots=SLOTS, radius=BEAD_RADIUS, rng=None):
        self.x = x
        self.slots = tuple(slots)
        self.r = radius
        self.heaven_slot = HEAVEN_UP
        self.heaven = Planet(x, self.slot_y(HEAVEN_UP), radius, rng=rng)
        self.earth_slots = tuple(EARTH_REST)
        self.earths = [Planet(x, self.slot_y(s), radius, rng=rng) for s in self.earth_slots]

    def slot_y(self, slot):
        """Bead centre for a slot, in artwork units."""
        return self.slots[slot] + self.r

    # --------- Frame ---------
    def update(self):
        self.heaven.update()
        for bead in self.earths:
            bead.update()

    def snap(self):
        self.heaven.snap()
        for bead in self.earths:
            bead.snap()

    def draw(self, surface, layout):
        self.heaven.draw(surface, layout)
        for bead in self.earths:
            bead.draw(surface, layout)

    # --------- State ---------
    def _sync_earth_targets(self):
        for bead, slot in zip(self.earths, self.earth_slots):
            bead.set_target(self.slot_y(slot))

    def _set_heaven(self, slot):
        self.heaven_slot = slot
        self.heaven.set_target(self.slot_y(slot))

    def reset(self):
        self._set_heaven(HEAVEN_UP)
        self.earth_slots = tuple(EARTH_REST)
        self._sync_earth_targets()

    def set_value(self, digit):
        digit = max(0, min(9, int(digit)))
        self._set_heaven(HEAVEN_DOWN if digit >= 5 else HEAVEN_UP)
        raised = digit % 5
        self.earth_slots = tuple(
            EARTH_MIN_SLOT + i if i < raised else EARTH_MIN_SLOT + 1 + i
            for i in range(EARTH_COUNT)
        )
        self._sync_earth_targets()

    def get_value(self):
        return digit_value(self.heaven_slot, self.earth_slots)

    # --------- Chain reaction ---------
    def _try_move_earth(self, index, step):
        plan = plan_earth_move(self.earth_slots, index, step)
        if plan is None:
            return False
        self.earth_slots = plan
        return True

    def try_move_earth_up(self, index):
        return self._try_move_earth(index, -1)

    def try_move_earth_down(self, index):
        return self._try_move_earth(index, 1)

    # --------- Interaction ---------
    def hits(self, local_x, local_y):
        """Beads under a point given in artwork units, heaven first then earth top-down.

        Yields (HEAVEN, None) or (EARTH, index). Earth hit zones of neighbouring
        beads overlap slightly, so more than one earth bead can be reported.
        """
        if abs(local_x - self.x) > self.r * LANE_HIT:
            return
        if _dist(local_x, local_y, self.x, self.heaven.y) < self.r * HEAVEN_HIT:
            yield HEAVEN, None
        for i, bead in enumerate(self.earths):
            if _dist(local_x, local_y, self.x, bead.y) < self.r * EARTH_HIT:
                yield EARTH, i

    def hit_test(self, local_x, local_y):
        return next(self.hits(local_x, local_y), None)

    def _press_heaven(self, local_y):
        if local_y > self.heaven.y and self.heaven_slot == HEAVEN_UP:
            self._set_heaven(HEAVEN_DOWN)
            return True
        if local_y < self.heaven.y and self.heaven_slot == HEAVEN_DOWN:
            self._set_heaven(HEAVEN_UP)
            return True
        return False

    def _press_earth(self, index, local_y):
        if local_y < self.earths[index].y:
            moved = self.try_move_earth_up(index)
        else:
            moved = self.try_move_earth_down(index)
        if moved:
            self._sync_earth_targets()
        return moved

    def check_interaction(self, px, py, layout):
        """Handle a press at screen point (px, py); True when a bead moved."""
        local_x, local_y = layout.to_local(px, py)
        for kind, index in self.hits(local_x, local_y):
            if kind == HEAVEN:
                moved = self._press_heaven(local_y)
            else:
                moved = self._press_earth(index, local_y)
            if moved:
                return True
        return False


def _dist(x0, y0, x1, y1):
    return math.hypot(x1 - x0, y1 - y0)
