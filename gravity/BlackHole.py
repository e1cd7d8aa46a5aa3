import constants
from .Body import Body
from .Vec2 import Vec2


class BlackHole(Body):
    def __init__(self, pos=None, size=10.0, mass_ratio=constants.SIZE_MASS_RATIO, show=True):
        if mass_ratio == 0:
            raise ValueError("mass_ratio must be non-zero")
        pos = pos if pos is not None else Vec2(0.0, 0.0)
        super().__init__(pos, size=size, mass=float(size) / mass_ratio, stationary=True)
        self.mass_ratio = float(mass_ratio)
        # event horizon, tied to the size and not to the mass formula
        self.capture_radius = self.size / constants.CAPTURE_DIVISOR
        # only the renderer reads this
        self.show = bool(show)

    def captures(self, pos):
        return pos.distance_to(self.pos) <= self.capture_radius
