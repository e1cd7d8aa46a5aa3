import constants
from .Body import Body
from .forces import gravitational_force, orbital_velocity


class Star(Body):
    def __init__(self, pos, size=5.0, vel=None, k_gravity=constants.STAR_K_GRAVITY):
        size = float(size)
        super().__init__(pos, vel=vel, size=size, mass=size ** 3)
        self.k_gravity = k_gravity
        self.destroyed = False

    @classmethod
    def from_orbit(cls, pos, size, reference, rng, k_init_velocity=constants.STAR_K_INIT_VELOCITY, **kwargs):
        """Star launched on a roughly circular orbit around `reference`."""
        vel = orbital_velocity(pos, reference, k_init_velocity, rng)
        return cls(pos, size=size, vel=vel, **kwargs)

    def update(self, black_holes, dt):
        for black_hole in black_holes:
            if black_hole.captures(self.pos):
                # no pull from the black hole that swallowed it
                self.destroyed = True
                continue

            force = gravitational_force(self.pos, self.mass, black_hole, self.k_gravity)
            if force is None or self.mass == 0:
                continue
            self.vel = self.vel + force / self.mass

        self.pos = self.pos + self.vel * dt

    def brightness(self, max_velocity):
        """Grey level in [0, 255] for this star's speed relative to the fastest star."""
        if max_velocity <= 0:
            return 0
        value = round(self.speed / max_velocity * 255)
        return max(0, min(255, value))
