from .Vec2 import Vec2


class Body:
    """
    A gravitating point mass: position, velocity, draw size and mass.

    `stationary` separates attractors (never integrated, never destroyed)
    from the bodies they attract.
    """

    def __init__(self, pos, vel=None, size=1.0, mass=1.0, stationary=False):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        self.vel = vel.copy() if isinstance(vel, Vec2) else (Vec2(vel[0], vel[1]) if vel is not None else Vec2(0.0, 0.0))
        self.size = float(size)
        self._mass = float(mass)
        self.stationary = bool(stationary)

    @property
    def mass(self):
        return self._mass

    @property
    def speed(self):
        return self.vel.length()

    def __repr__(self):
        return (f"{self.__class__.__name__}(pos=({self.pos.x:.4f}, {self.pos.y:.4f}), "
                f"vel=({self.vel.x:.6f}, {self.vel.y:.6f}), size={self.size}, mass={self.mass})")

    def __str__(self):
        return self.__repr__()

    def to_dict(self):
        return {
            'pos': (self.pos.x, self.pos.y),
            'vel': (self.vel.x, self.vel.y),
            'size': self.size,
            'mass': self.mass,
            'stationary': self.stationary
        }
