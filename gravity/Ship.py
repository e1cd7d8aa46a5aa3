import enum
import logging
import math

import constants
from .Body import Body
from .Vec2 import Vec2
from .forces import capped_pull

logger = logging.getLogger(__name__)


class Intent(enum.Enum):
    THRUST = "thrust"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"


class ShipStatus(enum.Enum):
    IDLE = "idle"
    THRUSTING = "thrusting"


class Ship(Body):
    """
    Player controlled body.

    The ship feels the same black holes as the stars but through the capped
    response in `capped_pull`: every pull is a direct velocity change, not
    a force over the ship's inertia. Input arrives once per tick as a set
    of held `Intent`s. The ship cannot be captured.
    """

    def __init__(self, pos, size=constants.SHIP_SIZE, black_holes=(), show_path=False,
                 prediction_iterations=constants.PREDICTION_ITERATIONS,
                 mass_factor=constants.SHIP_MASS_FACTOR):
        super().__init__(pos, size=size, mass=mass_factor)
        # read-only view, the galaxy owns the list
        self.black_holes = black_holes
        self.show_path = bool(show_path)
        self.prediction_iterations = int(prediction_iterations)

        self.angle = 0.0  # radians, 0 points up
        self.angular_vel = 0.0
        self.status = ShipStatus.IDLE
        self.path = ()

        self.thrust_power = constants.THRUST_POWER
        self.radial_power = constants.RADIAL_POWER
        self.k_gravity = constants.STAR_K_GRAVITY
        self.pull_limit = constants.SHIP_PULL_LIMIT

    def gravity_delta(self, dt, pos=None):
        pos = self.pos if pos is None else pos
        return capped_pull(pos, self.black_holes, self.k_gravity, self.mass, self.pull_limit, dt)

    def update(self, dt, intents=frozenset()):
        # both rotations may be held at once, they add up
        if Intent.ROTATE_RIGHT in intents:
            self.angular_vel += self.radial_power
        if Intent.ROTATE_LEFT in intents:
            self.angular_vel -= self.radial_power

        if Intent.THRUST in intents:
            self.status = ShipStatus.THRUSTING
            self.vel = self.vel + Vec2(math.sin(self.angle), -math.cos(self.angle)) * self.thrust_power
        else:
            self.status = ShipStatus.IDLE

        self.vel = self.vel + self.gravity_delta(dt)
        self.pos = self.pos + self.vel * dt
        self._integrate_angle()

        self.predict_path(self.prediction_iterations, dt)

    def _integrate_angle(self):
        # per tick, deliberately not scaled by dt like the position is
        self.angle += self.angular_vel

    def predict_path(self, steps, dt):
        """
        Ballistic preview: step copies of pos/vel under gravity alone
        (no thrust, no rotation) and return the visited positions.
        The ship itself is left untouched.
        """
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")

        pos = self.pos.copy()
        vel = self.vel.copy()
        path = []
        for _ in range(steps):
            vel = vel + self.gravity_delta(dt, pos)
            pos = pos + vel * dt
            path.append(pos)

        self.path = tuple(path)
        logger.debug("predicted %d path points", len(self.path))
        return self.path
