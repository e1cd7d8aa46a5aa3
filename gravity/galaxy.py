import logging
import math

import numpy as np

import constants
from .Star import Star
from .Vec2 import Vec2

logger = logging.getLogger(__name__)


class Galaxy:
    def __init__(self, black_holes, ship=None, n_stars=constants.N_STARS, size=constants.GALAXY_SIZE,
                 max_star_size=constants.STAR_MAX_SIZE, seed=None):
        self.black_holes = list(black_holes)
        self.stars = []
        self.ship = None
        # radius of the disk stars are scattered in
        self.size = min(max(float(size), constants.GALAXY_MIN_SIZE), constants.GALAXY_MAX_SIZE)
        self.max_star_size = float(max_star_size)
        self.rng = np.random.default_rng(seed)

        # fastest star of the last tick, the renderer's colour reference
        self.max_velocity = 0.0

        if ship is not None:
            self.attach_ship(ship)
        if n_stars:
            self.create_stars(n_stars)

    @property
    def star_count(self):
        return len(self.stars)

    def add_black_hole(self, black_hole):
        self.black_holes.append(black_hole)

    def attach_ship(self, ship):
        ship.black_holes = self.black_holes
        self.ship = ship
        logger.info("ship attached at (%.3f, %.3f)", ship.pos.x, ship.pos.y)

    def add_star(self, star):
        self.stars.append(star)

    def create_stars(self, n):
        """
        Scatter `n` stars uniformly over the galaxy disk, each on a
        perturbed circular orbit around the first black hole.
        """
        if n < 0:
            raise ValueError(f"star count must be >= 0, got {n}")
        if n == 0:
            return
        if not self.black_holes:
            raise ValueError("cannot seed stars without a reference black hole")

        reference = self.black_holes[0]
        thetas = self.rng.uniform(0.0, 2.0 * math.pi, n)
        radii = np.sqrt(self.rng.uniform(0.0, 1.0, n)) * self.size
        sizes = self.rng.uniform(0.0, self.max_star_size, n)

        xs = np.sin(thetas) * radii
        ys = np.cos(thetas) * radii
        for x, y, size in zip(xs, ys, sizes):
            self.add_star(Star.from_orbit(Vec2(x, y), size, reference, self.rng))

        logger.info("created %d stars (total %d)", n, len(self.stars))

    def reset_stars(self, n):
        self.stars = []
        self.create_stars(n)

    def advance(self, dt, intents=frozenset()):
        """
        One fixed step: ship first, then drop stars captured on the
        previous step, then move the survivors.

        Returns the fastest star speed of this step, also kept on
        `max_velocity`.
        """
        if self.ship is not None:
            self.ship.update(dt, intents)

        before = len(self.stars)
        self.stars = [s for s in self.stars if not s.destroyed]
        if len(self.stars) != before:
            logger.debug("swept %d captured stars", before - len(self.stars))

        max_vel = 0.0
        for star in self.stars:
            star.update(self.black_holes, dt)
            speed = star.speed
            if speed > max_vel:
                max_vel = speed

        self.max_velocity = max_vel
        return max_vel
