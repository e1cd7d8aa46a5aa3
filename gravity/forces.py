import math

import constants
from .Vec2 import Vec2


def gravitational_force(pos, mass, attractor, k_gravity, g=constants.G):
    """
    Force pulling a body of `mass` at `pos` towards `attractor`.

    k_gravity scales the real constant up to the [-1, 1] coordinate space.
    Returns None when the body sits exactly on the attractor; the pair
    then contributes nothing.
    """
    delta = attractor.pos - pos
    distance = delta.length()
    if distance == 0.0 or not math.isfinite(distance):
        return None

    magnitude = g * attractor.mass * mass * k_gravity / (distance * distance)
    return Vec2(delta.x / distance * magnitude, delta.y / distance * magnitude)


def capped_pull(pos, attractors, k_gravity, mass_factor, limit, dt, g=constants.G):
    """
    Velocity delta for bodies that respond to gravity directly instead of
    through their inertia. Each attractor's pull is clamped per axis to
    [-limit, limit] before summing; the sum is scaled by dt.
    """
    total = Vec2(0.0, 0.0)
    for attractor in attractors:
        pull = gravitational_force(pos, mass_factor, attractor, k_gravity, g)
        if pull is None:
            continue
        total = total + pull.clamp(-limit, limit)
    return total * dt


def orbital_velocity(pos, attractor, k_init_velocity, rng, perturbation=constants.ORBIT_PERTURBATION,
                     g=constants.G):
    """Tangential velocity close to a circular orbit around `attractor`, randomly off by up to +-perturbation."""
    r_vec = pos - attractor.pos
    r = r_vec.length()
    if r == 0.0:
        return Vec2(0.0, 0.0)

    speed = math.sqrt(g * attractor.mass / r) * k_init_velocity
    speed *= 1.0 + rng.uniform(-perturbation, perturbation)
    tangent = Vec2(-r_vec.y, r_vec.x).normalize()
    return tangent * speed
