import constants


class FixedStepClock:
    """
    Fixed-step accumulator between a variable frame rate and the physics.

    Frame time, scaled by `speed`, piles up in the accumulator; every whole
    `step` in it becomes one simulation step and the remainder waits for
    the next frame.
    """

    # absorbs float drift so k deltas summing to k * step give k steps
    TOLERANCE = 1e-9

    def __init__(self, step=constants.DT, speed=1.0):
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        self.step = float(step)
        self.speed = float(speed)
        self.accumulator = 0.0

    def tick(self, elapsed):
        if elapsed < 0:
            raise ValueError(f"elapsed time must be >= 0, got {elapsed}")

        self.accumulator += elapsed * self.speed
        steps = 0
        while self.accumulator >= self.step * (1.0 - self.TOLERANCE):
            self.accumulator -= self.step
            steps += 1
        if self.accumulator < 0.0:
            self.accumulator = 0.0
        return steps

    def run(self, elapsed, galaxy, intents=frozenset()):
        steps = self.tick(elapsed)
        for _ in range(steps):
            galaxy.advance(self.step, intents)
        return steps
