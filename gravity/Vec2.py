import math


class Vec2:
    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        # scalar or component-wise
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, other):
        # zero divisors raise, callers decide what to do about it
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def length_sq(self):
        return self.x * self.x + self.y * self.y

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)

    def normalize(self):
        l = self.length()
        if l > 0.0:
            return Vec2(self.x / l, self.y / l)
        return Vec2(0.0, 0.0)

    def clamp(self, lo, hi):
        """
        Clamp each axis between lo and hi. Bounds are either scalars
        (same bound on both axes) or Vec2 (one bound per axis).
        """
        lo = lo if isinstance(lo, Vec2) else Vec2(lo, lo)
        hi = hi if isinstance(hi, Vec2) else Vec2(hi, hi)
        return Vec2(min(max(self.x, lo.x), hi.x), min(max(self.y, lo.y), hi.y))

    def copy(self):
        return Vec2(self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"
