"""A component that steers the main view smoothly towards its owner."""

from __future__ import annotations

from silhouette.component import Component
from silhouette.mathutil import Vec2, float_is_zero, float_nearly_zero, float_sign, to_float_vec
from silhouette.rendermanager import View

DEFAULT_MAX_SPEED = 8.0
DEFAULT_ACCEL = 0.8


def find_stopping_distance(speed: float, decel: float) -> float:
    """Approximate distance needed to stop from speed at the given deceleration."""
    if decel == 0.0:
        raise ValueError("deceleration must not be zero")
    return speed * (1.0 + speed / decel) * 0.5


def find_new_speed(dist: float, speed: float, accel: float, max_speed: float) -> float:
    """The next speed towards a target dist away, given the current speed."""
    stopping_distance = find_stopping_distance(speed, accel)
    if speed <= 0.0:
        # Going the wrong way: accelerate towards the target.
        return min(speed + accel, max_speed)
    if dist > 1.5 * stopping_distance:
        # Going the right way with room to speed up.
        return min(speed + accel, max_speed)
    if dist <= stopping_distance:
        # Getting close: slow down.
        return max(accel, speed - accel)
    return speed


class CameraComponent(Component):
    """Moves a view towards the owner's centre plus a target offset.

    Each tick the resulting view becomes the world's main view.
    """

    def __init__(self, view_size: Vec2):
        super().__init__()
        self.view_size = view_size
        self.position = Vec2(0, 0)
        self.target_offset = Vec2(0, 0)
        self.max_speed = DEFAULT_MAX_SPEED
        self.accel = DEFAULT_ACCEL
        self._vx = 0.0
        self._vy = 0.0
        self._rem_x = 0.0
        self._rem_y = 0.0

    @property
    def velocity(self) -> Vec2:
        return Vec2(self._vx, self._vy)

    def _axis_velocity(self, diff: int, velocity: float) -> float:
        direction = float_sign(diff)
        dist = diff * direction
        speed = velocity * direction
        if dist > 0.0 or not float_is_zero(speed):
            return direction * find_new_speed(dist, speed, self.accel, self.max_speed)
        return velocity

    def tick(self, delta_time: float) -> None:
        target = self.owner.centre() + self.target_offset
        diff = target - self.position

        self._vx = self._axis_velocity(diff.x, self._vx)
        self._vy = self._axis_velocity(diff.y, self._vy)

        self._rem_x += self._vx
        self._rem_y += self._vy
        move_x, move_y = int(self._rem_x), int(self._rem_y)
        self._rem_x -= move_x
        self._rem_y -= move_y
        self.position = Vec2(self.position.x + move_x, self.position.y + move_y)

        # Stop once on target and nearly still.
        if self.position.x == target.x and float_nearly_zero(self._vx, 1.0):
            self._rem_x = 0.0
            self._vx = 0.0
        if self.position.y == target.y and float_nearly_zero(self._vy, 1.0):
            self._rem_y = 0.0
            self._vy = 0.0

        self.world.set_main_view(View(to_float_vec(self.position), to_float_vec(self.view_size)))

    def set_offset(self, offset: Vec2, update_target: bool = True) -> None:
        """Jump to a position relative to the owner, optionally making it the target."""
        self.position = self.owner.centre() + offset
        if update_target:
            self.target_offset = offset

    def set_target_offset(self, offset: Vec2) -> None:
        """Set the position, relative to the owner, the view moves towards."""
        self.target_offset = offset

    def set_speed(self, accel: float, max_speed: float) -> None:
        self.accel = accel
        self.max_speed = max_speed