"""Hit points, damage and the hit flash shown on damage."""

from __future__ import annotations

from silhouette.component import Component
from silhouette.sprite import SpriteComponent

HIT_FLASH_TIME = 0.6


class HealthComponent(Component):
    """Hit points for something that can take damage.

    Damage also makes the owner's sprites flash for HIT_FLASH_TIME seconds.
    """

    def __init__(self, max_health: float):
        super().__init__()
        self.max_health = max_health
        self.health = max_health
        self.hit_flash_timer = 0.0

    def tick(self, delta_time: float) -> None:
        if self.hit_flash_timer > 0.0:
            self.hit_flash_timer -= delta_time
            if self.hit_flash_timer <= 0.0:
                self._set_hit_flash(False)

    def health_percent(self) -> float:
        return self.health / self.max_health

    def is_dead(self) -> bool:
        return self.health <= 0.0

    def set_health_to_max(self) -> None:
        self.health = self.max_health

    def heal(self, amount: float) -> None:
        self.health = min(self.max_health, self.health + amount)

    def apply_damage(self, amount: float) -> None:
        self.health = max(0.0, self.health - amount)
        self._set_hit_flash(True)
        self.hit_flash_timer = HIT_FLASH_TIME

    def _set_hit_flash(self, on: bool) -> None:
        if self.owner is None:
            return
        for sprite in self.owner.find_all_components(SpriteComponent):
            sprite.hit_flash = on