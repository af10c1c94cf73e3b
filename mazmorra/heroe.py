"""Player heroes: fixed starting stats, healing, equipment and growth."""

from __future__ import annotations

import random

from mazmorra.equipo import Equipo
from mazmorra.personaje import Personaje

HP_INICIAL = 60


class Heroe(Personaje):
    """A hero with a maximum hit-point cap and one equipped item."""

    def __init__(self, nombre: str, rng: random.Random | None = None) -> None:
        super().__init__(nombre, HP_INICIAL, 6, 3, 4, 1, rng=rng)
        self.hp_max = HP_INICIAL
        self.equipo = Equipo()

    def subir_stats(self) -> None:
        """Grow attack and defence by 2%, truncated."""
        self.atk += int(self.atk * 0.02)
        self.defensa += int(self.defensa * 0.02)

    def curar(self, cantidad: int) -> None:
        """Restore hit points up to the maximum."""
        self.hp = min(self.hp + cantidad, self.hp_max)

    def equipar(self, eq: Equipo) -> None:
        """Equip ``eq`` and add its bonuses to the hero's stats."""
        self.equipo = eq
        self.hp_max += eq.bonus_hp
        self.atk += eq.bonus_atk
        self.defensa += eq.bonus_def
        self.lck += eq.bonus_lck
        print(
            f"{self.nombre} equipado: +HP {eq.bonus_hp}, +ATK {eq.bonus_atk}, "
            f"+DEF {eq.bonus_def}, +LCK {eq.bonus_lck}"
        )