"""Base character with combat stats, damage rolls and attacks."""

from __future__ import annotations

import random


class Personaje:
    """A combatant with hit points, attack, defence, speed and luck."""

    def __init__(
        self,
        nombre: str,
        hp: int,
        atk: int,
        defensa: int,
        spd: int,
        lck: int,
        rng: random.Random | None = None,
    ) -> None:
        self.nombre = nombre
        self.hp = hp
        self.atk = atk
        self.defensa = defensa
        self.spd = spd
        self.lck = lck
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.nombre!r}, hp={self.hp}, atk={self.atk}, "
            f"defensa={self.defensa}, spd={self.spd}, lck={self.lck})"
        )

    def atacar(self, objetivo: Personaje) -> int:
        """Hit ``objetivo`` for at least one point and return the damage dealt."""
        danio = max(1, self.calcular_danio() - objetivo.defensa)
        objetivo.recibir_danio(danio)
        print(f"{self.nombre} infligió {danio} de daño a {objetivo.nombre}.")
        return danio

    def calcular_danio(self) -> int:
        """Roll raw damage: attack plus 0-4, doubled on a critical hit."""
        base = self.atk + self.rng.randrange(5)
        critico = self.rng.randrange(100) < self.lck * 2
        if critico:
            print(f"¡Golpe crítico de {self.nombre}!")
            return base * 2
        return base

    def recibir_danio(self, danio: int) -> None:
        """Lose ``danio`` hit points, never dropping below zero."""
        self.hp = max(0, self.hp - danio)

    def esta_vivo(self) -> bool:
        return self.hp > 0