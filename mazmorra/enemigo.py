"""Enemies whose stats depend on their rank."""

from __future__ import annotations

import enum
import random

from mazmorra.personaje import Personaje


class TipoEnemigo(enum.Enum):
    SOLDADO = "soldado"
    MINI_JEFE = "mini_jefe"
    GRAN_JEFE = "gran_jefe"


# hp, atk, defensa, spd, lck
_STATS = {
    TipoEnemigo.SOLDADO: (60, 6, 3, 2, 1),
    TipoEnemigo.MINI_JEFE: (90, 10, 6, 4, 3),
    TipoEnemigo.GRAN_JEFE: (120, 15, 10, 6, 5),
}


class Enemigo(Personaje):
    """An enemy of a given rank."""

    def __init__(
        self, nombre: str, tipo: TipoEnemigo, rng: random.Random | None = None
    ) -> None:
        super().__init__(nombre, *_STATS[tipo], rng=rng)
        self.tipo = tipo