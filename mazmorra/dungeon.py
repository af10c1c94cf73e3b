"""A full dungeon run: ten rooms fought automatically, then the score."""

from __future__ import annotations

import copy
import os
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from mazmorra.enemigo import Enemigo, TipoEnemigo
from mazmorra.heroe import HP_INICIAL, Heroe
from mazmorra.sala import Sala
from mazmorra.scores import SCORES_FILE, guardar_score, mostrar_top_scores

_ENEMIGOS = (
    ("Goblin", TipoEnemigo.SOLDADO),
    ("Orco", TipoEnemigo.SOLDADO),
    ("Esqueleto", TipoEnemigo.SOLDADO),
    ("Liche", TipoEnemigo.SOLDADO),
    ("Nigromante", TipoEnemigo.SOLDADO),
    ("Ogro", TipoEnemigo.SOLDADO),
    ("Gólem", TipoEnemigo.SOLDADO),
    ("Caballero Negro", TipoEnemigo.MINI_JEFE),
    ("Demonio", TipoEnemigo.SOLDADO),
    ("Señor Oscuro", TipoEnemigo.GRAN_JEFE),
)


@dataclass(frozen=True)
class Resultado:
    """Outcome of a run: the player's alias, rooms cleared and health lost."""

    jugador: str
    salas: int
    salud_perdida: int


class Mazmorra:
    """A sequence of rooms that a party of heroes fights through in order."""

    def __init__(
        self,
        heroes: Iterable[Heroe],
        entrada: Callable[[str], str] | None = None,
        scores_path: str | os.PathLike[str] = SCORES_FILE,
        rng: random.Random | None = None,
    ) -> None:
        # The party is copied: the caller's heroes are left untouched.
        self.heroes = copy.deepcopy(list(heroes))
        self.entrada = entrada
        self.scores_path = scores_path
        self.salas = [Sala(Enemigo(nombre, tipo, rng=rng)) for nombre, tipo in _ENEMIGOS]

    def iniciar(self) -> Resultado:
        """Ask for the alias, fight every room until a defeat, save the score."""
        entrada = self.entrada if self.entrada is not None else input
        jugador = entrada("Ingresa tu alias: ")

        salas_superadas = 0
        for sala in self.salas:
            if not sala.iniciar_batalla(self.heroes):
                break
            salas_superadas += 1

        salud_perdida = sum(HP_INICIAL - h.hp for h in self.heroes)

        guardar_score(jugador, salas_superadas, salud_perdida, self.scores_path)
        mostrar_top_scores(self.scores_path)
        return Resultado(jugador, salas_superadas, salud_perdida)