"""A dungeon room holding one enemy to fight."""

from __future__ import annotations

from mazmorra.enemigo import Enemigo
from mazmorra.heroe import Heroe


class Sala:
    """A room and the enemy that guards it."""

    def __init__(self, enemigo: Enemigo) -> None:
        self.enemigo = enemigo

    def iniciar_batalla(self, heroes: list[Heroe]) -> bool:
        """Fight until the enemy or the lead hero falls; True on victory.

        ``heroes`` is re-ordered in place by speed, fastest first.
        """
        if not heroes:
            raise ValueError("a battle needs at least one hero")
        enemigo = self.enemigo
        print(f"Comienza la batalla contra {enemigo.nombre}!")

        while enemigo.esta_vivo() and heroes[0].esta_vivo():
            heroes.sort(key=lambda h: h.spd, reverse=True)
            for heroe in heroes:
                if heroe.esta_vivo() and enemigo.esta_vivo():
                    heroe.atacar(enemigo)
            if enemigo.esta_vivo():
                enemigo.atacar(heroes[0])

        if not enemigo.esta_vivo():
            print("¡Victoria!")
            for heroe in heroes:
                heroe.subir_stats()
            return True
        print("Derrota...")
        return False