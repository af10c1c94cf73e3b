"""Equipment that grants stat bonuses to a hero."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Equipo:
    """A piece of gear and the bonuses it grants."""

    nombre: str = "Ninguno"
    bonus_hp: int = 0
    bonus_atk: int = 0
    bonus_def: int = 0
    bonus_lck: int = 0

    def describir(self) -> str:
        return (
            f"{self.nombre} | +HP: {self.bonus_hp} +ATK: {self.bonus_atk} "
            f"+DEF: {self.bonus_def} +LCK: {self.bonus_lck}"
        )

    def mostrar(self) -> None:
        print(self.describir())