"""The pool of loot items that can be found."""

from __future__ import annotations

import random

from mazmorra.item import Item, TipoItem


class Inventario:
    """Holds the available items and hands out random ones."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.items = [
            Item("Espada Básica", TipoItem.ARMA, 4, 0, 0),
            Item("Armadura de Cuero", TipoItem.ARMADURA, 0, 5, 0),
            Item("Amuleto de Suerte", TipoItem.ACCESORIO, 0, 0, 2),
        ]

    def mostrar(self) -> None:
        for i, item in enumerate(self.items):
            print(f"{i}) {item.nombre}")

    def obtener_item(self) -> Item:
        """Return one of the items at random."""
        return self.items[self.rng.randrange(len(self.items))]