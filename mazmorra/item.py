"""Item kinds and loot items."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TipoItem(enum.Enum):
    ARMA = "arma"
    ARMADURA = "armadura"
    ACCESORIO = "accesorio"


@dataclass(frozen=True)
class Item:
    """A loot item with its kind and stat bonuses."""

    nombre: str
    tipo: TipoItem
    bonus_atk: int = 0
    bonus_def: int = 0
    bonus_lck: int = 0