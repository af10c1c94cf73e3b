import random

from mazmorra.inventario import Inventario
from mazmorra.item import TipoItem


class _Dados:
    def __init__(self, tiradas):
        self._tiradas = list(tiradas)

    def randrange(self, n):
        valor = self._tiradas.pop(0)
        assert 0 <= valor < n
        return valor


def test_default_items():
    inv = Inventario()
    assert [i.nombre for i in inv.items] == [
        "Espada Básica",
        "Armadura de Cuero",
        "Amuleto de Suerte",
    ]
    assert [i.tipo for i in inv.items] == list(TipoItem)


def test_mostrar_lists_with_indices(capsys):
    Inventario().mostrar()
    lineas = capsys.readouterr().out.splitlines()
    assert lineas[0] == "0) Espada Básica"
    assert lineas[2] == "2) Amuleto de Suerte"


def test_obtener_item_uses_roll():
    inv = Inventario(rng=_Dados([1]))
    assert inv.obtener_item() is inv.items[1]


def test_obtener_item_always_from_pool():
    inv = Inventario(rng=random.Random(3))
    vistos = {inv.obtener_item().nombre for _ in range(100)}
    assert vistos <= {i.nombre for i in inv.items}
    assert len(vistos) == len(inv.items)