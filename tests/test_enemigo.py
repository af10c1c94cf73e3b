import pytest

from mazmorra.enemigo import Enemigo, TipoEnemigo


@pytest.mark.parametrize(
    "tipo, stats",
    [
        (TipoEnemigo.SOLDADO, (60, 6, 3, 2, 1)),
        (TipoEnemigo.MINI_JEFE, (90, 10, 6, 4, 3)),
        (TipoEnemigo.GRAN_JEFE, (120, 15, 10, 6, 5)),
    ],
)
def test_stats_by_rank(tipo, stats):
    e = Enemigo("X", tipo)
    assert (e.hp, e.atk, e.defensa, e.spd, e.lck) == stats


def test_keeps_name_and_type():
    e = Enemigo("Señor Oscuro", TipoEnemigo.GRAN_JEFE)
    assert e.nombre == "Señor Oscuro"
    assert e.tipo is TipoEnemigo.GRAN_JEFE
    assert e.esta_vivo()


def test_bosses_are_stronger_than_soldiers():
    soldado = Enemigo("a", TipoEnemigo.SOLDADO)
    mini = Enemigo("b", TipoEnemigo.MINI_JEFE)
    jefe = Enemigo("c", TipoEnemigo.GRAN_JEFE)
    assert soldado.hp < mini.hp < jefe.hp
    assert soldado.atk < mini.atk < jefe.atk