import dataclasses

import pytest

from mazmorra.equipo import Equipo


def test_defaults_are_empty_gear():
    eq = Equipo()
    assert eq.nombre == "Ninguno"
    assert (eq.bonus_hp, eq.bonus_atk, eq.bonus_def, eq.bonus_lck) == (0, 0, 0, 0)


def test_describir_format():
    eq = Equipo("Espada", 1, 2, 3, 4)
    assert eq.describir() == "Espada | +HP: 1 +ATK: 2 +DEF: 3 +LCK: 4"


def test_mostrar_prints_description(capsys):
    eq = Equipo("Escudo", 0, 0, 5, 0)
    eq.mostrar()
    assert capsys.readouterr().out == eq.describir() + "\n"


def test_equipo_is_immutable():
    eq = Equipo("Anillo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        eq.bonus_atk = 3
    assert eq.bonus_atk == 0
    assert eq.describir() == "Anillo | +HP: 0 +ATK: 0 +DEF: 0 +LCK: 0"