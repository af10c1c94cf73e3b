"""Interactive game: pick a party, fight room by room, record the score."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

from mazmorra.enemigo import Enemigo, TipoEnemigo
from mazmorra.equipo import Equipo
from mazmorra.heroe import HP_INICIAL, Heroe
from mazmorra.scores import SCORES_FILE, guardar_score, mostrar_top_scores

Entrada = Callable[[str], str]

NOMBRES_HEROES = ("Ayla", "Tyr", "Kira", "Nash", "Luna", "Zorak")
TAMANO_EQUIPO = 3

_ENEMIGOS = (
    ("Goblin", TipoEnemigo.SOLDADO),
    ("Orco", TipoEnemigo.SOLDADO),
    ("Liche", TipoEnemigo.SOLDADO),
    ("Nigromante", TipoEnemigo.SOLDADO),
    ("Ogro", TipoEnemigo.SOLDADO),
    ("Gólem", TipoEnemigo.SOLDADO),
    ("Caballero Negro", TipoEnemigo.MINI_JEFE),
    ("Demonio", TipoEnemigo.SOLDADO),
    ("Señor Oscuro", TipoEnemigo.GRAN_JEFE),
)


def _resolver(entrada: Entrada | None) -> Entrada:
    return entrada if entrada is not None else input


def _leer_entero(entrada: Entrada, prompt: str) -> int | None:
    try:
        return int(entrada(prompt).strip())
    except ValueError:
        return None


def mostrar_heroes(heroes: Sequence[Heroe]) -> None:
    for numero, heroe in enumerate(heroes, start=1):
        print(f"{numero}. {heroe.nombre} | HP: {heroe.hp}")


def elegir_heroe(heroes: Sequence[Heroe], entrada: Entrada | None = None) -> int:
    """Ask until a valid 1-based hero number is given; return its index."""
    if not heroes:
        raise ValueError("no heroes to choose from")
    entrada = _resolver(entrada)
    while True:
        eleccion = _leer_entero(entrada, "Elige un héroe por número: ")
        if eleccion is not None and 1 <= eleccion <= len(heroes):
            return eleccion - 1


def usar_cofre(equipo: Sequence[Heroe], entrada: Entrada | None = None) -> None:
    """Open a chest: an amulet for one hero, or three potions of 10 HP."""
    entrada = _resolver(entrada)
    print("Has encontrado un cofre:\n1. Amuleto (+2 LCK)\n2. 3 Pociones")
    eleccion = _leer_entero(entrada, "Elige: ")

    if eleccion == 1:
        heroe = equipo[elegir_heroe(equipo, entrada)]
        print(f"Equipaste el amuleto a {heroe.nombre} (+2 LCK)")
        heroe.subir_stats()
    else:
        for numero in range(1, 4):
            print(f"Elige héroe para poción {numero}: ")
            heroe = equipo[elegir_heroe(equipo, entrada)]
            print(f"Curando a {heroe.nombre} (+10 HP)")
            heroe.curar(10)


def combate_interactivo(
    heroe: Heroe, enemigo: Enemigo, entrada: Entrada | None = None
) -> bool:
    """Duel until one side falls, asking the player each turn; True if the enemy fell."""
    entrada = _resolver(entrada)
    while heroe.esta_vivo() and enemigo.esta_vivo():
        print(f"\nTurno de {heroe.nombre} | HP: {heroe.hp}/{heroe.hp_max}")
        print("1. Atacar\n2. Pasar turno")
        accion = _leer_entero(entrada, "Tu acción: ")

        if accion == 1:
            danio = max(1, heroe.calcular_danio() - enemigo.defensa)
            enemigo.recibir_danio(danio)
            print(f"{heroe.nombre} inflige {danio} a {enemigo.nombre}")

        if enemigo.esta_vivo():
            danio = max(1, enemigo.calcular_danio() - heroe.defensa)
            heroe.recibir_danio(danio)
            print(f"{enemigo.nombre} inflige {danio} a {heroe.nombre}")

    if not enemigo.esta_vivo():
        print(f"{enemigo.nombre} fue derrotado.")
        return True
    print(f"{heroe.nombre} ha caído.")
    return False


def evento_sala_especial(
    equipo: Sequence[Heroe], sala: int, entrada: Entrada | None = None
) -> None:
    """Run the special event of room ``sala``, if it has one."""
    entrada = _resolver(entrada)
    if sala == 1:
        print("\n=== Mercado Inicial ===")
        arma = Equipo("Arma del Mercado", bonus_atk=5, bonus_lck=1)
        equipo[elegir_heroe(equipo, entrada)].equipar(arma)
    elif sala == 3:
        print("\n=== Cofre Misterioso ===")
        usar_cofre(equipo, entrada)
    elif sala == 6:
        print("\n=== Tesoro Raro ===")
        for heroe in equipo:
            heroe.equipar(Equipo("Tesoro Raro", bonus_atk=8, bonus_lck=2))
    elif sala == 8:
        print("\n=== Santo Grial ===")
        for heroe in equipo:
            heroe.curar(999)
        print("¡Todos los héroes se han curado por completo!")


def _jugar(entrada: Entrada, rng: random.Random, scores_path: str) -> None:
    print("=== Natal Combat ===")
    jugador = entrada("Ingresa tu alias: ")

    pool = [Heroe(nombre, rng=rng) for nombre in NOMBRES_HEROES]
    equipo: list[Heroe] = []

    print(f"Selecciona {TAMANO_EQUIPO} héroes:")
    mostrar_heroes(pool)
    while len(equipo) < TAMANO_EQUIPO:
        equipo.append(pool.pop(elegir_heroe(pool, entrada)))

    enemigos = [Enemigo(nombre, tipo, rng=rng) for nombre, tipo in _ENEMIGOS]
    sala_actual = 0

    for indice, enemigo in enumerate(enemigos):
        print(f"\n-- Sala {indice + 1} --")

        if indice == 2:
            usar_cofre(equipo, entrada)
        if indice == 6:
            print("¡Has encontrado el Santo Grial! Todos tus héroes recuperan salud.")
            for heroe in equipo:
                heroe.curar(999)

        print(f"Te enfrentas a: {enemigo.nombre}")
        for heroe in equipo:
            if enemigo.esta_vivo() and heroe.esta_vivo():
                combate_interactivo(heroe, enemigo, entrada)

        if enemigo.esta_vivo():
            print("No pudiste superar esta sala. Fin del juego.")
            break
        sala_actual += 1

    salud_perdida = sum(HP_INICIAL - h.hp for h in equipo)
    guardar_score(jugador, sala_actual, salud_perdida, scores_path)
    print("\nPuntaje registrado. Tus estadísticas:")
    mostrar_top_scores(scores_path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mazmorra", description="Dungeon crawler.")
    parser.add_argument("--scores", default=SCORES_FILE, help="score file to append to")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        _jugar(input, random.Random(args.seed), args.scores)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())