"""Append-only score file: saving results and reading the first entries."""

from __future__ import annotations

import os
import time

SCORES_FILE = "scores.txt"


def guardar_score(
    jugador: str,
    sala: int,
    salud_perdida: int,
    path: str | os.PathLike[str] = SCORES_FILE,
) -> None:
    """Append one line: alias, rooms cleared, health lost and a timestamp."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{jugador} {sala} {salud_perdida} {time.ctime()}\n")


def top_scores(path: str | os.PathLike[str] = SCORES_FILE, limit: int = 5) -> list[str]:
    """Return up to ``limit`` lines from the start of the score file."""
    try:
        with open(path, encoding="utf-8") as f:
            lineas = []
            for linea in f:
                if len(lineas) >= limit:
                    break
                lineas.append(linea.rstrip("\n"))
            return lineas
    except FileNotFoundError:
        return []


def mostrar_top_scores(path: str | os.PathLike[str] = SCORES_FILE) -> None:
    print("=== TOP SCORES ===")
    for linea in top_scores(path):
        print(linea)