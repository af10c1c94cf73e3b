import re

from mazmorra.scores import guardar_score, mostrar_top_scores, top_scores

_LINEA = re.compile(r"^Ana 3 12 \w{3} \w{3} [ \d]\d \d\d:\d\d:\d\d \d{4}$")


def test_saved_line_format(tmp_path):
    path = tmp_path / "scores.txt"
    guardar_score("Ana", 3, 12, path)
    lineas = top_scores(path)
    assert len(lineas) == 1
    assert _LINEA.match(lineas[0])


def test_scores_are_appended_in_order(tmp_path):
    path = tmp_path / "scores.txt"
    for i in range(7):
        guardar_score(f"p{i}", i, 0, path)
    lineas = top_scores(path)
    assert len(lineas) == 5
    assert [l.split()[0] for l in lineas] == ["p0", "p1", "p2", "p3", "p4"]


def test_limit_is_respected(tmp_path):
    path = tmp_path / "scores.txt"
    for i in range(4):
        guardar_score("x", i, 0, path)
    assert len(top_scores(path, limit=2)) == 2


def test_missing_file_gives_no_scores(tmp_path):
    assert top_scores(tmp_path / "nada.txt") == []


def test_mostrar_prints_header_and_lines(tmp_path, capsys):
    path = tmp_path / "scores.txt"
    guardar_score("Ana", 3, 12, path)
    mostrar_top_scores(path)
    lineas = capsys.readouterr().out.splitlines()
    assert lineas[0] == "=== TOP SCORES ==="
    assert _LINEA.match(lineas[1])
    assert len(lineas) == 2