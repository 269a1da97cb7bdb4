from labirinto.cli import main

SAMPLE = "#####\n#S..#\n#.#E#\n#####\n"


def _write(tmp_path):
    path = tmp_path / "mapa.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_main_reports_maze_and_population(tmp_path, capsys):
    path = _write(tmp_path)
    assert main([str(path), "--size", "2", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Posicao Inicial (S) do labirinto: (1, 1)" in out
    assert "Posicao Final (E) do labirinto: (2, 3)" in out
    assert SAMPLE in out
    assert "Total de individuos: 2" in out
    assert "Individuo [1]: " in out


def test_main_is_reproducible_with_seed(tmp_path, capsys):
    path = _write(tmp_path)
    main([str(path), "--size", "3", "--seed", "11"])
    first = capsys.readouterr().out
    main([str(path), "--size", "3", "--seed", "11"])
    second = capsys.readouterr().out
    assert first == second


def test_main_empty_population(tmp_path, capsys):
    path = _write(tmp_path)
    assert main([str(path), "--size", "0"]) == 0
    assert "A população está vazia." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "ERRO ao abrir o arquivo" in capsys.readouterr().err


def test_main_invalid_maze(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("####\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "posições" in capsys.readouterr().err