from sqmatrix.cli import main


def test_main_reads_given_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("2\n1 2\n3 4\n5 6\n7 8\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_defaults_to_input_txt(tmp_path, monkeypatch):
    (tmp_path / "input.txt").write_text("1\n5\n6\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "sqmatrix:" in capsys.readouterr().err


def test_main_malformed_file_fails(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3\n1 2 3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "sqmatrix:" in capsys.readouterr().err