from bbow.cli import main


def test_cli_reports_counts(tmp_path, capsys):
    p = tmp_path / "doc.txt"
    p.write_text("Can't stop this! Stop!", encoding="utf-8")
    rc = main([str(p), "--top", "1", "--match", "stop", "Stop"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Unique words:  2" in out
    assert "Total words:   3" in out
    lines = [l.split() for l in out.splitlines()]
    assert ["stop", ":", "2"] in lines
    assert ["Stop", ":", "0"] in lines


def test_cli_folder_and_words(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("beta alpha", encoding="utf-8")
    (tmp_path / "b.txt").write_text("Alpha", encoding="utf-8")
    assert main([str(tmp_path), "--words", "--top", "0"]) == 0
    out = capsys.readouterr().out
    assert "  alpha\t2\n  beta\t1\n" in out


def test_cli_csv_requires_column(tmp_path, capsys):
    p = tmp_path / "m.csv"
    p.write_text("title,plot\nA,Space\n", encoding="utf-8")
    assert main([str(p)]) == 2
    assert "No input could be read." in capsys.readouterr().err

    assert main([str(p), "--csv-column", "plot"]) == 0
    assert "Total words:   1" in capsys.readouterr().out


def test_cli_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 2
