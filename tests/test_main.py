import os

import main


def test_main_fits_and_exports(tmp_path, capsys):
    data = tmp_path / "points.txt"
    data.write_text("1 2\n2 4.1\n3 5.9\n4 8.2\n")
    values = tmp_path / "values.txt"
    values.write_text("2 4 4 4 5 5 7 9\n")
    out_dir = tmp_path / "out"

    code = main.main(
        [
            str(data),
            "--output-dir",
            str(out_dir),
            "--preferences",
            str(tmp_path / "prefs.json"),
            "--mode",
            "dec",
            "--digits",
            "3",
            "--save-format",
            "--sample",
            str(values),
        ]
    )

    assert code == 0
    assert os.path.exists(out_dir / "least_squares_detailed_data.csv")
    assert os.path.exists(out_dir / "least_squares_data.csv")
    assert os.path.exists(tmp_path / "prefs.json")
    printed = capsys.readouterr().out
    assert "y = " in printed
    assert "Values 1: n=8 mean=5" in printed


def test_main_without_points_writes_no_csv(tmp_path, capsys):
    data = tmp_path / "empty.txt"
    data.write_text("X,Y\nno numbers here\n")
    out_dir = tmp_path / "out"

    code = main.main(
        [str(data), "--output-dir", str(out_dir), "--preferences", str(tmp_path / "p.json")]
    )

    assert code == 0
    assert not os.path.exists(out_dir / "least_squares_detailed_data.csv")
    assert not os.path.exists(out_dir / "least_squares_data.csv")
    assert "y = ax + b" in capsys.readouterr().out


def test_main_missing_input(tmp_path):
    assert main.main([str(tmp_path / "missing.txt"), "--preferences", str(tmp_path / "p.json")]) == 1
