import os

from kwaymerge.cli import build_paths, main


def _write(directory, name, values):
    (directory / f"{name}.txt").write_text(
        "".join(f"{v}\n" for v in values), encoding="utf-8"
    )


def test_build_paths_default_dir():
    assert build_paths(["a", "b"]) == ["../test_data/a.txt", "../test_data/b.txt"]


def test_build_paths_custom_dir(tmp_path):
    paths = build_paths(["x"], str(tmp_path))
    assert paths == [os.path.join(str(tmp_path), "x.txt")]


def test_build_paths_empty():
    assert build_paths([], "data") == []


def test_main_prints_merged_and_check(tmp_path, capsys):
    _write(tmp_path, "a", [1, 4, 9])
    _write(tmp_path, "b", [2, 3, 10])
    code = main(["--data-dir", str(tmp_path), "a", "b"])
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert code == 0
    assert lines[0] == "-----MERGED LIST-----"
    merged = [int(v) for v in lines[1].split()]
    assert merged == sorted([1, 4, 9, 2, 3, 10])
    assert lines[3] == "-----TEST-----"
    assert lines[4] == lines[1]
    assert lines[5] == "DATA SE SHODUJI"


def test_main_reports_mismatch_for_unsorted_input(tmp_path, capsys):
    _write(tmp_path, "a", [5, 1])
    _write(tmp_path, "b", [3])
    code = main(["--data-dir", str(tmp_path), "a", "b"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.rstrip("\n").split("\n")[-1] == "CHYBA"


def test_main_without_names(capsys):
    code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert out.endswith("DATA SE SHODUJI\n")


def test_main_missing_file_fails(tmp_path, capsys):
    code = main(["--data-dir", str(tmp_path), "nope"])
    err = capsys.readouterr().err
    assert code == 1
    assert "kwaymerge" in err


def test_main_bad_data_fails(tmp_path, capsys):
    (tmp_path / "bad.txt").write_text("one\n", encoding="utf-8")
    code = main(["--data-dir", str(tmp_path), "bad"])
    assert code == 1
    assert capsys.readouterr().out == ""