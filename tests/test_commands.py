import pytest

from oslabkit.commands import (
    cat,
    cat_main,
    grep,
    grep_main,
    list_dir,
    ls_main,
    remove,
    rm_main,
)


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first line\nhello this for grep test\nlast line\n")
    return path


def test_cat_returns_contents(sample):
    assert cat(sample) == sample.read_text()


def test_cat_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        cat(tmp_path / "missing.txt")


def test_cat_main_prints_contents_and_newline(sample, capsys):
    assert cat_main([str(sample)]) == 0
    assert capsys.readouterr().out == sample.read_text() + "\n"


def test_cat_main_without_argument(capsys):
    assert cat_main([]) == 1
    assert capsys.readouterr().out == "File not entered\n"


def test_cat_main_missing_file(tmp_path, capsys):
    assert cat_main([str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().out == "File does not exist\n"


def test_grep_finds_matching_lines(sample):
    assert grep(sample, "hello") == ["hello this for grep test\n"]


def test_grep_every_result_contains_pattern(sample):
    found = grep(sample, "line")
    assert len(found) == 2
    assert all("line" in line for line in found)


def test_grep_no_match(sample):
    assert grep(sample, "absent") == []


def test_grep_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        grep(tmp_path / "nope", "x")


def test_grep_main_with_arguments(sample, capsys):
    assert grep_main([str(sample), "hello"]) == 0
    assert capsys.readouterr().out == "hello this for grep test\n"


def test_grep_main_prompts(sample, capsys, monkeypatch):
    answers = iter([str(sample), "hello"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    assert grep_main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Enter file name\nEnter pattern to be searched\nhello this for grep test\n"
    )


def test_grep_main_missing_file(tmp_path, capsys):
    assert grep_main([str(tmp_path / "nope"), "x"]) == 1
    assert capsys.readouterr().out == "File not found\n"


def test_list_dir_includes_dot_entries(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    names = list_dir(tmp_path)
    assert names[:2] == [".", ".."]
    assert sorted(names[2:]) == ["a.txt", "b.txt"]


def test_list_dir_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_dir(tmp_path / "absent")


def test_ls_main_prints_names(tmp_path, capsys):
    (tmp_path / "README.md").write_text("x")
    assert ls_main([str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == sorted([".", "..", "README.md"])


def test_ls_main_without_argument(capsys):
    assert ls_main([]) == 1
    assert capsys.readouterr().out == "\n You are not passing the directory\n"


def test_ls_main_missing_directory(tmp_path, capsys):
    target = str(tmp_path / "gone")
    assert ls_main([target]) == 1
    assert capsys.readouterr().out == f"\nCannot open it does't exist {target} file!\n"


def test_remove_file(sample):
    remove(sample)
    assert not sample.exists()


def test_remove_empty_directory(tmp_path):
    folder = tmp_path / "empty"
    folder.mkdir()
    remove(folder)
    assert not folder.exists()


def test_remove_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        remove(tmp_path / "absent")


def test_rm_main_reports_success(sample, capsys):
    assert rm_main([str(sample)]) == 0
    assert capsys.readouterr().out == "File removed\n"
    assert not sample.exists()


def test_rm_main_reports_failure(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda: str(tmp_path / "absent"))
    rm_main([])
    assert capsys.readouterr().out == "Enter source filename\nFile cannot be removed\n"