import pytest

from bbow.corpus import (
    bag_from_csv,
    bag_from_folder,
    bag_from_paths,
    bags_from_folder,
    read_csv_column,
    read_txt,
)
from bbow.wordbag import WordBag


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_read_txt(tmp_path):
    p = _write(tmp_path / "doc.txt", "Hello world.")
    assert read_txt(p) == ("doc.txt", "Hello world.")


def test_bag_from_paths_accumulates_into_given_bag(tmp_path):
    a = _write(tmp_path / "a.txt", "Hello world.")
    b = _write(tmp_path / "b.txt", "hello again")
    bag = WordBag().extend_from_text("Hello")
    out = bag_from_paths([a, b], bag)
    assert out is bag
    assert bag.match_count("hello") == 3
    assert bag.len() == 3


def test_bag_from_folder_skips_other_files(tmp_path):
    _write(tmp_path / "one.txt", "red fish")
    _write(tmp_path / "two.txt", "blue fish")
    _write(tmp_path / "notes.md", "ignored words")
    (tmp_path / "sub.txt").mkdir()
    bag = bag_from_folder(tmp_path)
    assert bag.as_dict() == {"blue": 1, "fish": 2, "red": 1}


def test_bag_from_folder_empty(tmp_path):
    assert bag_from_folder(tmp_path).is_empty()


def test_bags_from_folder(tmp_path):
    _write(tmp_path / "one.txt", "red fish")
    _write(tmp_path / "two.txt", "blue fish")
    bags = bags_from_folder(tmp_path)
    assert sorted(bags) == ["one.txt", "two.txt"]
    assert bags["two.txt"].match_count("blue") == 1
    assert bags["one.txt"].match_count("blue") == 0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        bag_from_paths([tmp_path / "nope.txt"])


def test_read_csv_column_drops_blank_rows(tmp_path):
    p = _write(tmp_path / "movies.csv", "title,plot\nA,A space mission.\nB,\nC,   \n")
    assert read_csv_column(p, "plot") == ["A space mission."]


def test_read_csv_column_missing_column(tmp_path):
    p = _write(tmp_path / "movies.csv", "title,plot\nA,x\n")
    with pytest.raises(ValueError, match="summary"):
        read_csv_column(p, "summary")


def test_bag_from_csv(tmp_path):
    p1 = _write(tmp_path / "1970s.csv", "title,plot\nAlien,Space horror. Space!\n")
    p2 = _write(tmp_path / "1980s.csv", "title,plot\nAliens,More space marines\n")
    bag = bag_from_csv([p1, p2], "plot")
    assert bag.match_count("space") == 3
    assert bag.match_count("alien") == 0
    assert bag.count() == 6
