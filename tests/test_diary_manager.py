import pytest

from pdtools.date import Date
from pdtools.diary_manager import Diary, DiaryManager, DiaryNotFoundError
from pdtools.structures import (
    FILE_HEADER_STR,
    Header,
    HeaderError,
    Metadata,
    Section,
)

ALL_START = Date(1, 1, 1)
ALL_END = Date(9999, 12, 31)


def make_diary(date, title, lines):
    return Diary(Metadata(date, title), list(lines))


@pytest.fixture
def path(tmp_path):
    return str(tmp_path / "diary.pdi")


def test_new_manager_is_empty(path):
    manager = DiaryManager(path)
    assert manager.get_metadata_list(ALL_START, ALL_END) == []


def test_add_and_get(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 5), "Walk", ["sunny", "long"]))
    diary = manager.get_diary(Date(2024, 1, 5))
    assert diary.valid
    assert diary.metadata.title == "Walk"
    assert diary.content == ["sunny", "long"]


def test_invalid_diary_is_ignored(path):
    manager = DiaryManager(path)
    diary = Diary(Metadata(Date(2024, 1, 5), "x"), ["a"], valid=False)
    manager.add_diary(diary)
    with pytest.raises(DiaryNotFoundError):
        manager.get_diary(Date(2024, 1, 5))


def test_empty_file_layout(path):
    DiaryManager(path).save()
    with open(path, encoding="utf-8") as stream:
        assert stream.read() == FILE_HEADER_STR + "\n0 2 2 2\n"


def test_save_and_reload_round_trip(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 3, 1), "Later", ["b1", "", "b3"]))
    manager.add_diary(make_diary(Date(2024, 1, 1), "Earlier", ["a1"]))
    manager.save()

    reloaded = DiaryManager(path)
    assert [str(m) for m in reloaded.get_metadata_list(ALL_START, ALL_END)] == [
        "2024-01-01 Earlier",
        "2024-03-01 Later",
    ]
    assert reloaded.get_diary(Date(2024, 3, 1)).content == ["b1", "", "b3"]
    assert reloaded.get_diary(Date(2024, 1, 1)).content == ["a1"]


def test_saved_file_length_matches_header(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2023, 5, 6), "One", ["x", "y"]))
    manager.add_diary(make_diary(Date(2023, 5, 7), "Two", ["z"]))
    manager.save()
    with open(path, encoding="utf-8") as stream:
        header = Header.parse(stream)
    with open(path, encoding="utf-8") as stream:
        line_count = len(stream.read().splitlines())
    assert header.num_diaries == 2
    assert line_count == header.start_line[Section.END_OF_FILE]


def test_metadata_line_format(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 5), "T", ["x", "y"]))
    manager.save()
    with open(path, encoding="utf-8") as stream:
        lines = stream.read().splitlines()
    assert lines[2] == "2024-01-05;T;0;2"
    assert lines[3:] == ["x", "y"]


def test_load_handwritten_file(path):
    text = (
        FILE_HEADER_STR + "\n"
        "2 2 4 7\n"
        "2024-03-01;B;0;2\n"
        "2024-01-01;A;2;1\n"
        "b1\nb2\na1\n"
    )
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text)
    manager = DiaryManager(path)
    assert manager.get_diary(Date(2024, 1, 1)).content == ["a1"]
    assert manager.get_diary(Date(2024, 3, 1)).content == ["b1", "b2"]
    assert manager.get_diary(Date(2024, 3, 1)).metadata.title == "B"


def test_load_rejects_foreign_file(path):
    with open(path, "w", encoding="utf-8") as stream:
        stream.write("something else\n")
    with pytest.raises(HeaderError):
        DiaryManager(path)


def test_remove_diary(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    manager.add_diary(make_diary(Date(2024, 1, 2), "B", ["b"]))
    manager.remove_diary(Date(2024, 1, 1))
    with pytest.raises(DiaryNotFoundError):
        manager.get_diary(Date(2024, 1, 1))
    assert manager.get_diary(Date(2024, 1, 2)).content == ["b"]


def test_remove_missing_raises(path):
    manager = DiaryManager(path)
    with pytest.raises(DiaryNotFoundError) as info:
        manager.remove_diary(Date(2024, 1, 1))
    assert info.value.date == Date(2024, 1, 1)


def test_remove_persists(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    manager.add_diary(make_diary(Date(2024, 1, 2), "B", ["b1", "b2"]))
    manager.save()

    again = DiaryManager(path)
    again.remove_diary(Date(2024, 1, 1))
    again.save()

    final = DiaryManager(path)
    assert [m.title for m in final.get_metadata_list(ALL_START, ALL_END)] == ["B"]
    assert final.get_diary(Date(2024, 1, 2)).content == ["b1", "b2"]


def test_add_after_remove_keeps_contents_apart(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    manager.add_diary(make_diary(Date(2024, 1, 2), "B", ["b"]))
    manager.remove_diary(Date(2024, 1, 1))
    manager.add_diary(make_diary(Date(2024, 1, 3), "C", ["c"]))
    assert manager.get_diary(Date(2024, 1, 2)).content == ["b"]
    assert manager.get_diary(Date(2024, 1, 3)).content == ["c"]


def test_metadata_list_range_is_inclusive_and_sorted(path):
    manager = DiaryManager(path)
    for day in (9, 3, 5, 1):
        manager.add_diary(make_diary(Date(2024, 2, day), f"d{day}", []))
    found = manager.get_metadata_list(Date(2024, 2, 3), Date(2024, 2, 5))
    assert [m.date for m in found] == [Date(2024, 2, 3), Date(2024, 2, 5)]
    assert [m.title for m in found] == ["d3", "d5"]


def test_metadata_list_reversed_range_raises(path):
    manager = DiaryManager(path)
    with pytest.raises(ValueError):
        manager.get_metadata_list(Date(2024, 2, 5), Date(2024, 2, 3))


def test_get_diary_returns_copy(path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    manager.get_diary(Date(2024, 1, 1)).content.append("extra")
    assert manager.get_diary(Date(2024, 1, 1)).content == ["a"]


def test_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = DiaryManager()
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    manager.save()
    assert (tmp_path / "diary.pdi").is_file()
    assert DiaryManager().get_diary(Date(2024, 1, 1)).metadata.title == "A"


def test_save_to_other_path(path, tmp_path):
    manager = DiaryManager(path)
    manager.add_diary(make_diary(Date(2024, 1, 1), "A", ["a"]))
    other = str(tmp_path / "copy.pdi")
    manager.save(other)
    assert DiaryManager(other).get_diary(Date(2024, 1, 1)).content == ["a"]