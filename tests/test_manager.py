import pytest

from inimanager import (
    EmptyInputError, IniManager, IniSection, InvalidArgument, parse
)


def test_sample_loaded(manager):
    assert sorted(manager) == ["paths", "window"]
    assert manager.get("window", "width") == "800"
    assert manager.get("window", "height") == "600"
    assert manager.get("window", "title") == "MyApp"
    assert manager.get("paths", "home") == "/home/user"
    assert not any("orphan" in manager[h] for h in list(manager))


def test_default_store_is_empty():
    ini = IniManager()
    assert len(ini) == 0
    assert ini.to_string() == ""


@pytest.mark.parametrize(
    "header, key",
    [("", "k"), ("window", ""), ("missing", "k")],
)
def test_get_invalid_arguments(manager, header, key):
    with pytest.raises(InvalidArgument):
        manager.get(header, key)


def test_get_missing_key_reads_default(manager):
    assert manager.get("window", "depth") == ""
    assert "depth" not in manager["window"]


def test_get_header_rejects_empty_name(manager):
    with pytest.raises(InvalidArgument):
        manager.get_header("")
    with pytest.raises(InvalidArgument):
        manager[""]


def test_get_header_creates_section(manager):
    sect = manager.get_header("fresh")
    assert isinstance(sect, IniSection)
    assert "fresh" in manager
    assert "[fresh]" not in manager.to_string()


def test_section_handle_writes_through(manager):
    manager["window"]["depth"] = "32"
    assert manager.get("window", "depth") == "32"
    manager.get_header("window")["depth"] = ""
    assert manager.get("window", "depth") == ""


def test_get_data_is_a_snapshot(manager):
    snap = manager.get_data()
    snap["window"]["width"] = "1"
    snap["extra"] = {"k": "v"}
    assert manager.get("window", "width") == "800"
    assert "extra" not in manager


def test_set_creates_and_overwrites():
    ini = IniManager()
    ini.set("s", "k", "v")
    ini.set("s", "k", "w")
    assert ini.get("s", "k") == "w"
    assert ini.to_string() == "[s]\nk=w\n\n"


def test_set_empty_value_removes_key():
    ini = IniManager()
    ini.set("s", "k", "v")
    ini.set("s", "k", "")
    assert "k" not in ini.get_data()["s"]
    assert ini.to_string() == ""


def test_set_empty_value_on_missing_section_is_noop():
    ini = IniManager()
    ini.set("s", "k", "")
    assert "s" not in ini


@pytest.mark.parametrize("header, key", [("", "k"), ("s", "")])
def test_set_invalid_arguments(header, key):
    with pytest.raises(InvalidArgument):
        IniManager().set(header, key, "v")


def test_round_trip_of_set_values():
    ini = IniManager()
    ini.set("db", "host", "localhost")
    ini.set("db", "port", "5432")
    ini.set("cache", "ttl", "60")
    ini.set("cache", "path", "/tmp/x\\;y")
    assert parse(ini.to_string()) == ini.get_data()


def test_load_replaces_previous_state(manager):
    manager.load("[other]\nk=v")
    assert list(manager) == ["other"]


def test_failed_load_leaves_store_empty(manager):
    with pytest.raises(EmptyInputError):
        manager.load("")
    assert len(manager) == 0


def test_str_matches_to_string(manager):
    assert str(manager) == manager.to_string()


def test_load_rejects_path_as_text(tmp_path):
    ini = IniManager()
    with pytest.raises(TypeError):
        ini.load(tmp_path / "settings.ini")
