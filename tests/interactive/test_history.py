from pathlib import Path

from redis_shell.interactive.history import CommandHistory, mask_line


def test_auth_password_is_masked_in_memory_and_on_disk(history_path: Path, output):
    history = CommandHistory(history_path, output)

    history.append_string("auth mypassword")
    history.save()

    assert history.entries == ["auth ******"]
    assert history_path.read_text() == "auth ******\n"
    assert "mypassword" not in history_path.read_text()


def test_connect_password_is_masked(history_path: Path, output):
    history = CommandHistory(history_path, output)

    history.append_string("connect 10.0.0.1 6380 hunter2")

    assert history.get_strings() == ["connect 10.0.0.1 6380 ******"]


def test_entries_are_normalized_and_blank_lines_skipped(history_path: Path, output):
    history = CommandHistory(history_path, output)

    history.append_string("  set   k  'a b' ")
    history.append_string("   ")

    assert history.entries == ["set k 'a b'"]


def test_load_merges_previous_file(history_path: Path, output):
    history_path.write_text("get a\n\nget b\n")
    history = CommandHistory(history_path, output)

    history.load_file()
    history.append_string("get c")
    history.save()

    # prompt_toolkit expects newest first when loading.
    assert list(history.load_history_strings()) == ["get c", "get b", "get a"]
    assert history_path.read_text().splitlines() == ["get a", "get b", "get c"]
    assert len(history.entries) == len(history_path.read_text().splitlines())


def test_non_utf8_history_survives_load_and_save(history_path: Path, output):
    history_path.write_bytes(b"get caf\xe9\nping\n")
    history = CommandHistory(history_path, output)

    history.load_file()
    history.save()

    assert len(history.entries) == 2
    assert history_path.read_bytes() == b"get caf\xe9\nping\n"
    assert output.text == ""


def test_missing_file_is_an_empty_history(tmp_path: Path, output):
    history = CommandHistory(tmp_path / "missing" / "history", output)

    history.load_file()

    assert history.entries == []
    assert output.text == ""


def test_write_failure_is_reported_not_raised(tmp_path: Path, output):
    history = CommandHistory(tmp_path, output)  # a directory cannot be opened for writing
    history.append_string("ping")

    history.save()

    assert output.text.startswith("Error writing history file:")


def test_mask_line():
    assert mask_line("AUTH pw") == "AUTH ******"
    assert mask_line("get auth") == "get auth"
