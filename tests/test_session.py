# tests/test_session.py
import stat
from pathlib import Path

from marketplace import FileSessionStore, MemorySessionStore, SessionState


def test_memory_store_lifecycle():
    s = MemorySessionStore()
    assert s.get() is None
    assert s.state is SessionState.LOGGED_OUT
    s.set("abc")
    assert s.get() == "abc"
    assert s.state is SessionState.LOGGED_IN
    s.clear()
    assert s.get() is None


def test_file_store_survives_new_instance(tmp_path):
    path = tmp_path / "nested" / "token"
    FileSessionStore(path).set("abc")
    assert FileSessionStore(path).get() == "abc"


def test_file_store_is_owner_only(tmp_path):
    path = tmp_path / "dir" / "token"
    FileSessionStore(path).set("abc")
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert stat.S_IMODE(path.parent.stat().st_mode) == 0o700


def test_file_store_overwrites_previous_token(tmp_path):
    s = FileSessionStore(tmp_path / "token")
    s.set("first-long-token")
    s.set("b")
    assert s.get() == "b"


def test_clear_removes_any_prior_value(tmp_path):
    s = FileSessionStore(tmp_path / "token")
    s.set("abc")
    s.clear()
    assert s.get() is None
    # clearing twice is fine
    s.clear()
    assert s.get() is None


def test_unreadable_store_reads_as_no_token(tmp_path):
    path = tmp_path / "token"
    path.mkdir()
    s = FileSessionStore(path)
    assert s.get() is None
    s.clear()
    assert s.get() is None


def test_failed_write_is_not_fatal(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    s = FileSessionStore(blocker / "token")
    s.set("abc")
    assert s.get() is None


def test_token_read_back_verbatim(tmp_path):
    s = FileSessionStore(tmp_path / "token")
    s.set(" tok \n")
    assert s.get() == " tok \n"


def test_clear_blanks_token_when_unlink_fails(tmp_path, monkeypatch):
    s = FileSessionStore(tmp_path / "token")
    s.set("abc")

    def refuse(self, *args, **kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", refuse)
    s.clear()
    assert s.path.exists()
    assert s.get() is None
