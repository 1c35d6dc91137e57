import pytest

from yulepuzzles import inputs


class _FakeResponse:
    def __init__(self, body):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_reads_cached_file(tmp_path):
    (tmp_path / "day07.txt").write_text("cached puzzle\n", encoding="utf-8")
    assert inputs.get_input(7, tmp_path) == "cached puzzle\n"


def test_cached_file_is_used_without_session(tmp_path, monkeypatch):
    monkeypatch.delenv(inputs.SESSION_VARIABLE, raising=False)
    (tmp_path / "day12.txt").write_text("abc", encoding="utf-8")
    assert inputs.get_input(12, tmp_path) == "abc"


def test_missing_session_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(inputs.SESSION_VARIABLE, raising=False)
    with pytest.raises(inputs.MissingSessionError):
        inputs.get_input(3, tmp_path / "cache")


def test_download_is_cached(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(inputs.SESSION_VARIABLE, "token")
    seen = []

    def fake_urlopen(request):
        seen.append((request.full_url, request.get_header("Cookie")))
        return _FakeResponse(b"1 2\n3 4\n")

    monkeypatch.setattr(inputs, "urlopen", fake_urlopen)
    cache_dir = tmp_path / "cache"

    assert inputs.get_input(3, cache_dir) == "1 2\n3 4\n"
    assert seen == [(inputs.INPUT_URL.format(day=3), "session=token")]
    assert (cache_dir / "day03.txt").read_text(encoding="utf-8") == "1 2\n3 4\n"

    assert inputs.get_input(3, cache_dir) == "1 2\n3 4\n"
    assert len(seen) == 1