"""
Tests for history persistence and OS detection helpers.
"""

import pytest

from archie.utils import osdetect
from archie.utils.cache import read_history, write_history


class TestHistory:
    def test_missing_file_is_empty(self, tmp_path):
        assert read_history(tmp_path / "missing") == []

    def test_keeps_most_recent(self, tmp_path):
        path = tmp_path / "history"
        write_history(path, [str(n) for n in range(150)], limit=100)
        lines = read_history(path)
        assert len(lines) == 100
        assert lines[0] == "50"
        assert lines[-1] == "149"

    def test_drops_empty_entries(self, tmp_path):
        path = tmp_path / "history"
        write_history(path, ["u", "", "i"])
        assert path.read_text() == "u\ni\n"


class TestOsDetect:
    @pytest.fixture(autouse=True)
    def linux(self, monkeypatch):
        monkeypatch.setattr(osdetect.platform, "system", lambda: "Linux")

    def release(self, tmp_path, text):
        path = tmp_path / "os-release"
        path.write_text(text)
        return path

    def test_arch(self, tmp_path):
        assert osdetect.is_arch_based(self.release(tmp_path, 'NAME="Arch Linux"\nID=arch\n'))

    def test_derivative_by_id_like(self, tmp_path):
        path = self.release(tmp_path, "ID=somedistro\nID_LIKE=arch\n")
        assert osdetect.is_arch_based(path)

    def test_debian(self, tmp_path):
        path = self.release(tmp_path, "# comment\nID=ubuntu\nID_LIKE=debian\n")
        assert not osdetect.is_arch_based(path)
        assert osdetect.read_os_release(path)["ID"] == "ubuntu"

    def test_missing_file(self, tmp_path):
        assert not osdetect.is_arch_based(tmp_path / "missing")

    def test_not_linux(self, tmp_path, monkeypatch):
        monkeypatch.setattr(osdetect.platform, "system", lambda: "Darwin")
        assert not osdetect.is_arch_based(self.release(tmp_path, "ID=arch\n"))
