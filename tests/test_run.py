"""
Tests for the ``run.py`` launcher.
"""

import pytest

import run


class TestMain:
    def test_exits_with_status_1_when_startup_fails(self, monkeypatch):
        async def failed_serve():
            return False

        monkeypatch.setattr(run, "serve", failed_serve)

        with pytest.raises(SystemExit) as excinfo:
            run.main()

        assert excinfo.value.code == 1

    def test_returns_normally_after_clean_shutdown(self, monkeypatch):
        async def clean_serve():
            return True

        monkeypatch.setattr(run, "serve", clean_serve)

        assert run.main() is None
