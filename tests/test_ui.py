import pytest

from rustlings import ui


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_no_emoji_set_to_empty_still_counts(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Compilation failed")
    assert capsys.readouterr().out == "! Compilation failed\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran it")
    assert capsys.readouterr().out == "✓ Successfully ran it\n"


def test_warn_with_emoji(capsys):
    ui.warn("broken")
    out = capsys.readouterr().out
    assert out.startswith("⚠")
    assert out.rstrip("\n").endswith(" broken")


def test_success_with_emoji(capsys):
    ui.success("done [really]")
    out = capsys.readouterr().out
    assert out == "✅ done [really]\n"