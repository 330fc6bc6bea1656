from rustdrill.ui import success, use_emoji, warn


def test_use_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert use_emoji() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert use_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = warn("Ran thing with errors")
    assert line == "! Ran thing with errors"
    assert "! Ran thing with errors" in capsys.readouterr().out


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = success("Successfully ran thing")
    assert line == "✓ Successfully ran thing"
    assert "Successfully ran thing" in capsys.readouterr().out


def test_emoji_symbols(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert warn("careful").startswith("⚠️")
    assert success("done").startswith("✅")
    out = capsys.readouterr().out
    assert "careful" in out
    assert "done" in out