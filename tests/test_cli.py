import json

import pytest

from mediaembed import cli


@pytest.fixture(autouse=True)
def _default_environment(monkeypatch):
    for name in ("MEDIAEMBED_PLAYERS", "MEDIAEMBED_DISABLED_PLAYERS", "MEDIAEMBED_VIDEO_WIDTH", "MEDIAEMBED_VIDEO_HEIGHT"):
        monkeypatch.delenv(name, raising=False)


def test_cli_renders_single_url(capsys):
    assert cli.main(["https://example.com/clip.mp4", "--width", "640", "--height", "360", "--block"]) == 0

    out = capsys.readouterr().out.strip()
    assert out.startswith('<div class="resourcecontent">')
    assert 'width="640" height="360"' in out


def test_cli_check_exit_codes(capsys):
    assert cli.main(["--check", "https://example.com/clip.mp3"]) == 0
    assert capsys.readouterr().out.strip() == "embeddable"

    assert cli.main(["--check", "https://example.com/notes.pdf"]) == 1
    assert capsys.readouterr().out.strip() == "not embeddable"


def test_cli_fallback_to_blank_prints_empty_line(capsys):
    assert cli.main(["https://example.com/notes.pdf", "--fallback-to-blank"]) == 0
    assert capsys.readouterr().out == "\n"


def test_cli_lists_players(capsys):
    assert cli.main(["--players"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [player["name"] for player in payload] == ["html5video", "html5audio", "link"]


def test_cli_requires_urls(capsys):
    assert cli.main([]) == 2
    assert "At least one URL" in capsys.readouterr().err


def test_cli_rejects_malformed_option():
    with pytest.raises(ValueError):
        cli.main(["clip.mp4", "--option", "autoplay"])
