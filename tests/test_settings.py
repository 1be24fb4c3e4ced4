import logging

from mediaembed.settings import load_settings


def test_defaults(monkeypatch):
    for name in (
        "MEDIAEMBED_PLAYERS",
        "MEDIAEMBED_DISABLED_PLAYERS",
        "MEDIAEMBED_VIDEO_WIDTH",
        "MEDIAEMBED_VIDEO_HEIGHT",
        "MEDIAEMBED_AUDIO_WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.players is None
    assert settings.disabled_players == ()
    assert (settings.video_width, settings.video_height, settings.audio_width) == (400, 300, 300)


def test_lists_are_normalized(monkeypatch):
    monkeypatch.setenv("MEDIAEMBED_PLAYERS", " HTML5Video, ,link ")
    monkeypatch.setenv("MEDIAEMBED_DISABLED_PLAYERS", "link")

    settings = load_settings()

    assert settings.players == ("html5video", "link")
    assert settings.disabled_players == ("link",)


def test_invalid_size_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("MEDIAEMBED_VIDEO_WIDTH", "wide")
    monkeypatch.setenv("MEDIAEMBED_VIDEO_HEIGHT", "-5")

    with caplog.at_level(logging.WARNING, logger="mediaembed.settings"):
        settings = load_settings()

    assert settings.video_width == 400
    assert settings.video_height == 1
    assert "MEDIAEMBED_VIDEO_WIDTH" in caplog.text
