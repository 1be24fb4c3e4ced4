import pytest

from mediaembed.compose import FallbackComposer
from mediaembed.models import PLACEHOLDER, EmbedOptions, Fragment


def test_fragment_from_markup_splits_on_placeholder():
    fragment = Fragment.from_markup(f"<video>{PLACEHOLDER}</video>")

    assert fragment == Fragment.wrapping("<video>", "</video>")
    assert Fragment.from_markup("<a>x</a>") == Fragment.leaf("<a>x</a>")


def test_fragment_coerce_rejects_other_types():
    with pytest.raises(TypeError):
        Fragment.coerce(None)  # type: ignore[arg-type]


def test_composer_nests_in_offer_order():
    composer = FallbackComposer()
    assert composer.is_empty

    composer.offer(Fragment.wrapping("<outer>", "</outer>"))
    composer.offer(Fragment.wrapping("<inner>", "</inner>"))
    composer.offer(Fragment.leaf("<a>x</a>"))

    assert not composer.has_open_slot
    assert composer.render() == "<outer><inner><a>x</a></inner></outer>"


def test_composer_closed_after_leaf():
    composer = FallbackComposer()
    composer.offer(Fragment.leaf("first"))

    assert composer.offer(Fragment.leaf("second")) is False
    assert composer.render() == "first"


def test_composer_renders_open_slot_as_empty():
    composer = FallbackComposer()

    assert composer.render() == ""
    composer.offer(Fragment.wrapping("<video>", "</video>"))
    assert composer.render() == "<video></video>"


def test_leaf_content_is_rendered_verbatim():
    composer = FallbackComposer()
    composer.offer(Fragment.wrapping("<p>", "</p>"))
    composer.offer(Fragment.leaf("literal [text]"))

    assert composer.render() == "<p>literal [text]</p>"


def test_embed_options_keep_unknown_keys():
    options = EmbedOptions.coerce({"block": 1, "autoplay": "yes"})

    assert options.block is True
    assert options.fallback_to_blank is False
    assert options.get("autoplay") == "yes"
    assert options.get("missing", "default") == "default"
    assert EmbedOptions.coerce(options) is options
    assert EmbedOptions.coerce(None) == EmbedOptions()


def test_composer_is_bare_until_markup_is_placed():
    composer = FallbackComposer()
    assert composer.is_bare

    composer.offer(Fragment.wrapping("", ""))
    assert composer.is_bare
    assert not composer.is_empty

    composer.offer(Fragment.wrapping("<video>", "</video>"))
    assert not composer.is_bare
