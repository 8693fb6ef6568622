import json

import pytest

from tubeutil.emoji import YOUTUBE_EMOJIS, EmojiCatalog, UnicodeEmoji, YouTubeEmoji

YT_ID = "UCkszU2WH9gy1mb0dV-11UJg/CIW60IPp_dYCFcuqTgodEu4IlQ"
OOPS_ID = "UCkszU2WH9gy1mb0dV-11UJg/CN2m5cKr49sCFYbFggodDFEKrg"

GRIN = {
    "emojiId": "\U0001F600",
    "image": {"thumbnails": [{"url": "https://img.example.com/grin.svg"}]},
    "searchTerms": ["grin", "smile"],
    "shortcuts": [":grin:", "grin", ":grinning:"],
    "supportsSkinTone": True,
}
WAVE = {
    "emojiId": "\U0001F44B",
    "shortcuts": [":wave:"],
}


@pytest.fixture
def catalog():
    return EmojiCatalog.from_json([GRIN, WAVE])


def test_unicode_emoji_from_json_fields():
    emoji = UnicodeEmoji.from_json(GRIN)
    assert emoji.emoji_id == "\U0001F600"
    assert emoji.image == "https://img.example.com/grin.svg"
    assert emoji.search_terms == ("grin", "smile")
    assert emoji.supports_skin_tone is True


def test_unicode_emoji_keeps_only_colon_terminated_shortcuts():
    emoji = UnicodeEmoji.from_json(GRIN)
    assert emoji.shortcuts == (":grin:", ":grinning:")


def test_unicode_emoji_missing_fields_default():
    emoji = UnicodeEmoji.from_json({"emojiId": "x"})
    assert emoji == UnicodeEmoji(emoji_id="x")


def test_catalog_from_json_text(catalog):
    from_text = EmojiCatalog.from_json(json.dumps([GRIN, WAVE]))
    assert from_text.unicode_emojis == catalog.unicode_emojis


def test_catalog_from_non_array_is_empty():
    assert EmojiCatalog.from_json({"emojiId": "x"}).unicode_emojis == ()
    assert EmojiCatalog.from_json("not json").unicode_emojis == ()


def test_catalog_from_file(tmp_path, catalog):
    path = tmp_path / "emojis.json"
    path.write_text(json.dumps([GRIN, WAVE]), encoding="utf-8")
    assert EmojiCatalog.from_file(path).unicode_emojis == catalog.unicode_emojis


def test_catalog_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EmojiCatalog.from_file(tmp_path / "absent.json")


def test_emojize_replaces_shortcuts(catalog):
    assert catalog.emojize("hi :wave: :grin:") == "hi \U0001F44B \U0001F600"


def test_emojize_leaves_unknown_and_bare_shortcuts(catalog):
    assert catalog.emojize("grin :unknown:") == "grin :unknown:"


def test_youtube_emojis_table():
    catalog = EmojiCatalog()
    assert catalog.youtube_emojis == YOUTUBE_EMOJIS
    assert YouTubeEmoji(":yt:", YT_ID, YOUTUBE_EMOJIS[40].image) in YOUTUBE_EMOJIS
    assert all(not e.hidden for e in YOUTUBE_EMOJIS)


def test_rich_text_with_emoji_in_middle():
    segments = EmojiCatalog().produce_rich_text("hello :yt: world")
    assert segments == [{"text": "hello "}, {"emojiId": YT_ID}, {"text": " world"}]


def test_rich_text_emoji_at_start_gives_empty_text_segment():
    assert EmojiCatalog().produce_rich_text(":yt:") == [{"text": ""}, {"emojiId": YT_ID}]


def test_rich_text_multiple_emojis():
    segments = EmojiCatalog().produce_rich_text(":yt::oops:")
    assert segments == [
        {"text": ""},
        {"emojiId": YT_ID},
        {"text": ""},
        {"emojiId": OOPS_ID},
    ]


def test_rich_text_double_colon_uses_second():
    segments = EmojiCatalog().produce_rich_text("::yt:")
    assert segments == [{"text": ":"}, {"emojiId": YT_ID}]


def test_rich_text_escaped_colon_is_ignored():
    text = "\\:yt: here"
    assert EmojiCatalog().produce_rich_text(text) == [{"text": text}]


def test_rich_text_unknown_shortcut_kept():
    text = "a :nothing: b"
    assert EmojiCatalog().produce_rich_text(text) == [{"text": text}]


def test_rich_text_shortcut_without_trailing_colon_never_matches():
    text = ":chillwdog:"
    assert EmojiCatalog().produce_rich_text(text) == [{"text": text}]


def test_rich_text_empty():
    assert EmojiCatalog().produce_rich_text("") == []


@pytest.mark.parametrize("emoji", YOUTUBE_EMOJIS[:5])
def test_rich_text_recognises_table_entries(emoji):
    segments = EmojiCatalog().produce_rich_text("x" + emoji.shortcut)
    assert segments == [{"text": "x"}, {"emojiId": emoji.emoji_id}]