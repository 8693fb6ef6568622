# tubeutil

Small helpers for a client of a video site's internal ("innertube") API. The
package has no dependencies outside the standard library.

## Installation

```
pip install tubeutil
```

## Modules

### `tubeutil.strings`

- `bytes_string(num_bytes)` returns a size with one decimal place and a unit:
  `"512.0 B"`, `"1.5 KB"`, `"3.2 MB"`, `"1.0 GB"`.
- `extract_digits(text, use_locale=True)` keeps only the decimal digits of
  `text`, for example from `"1,234 views"`. If `use_locale` is set, the digits
  are read as a number and formatted with the current locale's grouping. When
  there are no digits, or the number does not fit in a signed 64-bit integer,
  the result is `"0"`.
- `extract_path(text)` returns the path at the start of a command line. Quote
  characters are removed. Whitespace ends the path unless it falls inside the
  first pair of quotes.

### `tubeutil.osutils`

- `get_full_path(path)` resolves a program. It returns the absolute path if
  that path exists. Otherwise it returns the first directory in `PATH` that
  holds a file with the same name. On Windows, a `.exe` suffix is also tried.
  If nothing is found, it returns `None`.

### `tubeutil.playback`

- `ClientInfo` is a frozen dataclass. It holds the client fields sent with
  requests: browser name and version, client type and version, OS name and
  version, platform, `hl`, `gl` and visitor data.
- `generate_cpn()` returns a random client playback nonce. The nonce is 16
  characters long and uses `A-Z`, `a-z`, `0-9`, `-` and `_`.
- `build_playback_url(videostats_playback_url, client)` builds the
  `https://www.youtube.com/api/stats/playback` URL that reports the start of
  playback. Fields such as `cl`, `docid`, `ei` and `plid` are copied from the
  query of the given videostats URL. The rest comes from `client` or from
  fixed values.
- `needed_headers(client, authorization=None, cookie=None)` returns the
  request headers as a dict. `Authorization`, `Cookie` and `X-Goog-AuthUser`
  are added only when both credentials are given. Passing only one of the two
  raises `ValueError`.

```python
from tubeutil.playback import ClientInfo, build_playback_url, needed_headers

client = ClientInfo(client_version="2.20240101", hl="en", gl="US")
url = build_playback_url("https://example.com/stats?docid=abc&cl=1", client)
headers = needed_headers(client, "SAPISIDHASH token", "placeholder")
```

### `tubeutil.emoji`

- `UnicodeEmoji` holds one entry of an emoji JSON array. Build it with
  `UnicodeEmoji.from_json(data)`. Only shortcuts that end with `:` are kept.
- `YouTubeEmoji` is a custom emoji identified by a `:shortcut:`.
  `YOUTUBE_EMOJIS` is the built-in table of these emoji.
- `EmojiCatalog(unicode_emojis)` can also be created with
  `EmojiCatalog.from_json(data)`, which takes a parsed array or JSON text, or
  with `EmojiCatalog.from_file(path)`. Input that is not a JSON array gives an
  empty catalogue.
  - `emojize(text, escape=True)` replaces every known Unicode-emoji shortcut
    with its emoji. The `escape` argument is accepted but has no effect.
  - `produce_rich_text(text)` splits text into `{"text": ...}` and
    `{"emojiId": ...}` segments wherever a built-in custom emoji shortcut
    appears. A colon preceded by a backslash is ignored.

### `tubeutil.formatter`

- `InnertubeRun.from_json(data)` parses one run of formatted text. A run can
  be plain text, a link (a navigation endpoint) or an emoji.
- `format_simple(runs, use_link_text=True)` renders runs as HTML. Text is
  escaped, and newlines become `<br>`. Navigation endpoints become `<a>`
  links. Emoji runs are rendered as plain text.
- `truncate_url(url, prefix=False)` can prepend `https://www.youtube.com`. It
  then cuts the URL to 37 characters and adds `...`.
- `StringFormatter(fetch, on_ready_read=None, on_finished=None)` renders the
  same HTML and adds emoji images.
  - `set_data(runs, use_link_text=True)` appends the HTML. For each emoji it
    inserts a placeholder and calls `fetch(url, done)`. The same image is
    fetched only once.
  - When a download completes, call `done(content_type, body)`. Equivalently,
    call `replace_emoji_placeholder(placeholder, content_type, body)`. Every
    copy of the placeholder is then replaced with an inline `data:` image.
  - `on_ready_read(html)` is called each time the HTML changes.
    `on_finished()` is called once no emoji is pending.
  - The `data` property holds the HTML so far. The `pending_emojis` property
    counts the downloads still awaited.

## What this package does not do

- It makes no network requests. `StringFormatter` relies on the `fetch`
  callable you provide. `build_playback_url` and `needed_headers` build a URL
  and headers but send nothing.
- It does not resolve channel URLs to channel IDs, and it does not sign in or
  compute authorization hashes.
- It ships no Unicode emoji data. Load the emoji array yourself with
  `EmojiCatalog.from_file` or `EmojiCatalog.from_json`.
- It does not keep the screen awake or suspend idle sleep. It has no user
  interface and no command-line entry point.

## Running the tests

```
pip install -e .[test]
pytest
```