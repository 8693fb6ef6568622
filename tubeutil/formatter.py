"""Render rich-text runs as HTML, with emoji images fetched on demand."""

from __future__ import annotations

import base64
import html
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterable
from urllib.parse import unquote, urlsplit

MAX_URL_LENGTH = 37
SITE_ROOT = "https://www.youtube.com"

FetchCallback = Callable[[str, bytes], None]
Fetcher = Callable[[str, FetchCallback], None]


def _get(value: Any, *keys: Any) -> Any:
    """Walk nested dicts and lists, returning None where a step is missing."""
    for key in keys:
        if isinstance(key, int):
            if not isinstance(value, list) or not -len(value) <= key < len(value):
                return None
            value = value[key]
        else:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
    return value


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _object(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def _escape_text(text: str) -> str:
    escaped = html.escape(text, quote=False).replace('"', "&quot;")
    return escaped.replace("\n", "<br>")


def _image_tag(mime_type: str, data: str) -> str:
    return f"<img src='data:{mime_type};base64,{data}' width='20' height='20'>"


def _query_value(url: str, name: str) -> str | None:
    for part in urlsplit(url).query.split("&"):
        if not part:
            continue
        key, _, value = part.partition("=")
        if unquote(key) == name:
            return unquote(value)
    return None


@dataclass(frozen=True)
class InnertubeRun:
    """One run of formatted text: plain, a link, or an emoji."""

    text: str = ""
    navigation_endpoint: dict | None = None
    emoji: dict | None = None

    @classmethod
    def from_json(cls, data: Any) -> "InnertubeRun":
        """Build a run from its JSON object."""
        if not isinstance(data, dict):
            data = {}
        return cls(
            text=_string(data.get("text")),
            navigation_endpoint=_object(data.get("navigationEndpoint")),
            emoji=_object(data.get("emoji")),
        )


def truncate_url(url: str, prefix: bool = False) -> str:
    """Optionally prefix the site root, then cut to 37 characters plus '...'."""
    if prefix:
        url = SITE_ROOT + url
    if len(url) > MAX_URL_LENGTH:
        url = url[:MAX_URL_LENGTH] + "..."
    return url


def _channel_mention(text: str) -> str:
    slash = text.find("/")
    if slash != -1:
        text = text[:slash] + text[slash + 1 :]
    text = text.replace("/xc2/xa0", "")
    if not text.startswith("@"):
        text = "@" + text
    return text


def _navigation_link(endpoint: dict, text: str, use_link_text: bool) -> str:
    href = ""
    url_endpoint = _object(endpoint.get("urlEndpoint"))
    browse_endpoint = _object(endpoint.get("browseEndpoint"))

    if url_endpoint is not None:
        url = _string(url_endpoint.get("url"))
        redirect = _query_value(url, "q")
        if redirect is not None:
            href = redirect
            if not use_link_text:
                text = href
        elif "youtube.com/channel" in url:
            href = unquote(urlsplit(url).path)
            if not use_link_text:
                text = url
        else:
            href = url
            if not use_link_text:
                text = href
        if not use_link_text:
            text = truncate_url(text, False)
    elif browse_endpoint is not None:
        browse_id = _string(browse_endpoint.get("browseId"))
        if browse_id.startswith("UC"):
            text = _channel_mention(text)
            href = "/channel/" + browse_id
        elif browse_id.startswith("FE"):
            href = _string(_get(endpoint, "commandMetadata", "webCommandMetadata", "url"))
            if not use_link_text:
                text = truncate_url(href, True)
    else:
        href = _string(_get(endpoint, "commandMetadata", "webCommandMetadata", "url"))
        watch_endpoint = _object(endpoint.get("watchEndpoint"))
        if watch_endpoint is not None:
            if not isinstance(watch_endpoint.get("continuePlayback"), bool):
                if not use_link_text:
                    text = SITE_ROOT + href
            else:
                href += "&continuePlayback=1"
        if not use_link_text:
            text = truncate_url(text, False)

    return f'<a href="{href}">{text}</a>'


def format_simple(runs: Iterable[InnertubeRun], use_link_text: bool = True) -> str:
    """Render runs as HTML without emoji images."""
    parts = []
    for run in runs:
        if run.navigation_endpoint is not None:
            parts.append(_navigation_link(run.navigation_endpoint, run.text, use_link_text))
        else:
            parts.append(_escape_text(run.text))
    return "".join(parts)


class StringFormatter:
    """Build HTML from runs, filling in emoji images as they arrive.

    ``fetch(url, done)`` starts a download; ``done(content_type, body)`` is
    to be called when it completes. ``on_ready_read(html)`` is called each
    time the HTML changes and ``on_finished()`` once no emoji is pending.
    """

    def __init__(
        self,
        fetch: Fetcher,
        on_ready_read: Callable[[str], None] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._fetch = fetch
        self._on_ready_read = on_ready_read
        self._on_finished = on_finished
        self._data = ""
        self._pending = 0

    @property
    def data(self) -> str:
        """The HTML produced so far."""
        return self._data

    @property
    def pending_emojis(self) -> int:
        """How many emoji images are still awaited."""
        return self._pending

    def _ready_read(self) -> None:
        if self._on_ready_read is not None:
            self._on_ready_read(self._data)

    def _finished(self) -> None:
        if self._on_finished is not None:
            self._on_finished()

    def _insert_emoji(self, emoji: dict) -> None:
        self._pending += 1
        url = _string(_get(emoji, "image", "thumbnails", 0, "url"))
        key = (
            _string(_get(emoji, "shortcuts", 0))
            + _string(_get(emoji, "searchTerms", 0))
            + url
        )
        placeholder = _image_tag(key, "%2")
        needs_fetch = placeholder not in self._data
        self._data += placeholder
        if needs_fetch:
            self._fetch(url, partial(self.replace_emoji_placeholder, placeholder))

    def set_data(self, runs: Iterable[InnertubeRun], use_link_text: bool = True) -> None:
        """Append the HTML for ``runs``, requesting emoji images as needed."""
        for run in runs:
            if run.emoji is not None:
                self._insert_emoji(run.emoji)
            elif run.navigation_endpoint is not None:
                self._data += _navigation_link(run.navigation_endpoint, run.text, use_link_text)
            else:
                self._data += _escape_text(run.text)
            self._ready_read()

        if self._pending == 0:
            self._finished()

    def replace_emoji_placeholder(self, placeholder: str, content_type: str, body: bytes) -> None:
        """Swap every copy of ``placeholder`` for the downloaded image."""
        self._pending = max(0, self._pending - self._data.count(placeholder))
        encoded = base64.b64encode(body).decode("ascii")
        self._data = self._data.replace(placeholder, _image_tag(content_type, encoded))
        self._ready_read()
        if self._pending == 0:
            self._finished()