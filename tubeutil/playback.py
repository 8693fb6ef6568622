"""Playback reporting: client nonces, stats URLs and request headers."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from urllib.parse import quote, unquote, urlencode, urlsplit

CPN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
CPN_LENGTH = 16
PLAYBACK_STATS_URL = "https://www.youtube.com/api/stats/playback"
ORIGIN = "https://www.youtube.com"

_rng = secrets.SystemRandom()


@dataclass(frozen=True)
class ClientInfo:
    """The client identity sent along with requests."""

    browser_name: str = ""
    browser_version: str = ""
    client_type: int = 1
    client_version: str = ""
    os_name: str = ""
    os_version: str = ""
    platform: str = ""
    hl: str = ""
    gl: str = ""
    visitor_data: str = ""


def generate_cpn() -> str:
    """Return a random 16-character client playback nonce."""
    return "".join(_rng.choice(CPN_ALPHABET) for _ in range(CPN_LENGTH))


def _query_items(url: str) -> dict[str, str]:
    """Decode a URL's query; the first value of each key wins."""
    items: dict[str, str] = {}
    for part in urlsplit(url).query.split("&"):
        if not part:
            continue
        key, _, value = part.partition("=")
        items.setdefault(unquote(key), unquote(value))
    return items


def build_playback_url(videostats_playback_url: str, client: ClientInfo) -> str:
    """Build the stats URL that reports a playback started."""
    source = _query_items(videostats_playback_url)
    copied = source.get

    items = [
        ("ns", "yt"),
        ("el", "detailpage"),
        ("cpn", generate_cpn()),
        ("ver", "2"),
        ("fmt", "243"),
        ("fs", "0"),
        ("rt", str(_rng.randint(10, 200))),
        ("euri", ""),
        ("lact", str(_rng.randint(1000, 8000))),
        ("cl", copied("cl", "")),
        ("mos", "0"),
        ("volume", "100"),
        ("cbr", client.browser_name),
        ("cbrver", client.browser_version),
        ("c", str(int(client.client_type))),
        ("cver", client.client_version),
        ("cplayer", "UNIPLAYER"),
        ("cos", client.os_name),
        ("cosver", client.os_version),
        ("cplatform", client.platform),
        ("hl", f"{client.hl}_{client.gl}"),
        ("cr", client.gl),
        ("uga", copied("uga", "")),
        ("len", copied("len", "")),
        ("fexp", copied("fexp", "")),
        ("rtn", "4"),
        ("afmt", "251"),
        ("muted", "0"),
        ("docid", copied("docid", "")),
        ("ei", copied("ei", "")),
        ("plid", copied("plid", "")),
        ("sdetail", copied("sdetail", "")),
        ("of", copied("of", "")),
        ("vm", copied("vm", "")),
    ]
    return f"{PLAYBACK_STATS_URL}?{urlencode(items, quote_via=quote, safe=',')}"


def needed_headers(
    client: ClientInfo,
    authorization: str | None = None,
    cookie: str | None = None,
) -> dict[str, str]:
    """Return the headers an API request needs.

    ``authorization`` and ``cookie`` come from a signed-in session and must
    be given together.
    """
    if (authorization is None) != (cookie is None):
        raise ValueError("authorization and cookie must be given together")

    headers: dict[str, str] = {}
    if authorization is not None and cookie is not None:
        headers["Authorization"] = authorization
        headers["Cookie"] = cookie
        headers["X-Goog-AuthUser"] = "0"

    headers["Content-Type"] = "application/json"
    headers["X-Goog-Visitor-Id"] = client.visitor_data
    headers["X-YOUTUBE-CLIENT-NAME"] = str(int(client.client_type))
    headers["X-YOUTUBE-CLIENT-VERSION"] = client.client_version
    headers["X-ORIGIN"] = ORIGIN
    return headers