from urllib.parse import parse_qsl, urlsplit

import pytest

from tubeutil.playback import (
    CPN_ALPHABET,
    ClientInfo,
    build_playback_url,
    generate_cpn,
    needed_headers,
)

CLIENT = ClientInfo(
    browser_name="Firefox",
    browser_version="120.0",
    client_type=1,
    client_version="2.20240101.00.00",
    os_name="X11",
    os_version="",
    platform="DESKTOP",
    hl="en",
    gl="US",
    visitor_data="visitor",
)

SOURCE_URL = (
    "https://s.youtube.com/api/stats/playback?cl=12345&docid=abc%2Ddef"
    "&ei=event&len=300&fexp=1,2,3&plid=pl&of=offset&vm=vmvalue&cl=999"
)

EXPECTED_KEYS = [
    "ns", "el", "cpn", "ver", "fmt", "fs", "rt", "euri", "lact", "cl", "mos",
    "volume", "cbr", "cbrver", "c", "cver", "cplayer", "cos", "cosver",
    "cplatform", "hl", "cr", "uga", "len", "fexp", "rtn", "afmt", "muted",
    "docid", "ei", "plid", "sdetail", "of", "vm",
]


def _params(url):
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


def test_cpn_length_and_alphabet():
    cpn = generate_cpn()
    assert len(cpn) == 16
    assert set(cpn) <= set(CPN_ALPHABET)


def test_cpn_is_random():
    assert len({generate_cpn() for _ in range(20)}) > 1


def test_playback_url_base():
    url = build_playback_url(SOURCE_URL, CLIENT)
    parts = urlsplit(url)
    assert (parts.scheme, parts.netloc, parts.path) == ("https", "www.youtube.com", "/api/stats/playback")


def test_playback_url_key_order():
    url = build_playback_url(SOURCE_URL, CLIENT)
    keys = [key for key, _ in parse_qsl(urlsplit(url).query, keep_blank_values=True)]
    assert keys == EXPECTED_KEYS


def test_playback_url_copies_source_values():
    params = _params(build_playback_url(SOURCE_URL, CLIENT))
    assert params["cl"] == "12345"
    assert params["docid"] == "abc-def"
    assert params["fexp"] == "1,2,3"
    assert params["len"] == "300"
    assert params["vm"] == "vmvalue"


def test_playback_url_missing_source_values_are_blank():
    params = _params(build_playback_url(SOURCE_URL, CLIENT))
    assert params["uga"] == ""
    assert params["sdetail"] == ""
    assert params["euri"] == ""


def test_playback_url_fixed_values():
    params = _params(build_playback_url(SOURCE_URL, CLIENT))
    assert params["ns"] == "yt"
    assert params["el"] == "detailpage"
    assert params["fmt"] == "243"
    assert params["afmt"] == "251"
    assert params["cplayer"] == "UNIPLAYER"


def test_playback_url_client_values():
    params = _params(build_playback_url(SOURCE_URL, CLIENT))
    assert params["cbr"] == CLIENT.browser_name
    assert params["cver"] == CLIENT.client_version
    assert params["c"] == str(CLIENT.client_type)
    assert params["hl"] == CLIENT.hl + "_" + CLIENT.gl
    assert params["cr"] == CLIENT.gl


def test_playback_url_random_ranges():
    for _ in range(50):
        params = _params(build_playback_url(SOURCE_URL, CLIENT))
        assert 10 <= int(params["rt"]) <= 200
        assert 1000 <= int(params["lact"]) <= 8000
        assert len(params["cpn"]) == 16


def test_headers_without_auth():
    headers = needed_headers(CLIENT)
    assert "Authorization" not in headers
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Goog-Visitor-Id"] == CLIENT.visitor_data
    assert headers["X-YOUTUBE-CLIENT-NAME"] == str(CLIENT.client_type)
    assert headers["X-YOUTUBE-CLIENT-VERSION"] == CLIENT.client_version
    assert headers["X-ORIGIN"] == "https://www.youtube.com"


def test_headers_with_auth():
    headers = needed_headers(CLIENT, authorization="SAPISIDHASH token", cookie="placeholder")
    assert headers["Authorization"] == "SAPISIDHASH token"
    assert headers["Cookie"] == "placeholder"
    assert headers["X-Goog-AuthUser"] == "0"
    assert list(headers)[:3] == ["Authorization", "Cookie", "X-Goog-AuthUser"]


@pytest.mark.parametrize(
    "kwargs",
    [{"authorization": "SAPISIDHASH token"}, {"cookie": "placeholder"}],
)
def test_headers_require_both_auth_parts(kwargs):
    with pytest.raises(ValueError):
        needed_headers(CLIENT, **kwargs)