"""Emoji catalogue: Unicode emoji shortcuts and the site's custom emojis."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Iterable


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _first_thumbnail_url(image: Any) -> str:
    if not isinstance(image, dict):
        return ""
    thumbnails = image.get("thumbnails")
    if not isinstance(thumbnails, list) or not thumbnails:
        return ""
    first = thumbnails[0]
    return _string(first.get("url")) if isinstance(first, dict) else ""


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_string(item) for item in value]


@dataclass(frozen=True)
class UnicodeEmoji:
    """A standard emoji with its search terms and ``:shortcut:`` aliases."""

    emoji_id: str
    image: str = ""
    search_terms: tuple[str, ...] = ()
    shortcuts: tuple[str, ...] = ()
    supports_skin_tone: bool = False

    @classmethod
    def from_json(cls, data: Any) -> "UnicodeEmoji":
        """Build an emoji from one entry of the emoji JSON array.

        Only shortcuts that end with a colon are kept.
        """
        if not isinstance(data, dict):
            data = {}
        supports = data.get("supportsSkinTone")
        return cls(
            emoji_id=_string(data.get("emojiId")),
            image=_first_thumbnail_url(data.get("image")),
            search_terms=tuple(_string_list(data.get("searchTerms"))),
            shortcuts=tuple(s for s in _string_list(data.get("shortcuts")) if s.endswith(":")),
            supports_skin_tone=supports if isinstance(supports, bool) else False,
        )


@dataclass(frozen=True)
class YouTubeEmoji:
    """A custom emoji addressed by a ``:shortcut:``."""

    shortcut: str
    emoji_id: str
    image: str
    hidden: bool = False


_YT = "UCkszU2WH9gy1mb0dV-11UJg/"
_IMG = "https://yt3.ggpht.com/"

_YOUTUBE_EMOJI_TABLE = (
    (":hand-pink-waving:", "G8AfY6yWGuKuhL0PlbiA2AE", "KOxdr_z3A5h1Gb7kqnxqOCnbZrBmxI2B_tRQ453BhTWUhYAlpg5ZP8IKEBkcvRoY8grY91Q=w48-h48-c-k-nd"),
    (":face-blue-smiling:", "KsIfY6LzFoLM6AKanYDQAg", "cktIaPxFwnrPwn-alHvnvedHLUJwbHi8HCK3AgbHpphrMAW99qw0bDfxuZagSY5ieE9BBrA=w48-h48-c-k-nd"),
    (":face-red-droopy-eyes:", "W8IfY_bwAfiPq7IPvNCA2AU", "oih9s26MOYPWC_uL6tgaeOlXSGBv8MMoDrWzBt-80nEiVSL9nClgnuzUAKqkU9_TWygF6CI=w48-h48-c-k-nd"),
    (":face-purple-crying:", "b8IfY7zOK9iVkNAP_I2A-AY", "g6_km98AfdHbN43gvEuNdZ2I07MmzVpArLwEvNBwwPqpZYzszqhRzU_DXALl11TchX5_xFE=w48-h48-c-k-nd"),
    (":text-green-game-over:", "hcIfY57lBJXp6AKBx4CoCA", "cr36FHhSiMAJUSpO9XzjbOgxhtrdJNTVJUlMJeOOfLOFzKleAKT2SEkZwbqihBqfTXYCIg=w48-h48-c-k-nd"),
    (":person-turquoise-waving:", "ssIfY7OFG5OykQOpn4CQCw", "uNSzQ2M106OC1L3VGzrOsGNjopboOv-m1bnZKFGuh0DxcceSpYHhYbuyggcgnYyaF3o-AQ=w48-h48-c-k-nd"),
    (":face-green-smiling:", "xsIfY4OqCd2T29sP54iAsAw", "G061SAfXg2bmG1ZXbJsJzQJpN8qEf_W3f5cb5nwzBYIV58IpPf6H90lElDl85iti3HgoL3o=w48-h48-c-k-nd"),
    (":face-orange-frowning:", "2sIfY8vIG8z96ALulYDQDQ", "Ar8jaEIxzfiyYmB7ejDOHba2kUMdR37MHn_R39mtxqO5CD4aYGvjDFL22DW_Cka6LKzhGDk=w48-h48-c-k-nd"),
    (":eyes-purple-crying:", "7cIfY5niDOmSkNAP08CA6A4", "FrYgdeZPpvXs-6Mp305ZiimWJ0wV5bcVZctaUy80mnIdwe-P8HRGYAm0OyBtVx8EB9_Dxkc=w48-h48-c-k-nd"),
    (":face-fuchsia-wide-eyes:", "A8MfY-_pEIKNr8oP78-AGA", "zdcOC1SMmyXJOAddl9DYeEFN9YYcn5mHemJCdRFQMtDuS0V-IyE-5YjNUL1tduX1zs17tQ=w48-h48-c-k-nd"),
    (":cat-orange-whistling:", "E8MfY5u7JPSXkNAP95GAmAE", "0ocqEmuhrKCK87_J21lBkvjW70wRGC32-Buwk6TP4352CgcNjL6ug8zcsel6JiPbE58xhq5g=w48-h48-c-k-nd"),
    (":face-blue-wide-eyes:", "LsMfY8P6G-yckNAPjoWA8AI", "2Ht4KImoWDlCddiDQVuzSJwpEb59nZJ576ckfaMh57oqz2pUkkgVTXV8osqUOgFHZdUISJM=w48-h48-c-k-nd"),
    (":face-orange-raised-eyebrow:", "Z8MfY8mzLbnovwK5roC4Bg", "JbCfmOgYI-mO17LPw8e_ycqbBGESL8AVP6i7ZsBOVLd3PEpgrfEuJ9rEGpP_unDcqgWSCg=w48-h48-c-k-nd"),
    (":face-fuchsia-tongue-out:", "hcMfY5_zAbbxvwKLooCoCA", "EURfJZi_heNulV3mfHzXBk8PIs9XmZ9lOOYi5za6wFMCGrps4i2BJX9j-H2gK6LIhW6h7sY=w48-h48-c-k-nd"),
    (":face-orange-biting-nails:", "ygF1XpGUMMjk8gSDrI2wCx", "HmsXEgqUogkQOnL5LP_FdPit9Z909RJxby-uYcPxBLNhaPyqPTcGwvGaGPk2hzB_cC0hs_pV=w48-h48-c-k-nd"),
    (":face-red-heart-shape:", "m8MfY4jbFsWJhL0PyouA2Ak", "I0Mem9dU_IZ4a9cQPzR0pUJ8bH-882Eg0sDQjBmPcHA6Oq0uXOZcsjPvPbtormx91Ha2eRA=w48-h48-c-k-nd"),
    (":face-fuchsia-poop-shape:", "6_cfY8HJH8bV5QS5yYDYDg", "_xlyzvSimqMzhdhODyqUBLXIGA6F_d5en2bq-AIfc6fc3M7tw2jucuXRIo5igcW3g9VVe3A=w48-h48-c-k-nd"),
    (":face-purple-wide-eyes:", "DfgfY9LaNdmMq7IPuI2AaA", "5RDrtjmzRQKuVYE_FKPUHiGh7TNtX5eSNe6XzcSytMsHirXYKunxpyAsVacTFMg0jmUGhQ=w48-h48-c-k-nd"),
    (":glasses-purple-yellow-diamond:", "HvgfY93GEYmqvwLUuYDwAQ", "EnDBiuksboKsLkxp_CqMWlTcZtlL77QBkbjz_rLedMSDzrHmy_6k44YWFy2rk4I0LG6K2KI=w48-h48-c-k-nd"),
    (":face-pink-tears:", "NvgfY9aeC_OFvOMPkrOAsAM", "RL5QHCNcO_Mc98SxFEblXZt9FNoh3bIgsjm0Kj8kmeQJWMeTu7JX_NpICJ6KKwKT0oVHhAA=w48-h48-c-k-nd"),
    (":body-blue-raised-arms:", "UvgfY_vqE92T29sPvqiAkAU", "2Jds3I9UKOfgjid97b_nlDU4X2t5MgjTof8yseCp7M-6ZhOhRkPGSPfYwmE9HjCibsfA1Uzo=w48-h48-c-k-nd"),
    (":hand-orange-covering-eyes:", "YvgfY-LIBpjChgHKyYCQBg", "y8ppa6GcJoRUdw7GwmjDmTAnSkeIkUptZMVQuFmFaTlF_CVIL7YP7hH7hd0TJbd8p9w67IM=w48-h48-c-k-nd"),
    (":trophy-yellow-smiling:", "ePgfY-K2Kp6Mr8oP1oqAwAc", "7tf3A_D48gBg9g2N0Rm6HWs2aqzshHU4CuVubTXVxh1BP7YDBRC6pLBoC-ibvr-zCl_Lgg=w48-h48-c-k-nd"),
    (":eyes-pink-heart-shape:", "jPgfY5j2IIud29sP3ZeA4Ag", "5vzlCQfQQdzsG7nlQzD8eNjtyLlnATwFwGvrMpC8dgLcosNhWLXu8NN9qIS3HZjJYd872dM=w48-h48-c-k-nd"),
    (":face-turquoise-covering-eyes:", "oPgfY_DoKfSXkNAPq8-AgAo", "H2HNPRO8f4SjMmPNh5fl10okSETW7dLTZtuE4jh9D6pSmaUiLfoZJ2oiY-qWU3Owfm1IsXg=w48-h48-c-k-nd"),
    (":hand-green-crystal-ball:", "tPgfY7mSO4XovQKzmYCgCw", "qZfJrWDEmR03FIak7PMNRNpMjNsCnOzD9PqK8mOpAp4Kacn_uXRNJNb99tE_1uyEbvgJReF2=w48-h48-c-k-nd"),
    (":face-turquoise-drinking-coffee:", "zPgfY66lCJGRhL0Pz6iA4Aw", "myqoI1MgFUXQr5fuWTC9mz0BCfgf3F8GSDp06o1G7w6pTz48lwARjdG8vj0vMxADvbwA1dA=w48-h48-c-k-nd"),
    (":body-green-covering-eyes:", "4PgfY73cJprKCq-_gIAO", "UR8ydcU3gz360bzDsprB6d1klFSQyVzgn-Fkgu13dIKPj3iS8OtG1bhBUXPdj9pMwtM00ro=w48-h48-c-k-nd"),
    (":goat-turquoise-white-horns:", "-fgfY9DIGYjbhgHLzoDIDw", "jMnX4lu5GnjBRgiPtX5FwFmEyKTlWFrr5voz-Auko35oP0t3-zhPxR3PQMYa-7KhDeDtrv4=w48-h48-c-k-nd"),
    (":hand-purple-blue-peace:", "EvkfY6uNC5OykQOewoCQAQ", "-sC8wj6pThd7FNdslEoJlG4nB9SIbrJG3CRGh7-bNV0RVfcrJuwiWHoUZ6UmcVs7sQjxTg4=w48-h48-c-k-nd"),
    (":face-blue-question-mark:", "LfkfY_zhH4GFr8oP4aKA6AI", "Wx4PMqTwG3f4gtR7J9Go1s8uozzByGWLSXHzrh3166ixaYRinkH_F05lslfsRUsKRvHXrDk=w48-h48-c-k-nd"),
    (":face-blue-covering-eyes:", "RPkfY8TPGsCakNAP-JWAoAQ", "kj3IgbbR6u-mifDkBNWVcdOXC-ut-tiFbDpBMGVeW79c2c54n5vI-HNYCOC6XZ9Bzgupc10=w48-h48-c-k-nd"),
    (":face-purple-smiling-fangs:", "Mm5IY53bH7SEq7IP-MWAkAM", "k1vqi6xoHakGUfa0XuZYWHOv035807ARP-ZLwFmA-_NxENJMxsisb-kUgkSr96fj5baBOZE=w48-h48-c-k-nd"),
    (":face-purple-sweating:", "UW5IY-ibBqa8jgTymoCIBQ", "tRnrCQtEKlTM9YLPo0vaxq9mDvlT0mhDld2KI7e_nDRbhta3ULKSoPVHZ1-bNlzQRANmH90=w48-h48-c-k-nd"),
    (":face-purple-smiling-tears:", "Ym5IY7-0LoqA29sPq9CAkAY", "MJV1k3J5s0hcUfuo78Y6MKi-apDY5NVDjO9Q7hL8fU4i0cIBgU-cU4rq4sHessJuvuGpDOjJ=w48-h48-c-k-nd"),
    (":face-blue-star-eyes:", "dG5IY-mhEof9jgSykoCgBw", "m_ANavMhp6cQ1HzX0HCTgp_er_yO2UA28JPbi-0HElQgnQ4_q5RUhgwueTpH-st8L3MyTA=w48-h48-c-k-nd"),
    (":face-blue-heart-eyes:", "hm5IY4W-H9SO5QS6n4CwCA", "M9tzKd64_r3hvgpTSgca7K3eBlGuyiqdzzhYPp7ullFAHMgeFoNLA0uQ1dGxj3fXgfcHW4w=w48-h48-c-k-nd"),
    (":face-blue-three-eyes:", "mW5IY47PMcSnkMkPo6OAyAk", "nSQHitVplLe5uZC404dyAwv1f58S3PN-U_799fvFzq-6b3bv-MwENO-Zs1qQI4oEXCbOJg=w48-h48-c-k-nd"),
    (":face-blue-droopy-eyes:", "rW5IY_26FryOq7IPlL2A6Ao", "hGPqMUCiXGt6zuX4dHy0HRZtQ-vZmOY8FM7NOHrJTta3UEJksBKjOcoE6ZUAW9sz7gIF_nk=w48-h48-c-k-nd"),
    (":planet-orange-purple-ring:", "v25IY7KcJIGOr8oPz4OA-As", "xkaLigm3P4_1g4X1JOtkymcC7snuJu_C5YwIFAyQlAXK093X0IUjaSTinMTLKeRZ6280jXg=w48-h48-c-k-nd"),
    (":yt:", "CIW60IPp_dYCFcuqTgodEu4IlQ", "IkpeJf1g9Lq0WNjvSa4XFq4LVNZ9IP5FKW8yywXb12djo1OGdJtziejNASITyq4L0itkMNw=w48-h48-c-k-nd"),
    (":oops:", "CN2m5cKr49sCFYbFggodDFEKrg", "PFoVIqIiFRS3aFf5-bt_tTC0WrDm_ylhF4BKKwgqAASNb7hVgx_adFP-XVhFiJLXdRK0EQ=w48-h48-c-k-nd"),
    (":buffering:", "X_zdXMHgJaPa8gTGt4f4Ag", "5gfMEfdqO9CiLwhN9Mq7VI6--T2QFp8AXNNy5Fo7btfY6fRKkThWq35SCZ6SPMVCjg-sUA=w48-h48-c-k-nd"),
    (":stayhome:", "1v50XorRJ8GQ8gTz_prwAg", "_1FGHypiub51kuTiNBX1a0H3NyFih3TnHX7bHU06j_ajTzT0OQfMLl9RI1SiQoxtgA2Grg=w48-h48-c-k-nd"),
    (":dothefive:", "8P50XuS9Oo7h8wSqtIagBA", "-nM0DOd49969h3GNcl705Ti1fIf1ZG_E3JxcOUVV-qPfCW6jY8xZ98caNLHkVSGRTSEb7Y9y=w48-h48-c-k-nd"),
    (":elbowbump:", "Fv90Xq-vJcPq8gTqzreQAQ", "2ou58X5XuhTrxjtIM2wew1f-HKRhN_T5SILQgHE-WD9dySzzJdGwL4R1gpKiJXcbtq6sjQ=w48-h48-c-k-nd"),
    (":goodvibes:", "Iv90XouTLuOR8gSxxrToBA", "2CvFOwgKpL29mW_C51XvaWa7Eixtv-3tD1XvZa1_WemaDDL2AqevKbTZ1rdV0OWcnOZRag=w48-h48-c-k-nd"),
    (":thanksdoc:", "Rf90XtDbG8GQ8gTz_prwAg", "bUnO_VwXW2hDf-Da8D64KKv6nBJDYUBuo13RrOg141g2da8pi9-KClJYlUDuqIwyPBfvOO8=w48-h48-c-k-nd"),
    (":videocall:", "VP90Xv_wG82o8wTCi7CQAw", "k5v_oxUzRWmTOXP0V6WJver6xdS1lyHMPcMTfxn23Md6rmixoR5RZUusFbZi1uZwjF__pv4=w48-h48-c-k-nd"),
    (":virtualhug:", "dv90XtfhAurw8gTgzar4DA", "U1TjOZlqtS58NGqQhE8VWDptPSrmJNkrbVRp_8jI4f84QqIGflq2Ibu7YmuOg5MmVYnpevc=w48-h48-c-k-nd"),
    (":yougotthis:", "hf90Xv-jHeOR8gSxxrToBA", "s3uOe4lUx3iPIt1h901SlMp_sKCTp3oOVj1JV8izBw_vDVLxFqk5dq-3NX-nK_gnUwVEXld3=w48-h48-c-k-nd"),
    (":sanitizer:", "lP90XvOhCZGl8wSO1JmgAw", "EJ_8vc4Gl-WxCWBurHwwWROAHrPzxgePodoNfkRY1U_I8L1O2zlqf7-wfUtTeyzq2qHNnocZ=w48-h48-c-k-nd"),
    (":takeout:", "uP90Xq6wNYrK8gTUoo3wAg", "FizHI5IYMoNql9XeP7TV3E0ffOaNKTUSXbjtJe90e1OUODJfZbWU37VqBbTh-vpyFHlFIS0=w48-h48-c-k-nd"),
    (":hydrate:", "fAF1XtDQMIrK8gTUoo3wAg", "tpgZgmhX8snKniye36mnrDVfTnlc44EK92EPeZ0m9M2EPizn1vKEGJzNYdp7KQy6iNZlYDc1=w48-h48-c-k-nd"),
    (":chillwcat:", "vQF1XpyaG_XG8gTs77bACQ", "y03dFcPc1B7CO20zgQYzhcRPka5Bhs6iSg57MaxJdhaLidFvvXBLf_i4_SHG7zJ_2VpBMNs=w48-h48-c-k-nd"),
    (":chillwdog", "ygF1XpGUMMjk8gSDrI2wCw", "Ir9mDxzUi0mbqyYdJ3N9Lq7bN5Xdt0Q7fEYFngN3GYAcJT_tccH1as1PKmInnpt2cbWOam4=w48-h48-c-k-nd"),
    (":elbowcough:", "8gF1Xp_zK8jk8gSDrI2wCw", "DTR9bZd1HOqpRJyz9TKiLb0cqe5Hb84Yi_79A6LWlN1tY-5kXqLDXRmtYVKE9rcqzEghmw=w24-h24-c-k-nd"),
    (":learning:", "EAJ1XrS7PMGQ8gTz_prwAg", "ZuBuz8GAQ6IEcQc7CoJL8IEBTYbXEvzhBeqy1AiytmhuAT0VHjpXEjd-A5GfR4zDin1L53Q=w48-h48-c-k-nd"),
    (":washhands:", "JAJ1XpGpJYnW8wTupZu4Cw", "qXUeUW0KpKBc9Z3AqUqr_0B7HbW1unAv4qmt7-LJGUK_gsFBIaHISWJNt4n3yvmAnQNZHE-u=w48-h48-c-k-nd"),
    (":socialdist:", "PAJ1XsOOI4fegwOo57ewAg", "igBNi55-TACUi1xQkqMAor-IEXmt8He56K7pDTG5XoTsbM-rVswNzUfC5iwnfrpunWihrg=w48-h48-c-k-nd"),
    (":shelterin:", "egJ1XufTKYfegwOo57ewAg", "gjC5x98J4BoVSEPfFJaoLtc4tSBGSEdIlfL2FV4iJG9uGNykDP9oJC_QxAuBTJy6dakPxVeC=w48-h48-c-k-nd"),
)

YOUTUBE_EMOJIS: tuple[YouTubeEmoji, ...] = tuple(
    YouTubeEmoji(shortcut, _YT + emoji_id, _IMG + image)
    for shortcut, emoji_id, image in _YOUTUBE_EMOJI_TABLE
)


def _index_by_shortcut(emojis: Iterable[YouTubeEmoji]) -> dict[str, YouTubeEmoji]:
    index: dict[str, YouTubeEmoji] = {}
    for emoji in emojis:
        index.setdefault(emoji.shortcut, emoji)
    return index


@dataclass
class EmojiCatalog:
    """Unicode emojis loaded from data plus the built-in custom emojis."""

    unicode_emojis: tuple[UnicodeEmoji, ...] = ()
    youtube_emojis: tuple[YouTubeEmoji, ...] = field(default=YOUTUBE_EMOJIS, init=False)

    def __init__(self, unicode_emojis: Iterable[UnicodeEmoji] = ()) -> None:
        self.unicode_emojis = tuple(unicode_emojis)
        self.youtube_emojis = YOUTUBE_EMOJIS
        self._by_shortcut = _index_by_shortcut(self.youtube_emojis)

    @classmethod
    def from_json(cls, data: Any) -> "EmojiCatalog":
        """Build a catalogue from a parsed JSON array, or its text.

        Anything that is not an array yields an empty catalogue.
        """
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except ValueError:
                data = None
        if not isinstance(data, list):
            return cls()
        return cls(UnicodeEmoji.from_json(entry) for entry in data)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "EmojiCatalog":
        """Load the Unicode emoji JSON array from ``path``."""
        with open(path, "rb") as handle:
            return cls.from_json(handle.read())

    def emojize(self, text: str, escape: bool = True) -> str:
        """Replace every known ``:shortcut:`` with its Unicode emoji."""
        for emoji in self.unicode_emojis:
            for shortcut in emoji.shortcuts:
                text = text.replace(shortcut, emoji.emoji_id)
        return text

    def produce_rich_text(self, text: str) -> list[dict[str, str]]:
        """Split text into ``{"text": ...}`` and ``{"emojiId": ...}`` segments.

        Custom emoji shortcuts are recognised between unescaped colons; a
        colon preceded by a backslash is ignored.
        """
        segments: list[dict[str, str]] = []
        index = -1
        i = 0
        while i < len(text):
            if text[i] != ":" or (i != 0 and text[i - 1] == "\\"):
                i += 1
                continue
            if index == -1 or i - index == 1:
                index = i
                i += 1
                continue
            emoji = self._by_shortcut.get(text[index : i + 1])
            if emoji is None:
                index = i
                i += 1
                continue
            segments.append({"text": text[:index]})
            segments.append({"emojiId": emoji.emoji_id})
            text = text[i + 1 :]
            index = -1
            i = 0

        if text:
            segments.append({"text": text})
        return segments