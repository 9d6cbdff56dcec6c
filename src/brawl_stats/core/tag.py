from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from brawl_stats.core.config import settings
from brawl_stats.http.errors import InvalidTag

TAG_ALPHABET = "0289PYLQGRJCUV"

_allowed = frozenset(TAG_ALPHABET + TAG_ALPHABET.lower())


@dataclass(frozen=True)
class Tag:
    """
    A validated player or club tag.

    `code` is the uppercase body without the leading '#'; equality and hashing
    only look at it, so "#2pp" and "2PP" compare equal.
    """

    code: str
    raw: str = field(default="", compare=False, repr=False)

    @classmethod
    def parse(
        cls,
        raw: str | Tag,
        *,
        bare: bool = False,
        auto_hashtag: bool | None = None,
    ) -> Tag:
        """
        Validate and canonicalize caller input.

        A missing '#' is accepted when `bare` is set or auto-hashtag is enabled
        (defaults to `settings.auto_hashtag`). Raises InvalidTag otherwise, and
        for empty input or characters outside TAG_ALPHABET.
        """
        if isinstance(raw, Tag):
            return raw
        if not isinstance(raw, str):
            raise InvalidTag(repr(raw), f"expected str, got {type(raw).__name__}")

        if raw.startswith("#"):
            body = raw[1:]
        else:
            if auto_hashtag is None:
                auto_hashtag = settings.auto_hashtag
            if not (bare or auto_hashtag):
                raise InvalidTag(raw, "missing leading '#'")
            body = raw

        if not body:
            raise InvalidTag(raw, "tag is empty")

        bad = sorted({c for c in body if c not in _allowed})
        if bad:
            raise InvalidTag(
                raw, f"characters {''.join(bad)!r} are not in the tag alphabet {TAG_ALPHABET}"
            )

        return cls(code=body.upper(), raw=raw)

    @property
    def canonical(self) -> str:
        return f"#{self.code}"

    @property
    def url_segment(self) -> str:
        # '#' starts a URL fragment, so it has to be escaped inside a path.
        return quote(self.canonical, safe="")

    def __str__(self) -> str:
        return self.canonical
