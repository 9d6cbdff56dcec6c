from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from brawl_stats.core.text import parse_name_color
from brawl_stats.models.base import ApiModel

# Sent as "0xffa2e3fe" by the API; plain integers are accepted too.
NameColor = Annotated[int, BeforeValidator(parse_name_color)]


class StarPower(ApiModel):
    id: int = 0
    name: str = ""


class Gadget(ApiModel):
    id: int = 0
    name: str = ""


class Icon(ApiModel):
    id: int = 0
