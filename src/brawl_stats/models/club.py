from __future__ import annotations

from pydantic import Field

from brawl_stats.core.tag import Tag
from brawl_stats.http.routes import Route
from brawl_stats.models.base import ApiModel, TagFetchable
from brawl_stats.models.common import Icon, NameColor
from brawl_stats.models.enums import ClubMemberRole, ClubType


class ClubMember(ApiModel):
    tag: str
    name: str
    name_color: NameColor = 0xFFFFFF
    icon: Icon | None = None
    role: ClubMemberRole = ClubMemberRole.MEMBER
    trophies: int = 0


class Club(TagFetchable):
    """
    A club, including its member list.

    Endpoint: GET /v1/clubs/{clubTag}
    """

    tag: str
    name: str
    description: str | None = None
    club_type: ClubType = Field(default=ClubType.OPEN, alias="type")
    badge_id: int = 0
    required_trophies: int = 0
    trophies: int = 0
    members: list[ClubMember] = Field(default_factory=list)

    @classmethod
    def route(cls, key: Tag) -> Route:
        return Route.club(key)


class ClubMembers(TagFetchable):
    """
    Members of one club.

    Endpoint: GET /v1/clubs/{clubTag}/members
    """

    tag: str = ""
    items: list[ClubMember]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> ClubMember:
        return self.items[index]

    @classmethod
    def route(cls, key: Tag) -> Route:
        return Route.club_members(key)

    def with_key(self, key: Tag) -> ClubMembers:
        return self.model_copy(update={"tag": key.canonical})
