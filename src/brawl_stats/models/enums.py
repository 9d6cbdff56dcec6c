from __future__ import annotations

from enum import IntEnum, StrEnum


class _LenientStrEnum(StrEnum):
    """Unknown upstream values map to UNKNOWN instead of failing validation."""

    @classmethod
    def _missing_(cls, value: object) -> _LenientStrEnum:
        return cls("unknown")


class ClubType(_LenientStrEnum):
    OPEN = "open"
    INVITE_ONLY = "inviteOnly"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class ClubMemberRole(_LenientStrEnum):
    MEMBER = "member"
    SENIOR = "senior"
    VICE_PRESIDENT = "vicePresident"
    PRESIDENT = "president"
    UNKNOWN = "unknown"


class BattleOutcome(_LenientStrEnum):
    VICTORY = "victory"
    DEFEAT = "defeat"
    DRAW = "draw"
    UNKNOWN = "unknown"


class BrawlerId(IntEnum):
    """Ids of the brawlers known at release time; any other id is still accepted by fetches."""

    SHELLY = 16000000
    COLT = 16000001
    BULL = 16000002
    BROCK = 16000003
    RICO = 16000004
    SPIKE = 16000005
    BARLEY = 16000006
    JESSIE = 16000007
    NITA = 16000008
    DYNAMIKE = 16000009
    EL_PRIMO = 16000010
    MORTIS = 16000011
    CROW = 16000012
    POCO = 16000013
    BO = 16000014
    PIPER = 16000015
    PAM = 16000016
    TARA = 16000017
    DARRYL = 16000018
    PENNY = 16000019
    FRANK = 16000020
    GENE = 16000021
    TICK = 16000022
    LEON = 16000023
    ROSA = 16000024
    CARL = 16000025
    BIBI = 16000026
    EIGHT_BIT = 16000027
    SANDY = 16000028
    BEA = 16000029
    EMZ = 16000030
    MR_P = 16000031
    MAX = 16000032
