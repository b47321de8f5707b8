"""メンション関連の型定義"""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from enzyme_markup.mrkdwn.nodes import SpecialMentionKind


class UserMentionOption(BaseModel, frozen=True):
    type: Literal["user"] = "user"
    id: str
    display_name: str
    avatar_url: str | None = None


class SpecialMentionOption(BaseModel, frozen=True):
    type: Literal["special"] = "special"
    id: SpecialMentionKind
    display_name: str


MentionOption = UserMentionOption | SpecialMentionOption

SPECIAL_MENTIONS: tuple[SpecialMentionOption, ...] = (
    SpecialMentionOption(id="here", display_name="here"),
    SpecialMentionOption(id="channel", display_name="channel"),
    SpecialMentionOption(id="everyone", display_name="everyone"),
)


@dataclass(frozen=True)
class MentionTrigger:
    """入力中の未確定の @query"""

    is_active: bool
    query: str
    start_index: int  # @ の位置


@dataclass(frozen=True)
class MentionInsertion:
    """insert_mentionの結果"""

    content: str
    cursor_pos: int
