"""メンション解決モジュール"""

from enzyme_markup.directory import Channel, Member
from enzyme_markup.mentions.models import (
    SPECIAL_MENTIONS,
    MentionInsertion,
    MentionOption,
    MentionTrigger,
    SpecialMentionOption,
    UserMentionOption,
)
from enzyme_markup.mentions.options import build_mention_map, insert_mention, resolve_mention_options
from enzyme_markup.mentions.storage import from_storage_text, to_storage_text
from enzyme_markup.mentions.trigger import detect_trigger

__all__ = [
    "SPECIAL_MENTIONS",
    "Channel",
    "Member",
    "MentionInsertion",
    "MentionOption",
    "MentionTrigger",
    "SpecialMentionOption",
    "UserMentionOption",
    "build_mention_map",
    "detect_trigger",
    "from_storage_text",
    "insert_mention",
    "resolve_mention_options",
    "to_storage_text",
]
