"""Enzymeのmrkdwnテキストエンジン

エディタのドキュメントツリーとmrkdwn文字列の相互変換、@メンションの解決、
絵文字ショートコードの解決を提供する。すべて副作用のない純粋関数。
"""

from enzyme_markup.emoji import EmojiMatch, resolve_emoji, search_emoji
from enzyme_markup.mentions import (
    Member,
    MentionOption,
    MentionTrigger,
    detect_trigger,
    from_storage_text,
    insert_mention,
    resolve_mention_options,
    to_storage_text,
)
from enzyme_markup.mrkdwn import Document, MrkdwnSegment, parse, serialize, to_segments

__all__ = [
    "Document",
    "EmojiMatch",
    "Member",
    "MentionOption",
    "MentionTrigger",
    "MrkdwnSegment",
    "detect_trigger",
    "from_storage_text",
    "insert_mention",
    "parse",
    "resolve_emoji",
    "resolve_mention_options",
    "search_emoji",
    "serialize",
    "to_segments",
    "to_storage_text",
]
