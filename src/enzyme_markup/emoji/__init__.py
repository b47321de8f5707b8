"""絵文字ショートコードモジュール"""

from enzyme_markup.emoji.resolver import EmojiMatch, resolve_emoji, search_emoji
from enzyme_markup.emoji.table import COMMON_EMOJIS, STANDARD_EMOJIS

__all__ = [
    "COMMON_EMOJIS",
    "STANDARD_EMOJIS",
    "EmojiMatch",
    "resolve_emoji",
    "search_emoji",
]
