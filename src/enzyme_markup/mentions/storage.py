"""メンションの保存形式変換

表示名による `@Name` を保存用のID形式（`<@userId>` / `<!here>`）に変換し、
保存済みテキストを表示用セグメントに戻す。
"""

import logging
import re
from collections.abc import Mapping

from enzyme_markup.mrkdwn.nodes import SPECIAL_MENTION_KINDS
from enzyme_markup.mrkdwn.scanning import NextIndex
from enzyme_markup.mrkdwn.segments import MrkdwnSegment, flush_text, match_mention_token

logger = logging.getLogger(__name__)

# 直前が単語文字でない @ のみ対象。`user@example.com` や `x@here` は変換しない
_MENTION_PREFIX = r"(?<!\w)@"
# 表示名の直後は空白か文字列末尾
_MENTION_SUFFIX = r"(?=\s|$)"

_UNRESOLVED_MENTION_RE = re.compile(_MENTION_PREFIX + r"([^\s@<>]+)" + _MENTION_SUFFIX)


def _build_pattern(names: list[str]) -> re.Pattern[str]:
    # 長い名前を先に置き、"John" が "John Doe" の前半にマッチしないようにする
    alternatives = "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))
    return re.compile(f"{_MENTION_PREFIX}({alternatives}){_MENTION_SUFFIX}")


def to_storage_text(text: str, name_to_id: Mapping[str, str]) -> str:
    """表示名メンションを保存用のID形式に変換する。

    - `@表示名` はname_to_idにある場合のみ `<@userId>` にする
    - `@here` / `@channel` / `@everyone` はマップに関係なく `<!kind>` にする
    - マップにない名前はそのまま残す（エラーにしない）

    Args:
        text: `@表示名` を含む入力テキスト
        name_to_id: 表示名→ユーザーIDのマップ

    Returns:
        保存用に変換したテキスト
    """
    names = [name for name in name_to_id if name]
    names.extend(SPECIAL_MENTION_KINDS)
    pattern = _build_pattern(names)

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in SPECIAL_MENTION_KINDS:
            return f"<!{name}>"
        return f"<@{name_to_id[name]}>"

    converted = pattern.sub(replace, text)

    if logger.isEnabledFor(logging.DEBUG):
        unresolved = _UNRESOLVED_MENTION_RE.findall(converted)
        if unresolved:
            logger.debug("ID形式に変換できなかったメンション: %s", unresolved)

    return converted


def from_storage_text(text: str) -> list[MrkdwnSegment]:
    """保存済みテキストからメンションを取り出し、表示用セグメントに分割する。

    `<@userId>` はuser_mention、`<!here>` 等はspecial_mentionになり、
    それ以外の文字はテキストセグメントにまとめる。メンションが連続しても
    間に空のテキストセグメントは入らない。

    Args:
        text: 保存済みテキスト

    Returns:
        list[MrkdwnSegment]: 表示用セグメント
    """
    segments: list[MrkdwnSegment] = []
    pending: list[str] = []
    closes = NextIndex(text, ">")
    pos = 0
    while pos < len(text):
        result = match_mention_token(text, pos, channels=False, closes=closes)
        if result is not None:
            flush_text(pending, segments)
            segment, pos = result
            segments.append(segment)
            continue
        # 次の < までをまとめてテキストにする
        next_open = text.find("<", pos + 1)
        end = len(text) if next_open == -1 else next_open
        pending.append(text[pos:end])
        pos = end
    flush_text(pending, segments)
    return segments
