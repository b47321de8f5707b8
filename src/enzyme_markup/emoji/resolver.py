"""絵文字ショートコードの解決と検索"""

from dataclasses import dataclass

from enzyme_markup.emoji.table import COMMON_EMOJIS, STANDARD_EMOJIS

DEFAULT_SEARCH_LIMIT = 10

# 一致度の順位（小さいほど上位）
_EXACT = 0
_PREFIX = 1
_SUBSTRING = 2


@dataclass(frozen=True)
class EmojiMatch:
    """絵文字検索の結果1件"""

    shortcode: str
    emoji: str


def strip_colons(shortcode: str) -> str:
    """`:fire:` 形式なら前後のコロンを外す"""
    if len(shortcode) > 2 and shortcode.startswith(":") and shortcode.endswith(":"):
        return shortcode[1:-1]
    return shortcode


def resolve_emoji(shortcode: str) -> str | None:
    """ショートコードを標準絵文字の文字に解決する。

    `fire` と `:fire:` のどちらも受け付ける。見つからなければNoneを返す。
    カスタム絵文字（ワークスペースでアップロードされたもの）は呼び出し側が
    名前→画像URLのマップで解決する。
    """
    return STANDARD_EMOJIS.get(strip_colons(shortcode))


def _match_rank(candidate: str, query: str) -> int | None:
    if candidate == query:
        return _EXACT
    if candidate.startswith(query):
        return _PREFIX
    if query in candidate:
        return _SUBSTRING
    return None


def search_emoji(query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[EmojiMatch]:
    """ショートコードを検索し、一致度順に並べて返す。

    空クエリの場合はよく使う絵文字の一覧をそのままの順序で返す。
    それ以外は完全一致 > 前方一致 > 部分一致の順に並べ、同順位内は表の順序を保つ。
    大文字小文字は区別しない。

    Args:
        query: 検索文字列（前後のコロンは無視する）
        limit: 返す件数の上限

    Returns:
        list[EmojiMatch]: 一致した絵文字。一致なしなら空リスト。
    """
    if limit <= 0:
        return []

    normalized = query.strip().strip(":").lower()
    if not normalized:
        return [EmojiMatch(shortcode=code, emoji=STANDARD_EMOJIS[code]) for code in COMMON_EMOJIS[:limit]]

    ranked: list[tuple[int, int, str]] = []
    for index, shortcode in enumerate(STANDARD_EMOJIS):
        rank = _match_rank(shortcode.lower(), normalized)
        if rank is not None:
            ranked.append((rank, index, shortcode))

    ranked.sort()
    return [EmojiMatch(shortcode=code, emoji=STANDARD_EMOJIS[code]) for _, _, code in ranked[:limit]]
