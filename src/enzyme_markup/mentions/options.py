"""メンション候補の絞り込みと挿入"""

from collections.abc import Iterable

from enzyme_markup.directory import Member
from enzyme_markup.mentions.models import (
    SPECIAL_MENTIONS,
    MentionInsertion,
    MentionOption,
    MentionTrigger,
    UserMentionOption,
)

# 一致度の順位（小さいほど上位）
_EXACT = 0
_PREFIX = 1
_SUBSTRING = 2


def _match_rank(display_name: str, query: str) -> int | None:
    name = display_name.lower()
    if name == query:
        return _EXACT
    if name.startswith(query):
        return _PREFIX
    if query in name:
        return _SUBSTRING
    return None


def resolve_mention_options(
    query: str,
    members: Iterable[Member],
    limit: int | None = None,
) -> list[MentionOption]:
    """クエリに一致するメンション候補を一致度順に返す。

    候補はディレクトリのメンバー（渡された順）と here / channel / everyone。
    表示名の完全一致 > 前方一致 > 部分一致の順（大文字小文字は区別しない）で、
    同順位内は元の順序を保つ。一致しない候補は除外する。

    Args:
        query: @ の後に入力された文字列
        members: メンバーディレクトリ
        limit: 返す件数の上限（Noneなら無制限）

    Returns:
        list[MentionOption]: 候補一覧。一致なしなら空リスト。
    """
    normalized = query.lower()
    candidates: list[MentionOption] = [
        UserMentionOption(id=member.user_id, display_name=member.display_name, avatar_url=member.avatar_url)
        for member in members
    ]
    candidates.extend(SPECIAL_MENTIONS)

    ranked: list[tuple[int, int, MentionOption]] = []
    for index, option in enumerate(candidates):
        rank = _match_rank(option.display_name, normalized)
        if rank is not None:
            ranked.append((rank, index, option))

    ranked.sort(key=lambda entry: (entry[0], entry[1]))
    options = [option for _, _, option in ranked]
    if limit is not None:
        options = options[:limit]
    return options


def insert_mention(text: str, trigger: MentionTrigger, option: MentionOption) -> MentionInsertion:
    """トリガー部分（@query）を `@表示名 ` に置き換える。

    Returns:
        MentionInsertion: 置換後のテキストと新しいカーソル位置（挿入した末尾の空白の直後）
    """
    before = text[:trigger.start_index]
    after = text[trigger.start_index + len(trigger.query) + 1:]  # +1は@の分

    mention_text = f"@{option.display_name} "
    return MentionInsertion(content=before + mention_text + after, cursor_pos=len(before) + len(mention_text))


def build_mention_map(options: Iterable[MentionOption]) -> dict[str, str]:
    """選択されたユーザー候補から 表示名→ユーザーID のマップを作る。

    to_storage_textに渡すためのもの。特殊メンションは変換不要なので含めない。
    """
    return {option.display_name: option.id for option in options if isinstance(option, UserMentionOption)}
