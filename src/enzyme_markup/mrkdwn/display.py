"""表示用セグメント→人が読めるテキスト変換

通知本文や検索結果のプレビューなど、装飾なしで表示する場面で使う。
"""

from collections.abc import Iterable

from enzyme_markup.directory import Channel, Member
from enzyme_markup.emoji.resolver import resolve_emoji
from enzyme_markup.mrkdwn.segments import (
    ChannelMentionSegment,
    EmojiShortcodeSegment,
    LineBreakSegment,
    MrkdwnSegment,
    SpecialMentionSegment,
    TextSegment,
    UserMentionSegment,
)


def render_plain_text(
    segments: Iterable[MrkdwnSegment],
    members: Iterable[Member] = (),
    channels: Iterable[Channel] = (),
) -> str:
    """セグメントを人が読めるテキストに変換する。

    - ユーザーメンションは `@表示名`（ディレクトリにいなければ `@ユーザーID`）
    - 特殊メンションは `@here` など
    - チャンネルメンションは `#チャンネル名`（見つからなければ `#チャンネルID`）
    - 標準絵文字は文字そのもの、カスタム絵文字と未知のショートコードは `:name:` のまま
    """
    member_names = {member.user_id: member.display_name for member in members}
    channel_names = {channel.id: channel.name for channel in channels}

    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, TextSegment):
            parts.append(segment.text)
        elif isinstance(segment, LineBreakSegment):
            parts.append("\n")
        elif isinstance(segment, UserMentionSegment):
            parts.append(f"@{member_names.get(segment.user_id, segment.user_id)}")
        elif isinstance(segment, SpecialMentionSegment):
            parts.append(f"@{segment.kind}")
        elif isinstance(segment, ChannelMentionSegment):
            parts.append(f"#{channel_names.get(segment.channel_id, segment.channel_id)}")
        elif isinstance(segment, EmojiShortcodeSegment):
            parts.append(resolve_emoji(segment.name) or f":{segment.name}:")
    return "".join(parts)
