"""表示用セグメントの型定義と分割処理

セグメントは保存済みテキストを描画するためだけのフラットなトークンで、
ドキュメントツリーには戻さない。
"""

import re
from typing import Literal

from pydantic import BaseModel

from enzyme_markup.mrkdwn.nodes import MAX_SPECIAL_MENTION_LENGTH, SPECIAL_MENTION_KINDS, SpecialMentionKind
from enzyme_markup.mrkdwn.scanning import NextIndex, at_word_start

MAX_EMOJI_ONLY_COUNT = 3

SHORTCODE_RE = re.compile(r"[a-z0-9_+\-]+", re.IGNORECASE)
_TOKEN_START_RE = re.compile(r"[<:]")


class TextSegment(BaseModel, frozen=True):
    type: Literal["text"] = "text"
    text: str


class LineBreakSegment(BaseModel, frozen=True):
    type: Literal["line_break"] = "line_break"


class UserMentionSegment(BaseModel, frozen=True):
    type: Literal["user_mention"] = "user_mention"
    user_id: str


class SpecialMentionSegment(BaseModel, frozen=True):
    type: Literal["special_mention"] = "special_mention"
    kind: SpecialMentionKind


class ChannelMentionSegment(BaseModel, frozen=True):
    type: Literal["channel_mention"] = "channel_mention"
    channel_id: str


class EmojiShortcodeSegment(BaseModel, frozen=True):
    type: Literal["emoji_shortcode"] = "emoji_shortcode"
    name: str


MrkdwnSegment = (
    TextSegment
    | LineBreakSegment
    | UserMentionSegment
    | SpecialMentionSegment
    | ChannelMentionSegment
    | EmojiShortcodeSegment
)


def flush_text(pending: list[str], segments: list[MrkdwnSegment]) -> None:
    """溜めたテキストを1つのテキストセグメントとして追加する。空なら何もしない。"""
    text = "".join(pending)
    pending.clear()
    if text:
        segments.append(TextSegment(text=text))


def match_mention_token(
    text: str,
    pos: int,
    *,
    channels: bool = True,
    closes: NextIndex | None = None,
) -> tuple[MrkdwnSegment, int] | None:
    """`<@id>` / `<!kind>` / `<#id>` を現在位置でマッチさせる。

    走査中に繰り返し呼ぶ場合は、同じtextに対するclosesを渡して `>` の探索を共有する。

    Returns:
        (セグメント, 消費後の位置)。マッチしなければNone。
    """
    if not text.startswith("<", pos) or pos + 1 >= len(text):
        return None
    sigil = text[pos + 1]
    if sigil not in ("@", "!", "#") or (sigil == "#" and not channels):
        return None
    if closes is None:
        closes = NextIndex(text, ">")
    start = pos + 2
    close = closes.find(pos + 1)
    if close <= start:
        return None

    if sigil == "@":
        return UserMentionSegment(user_id=text[start:close]), close + 1
    if sigil == "!":
        if close - start > MAX_SPECIAL_MENTION_LENGTH:
            return None
        body = text[start:close]
        if body not in SPECIAL_MENTION_KINDS:
            return None
        return SpecialMentionSegment(kind=body), close + 1
    if text.startswith("|", start):
        return None
    return ChannelMentionSegment(channel_id=text[start:close].partition("|")[0]), close + 1


def _match_shortcode(text: str, pos: int) -> tuple[MrkdwnSegment, int] | None:
    if text[pos] != ":" or not at_word_start(text, pos):
        return None
    close = text.find(":", pos + 1)
    if close <= pos + 1:
        return None
    name = text[pos + 1:close]
    if not SHORTCODE_RE.fullmatch(name):
        return None
    return EmojiShortcodeSegment(name=name), close + 1


def _segment_line(line: str, segments: list[MrkdwnSegment]) -> None:
    pending: list[str] = []
    closes = NextIndex(line, ">")
    pos = 0
    while pos < len(line):
        result = match_mention_token(line, pos, closes=closes) or _match_shortcode(line, pos)
        if result is not None:
            flush_text(pending, segments)
            segment, pos = result
            segments.append(segment)
            continue
        special = _TOKEN_START_RE.search(line, pos + 1)
        end = special.start() if special else len(line)
        pending.append(line[pos:end])
        pos = end
    flush_text(pending, segments)


def to_segments(text: str) -> list[MrkdwnSegment]:
    """保存済みmrkdwnテキストを表示用セグメントに分割する。

    行の間にはLineBreakSegmentを挟む。直前が英数字でない `:shortcode:` は解決できるかどうかに
    関係なくEmojiShortcodeSegmentにする（描画側で解決し、できなければそのまま表示する）。

    Args:
        text: mrkdwn形式のテキスト

    Returns:
        list[MrkdwnSegment]: 表示用セグメント
    """
    segments: list[MrkdwnSegment] = []
    if not text:
        return segments

    for index, line in enumerate(text.split("\n")):
        if index > 0:
            segments.append(LineBreakSegment())
        _segment_line(line, segments)
    return segments


def is_emoji_only(segments: list[MrkdwnSegment]) -> bool:
    """絵文字だけ（1〜3個）のメッセージかどうかを判定する。

    空白のみのテキストと改行は無視する。絵文字のみのメッセージは大きく表示するために使う。
    """
    meaningful = [
        segment
        for segment in segments
        if not isinstance(segment, LineBreakSegment)
        and not (isinstance(segment, TextSegment) and not segment.text.strip())
    ]
    if not meaningful:
        return False
    if not all(isinstance(segment, EmojiShortcodeSegment) for segment in meaningful):
        return False
    return len(meaningful) <= MAX_EMOJI_ONLY_COUNT
