"""インライン記法のトークナイザ

1行分（または引用ブロックで連結された複数行）のmrkdwnテキストを走査し、
インラインノード列に変換する。

各パターンは現在位置に固定してマッチさせ、閉じ記号は最も近いものを採用する。
そのため閉じられていない開き記号が後続のテキストを飲み込むことはない。
`>` の位置は走査全体で共有し、入力長に比例する時間で処理する。
"""

from collections.abc import Callable, Iterator, Mapping

from enzyme_markup.emoji.resolver import resolve_emoji, strip_colons
from enzyme_markup.mrkdwn.nodes import (
    MAX_SPECIAL_MENTION_LENGTH,
    SPECIAL_MENTION_KINDS,
    Bold,
    ChannelMention,
    Code,
    EmojiNode,
    Inline,
    Italic,
    Link,
    Mark,
    SpecialMention,
    Strike,
    TextRun,
    Underline,
    UserMention,
)
from enzyme_markup.mrkdwn.scanning import NextIndex, at_word_start

_URL_SCHEMES = ("http://", "https://")

# 囲み記法: (記号, マーク)。この順で試す
_WRAPPED_MARKS: tuple[tuple[str, Mark], ...] = (
    ("`", Code()),
    ("*", Bold()),
    ("_", Italic()),
    ("++", Underline()),
    ("~", Strike()),
)

# (マッチしたノード, 消費後の位置) または None
MatchResult = tuple[Inline, int] | None
Matcher = Callable[[str, int, NextIndex], MatchResult]


def _angle_body(text: str, pos: int, prefix: str, closes: NextIndex) -> tuple[int, int] | None:
    """`<prefix...>` の中身の開始位置と `>` の位置を返す。中身が空ならNone。"""
    if not text.startswith(prefix, pos):
        return None
    start = pos + len(prefix)
    # prefixの2文字目以降は `>` ではないので pos+1 から探しても同じ位置になる
    close = closes.find(pos + 1)
    if close <= start:
        return None
    return start, close


def _match_user_mention(text: str, pos: int, closes: NextIndex) -> MatchResult:
    found = _angle_body(text, pos, "<@", closes)
    if found is None:
        return None
    start, close = found
    return UserMention(id=text[start:close]), close + 1


def _match_special_mention(text: str, pos: int, closes: NextIndex) -> MatchResult:
    found = _angle_body(text, pos, "<!", closes)
    if found is None:
        return None
    start, close = found
    if close - start > MAX_SPECIAL_MENTION_LENGTH:
        return None
    body = text[start:close]
    if body not in SPECIAL_MENTION_KINDS:
        return None
    return SpecialMention(kind=body), close + 1


def _match_channel_mention(text: str, pos: int, closes: NextIndex) -> MatchResult:
    found = _angle_body(text, pos, "<#", closes)
    if found is None:
        return None
    start, close = found
    if text.startswith("|", start):
        return None
    channel_id, sep, label = text[start:close].partition("|")
    return ChannelMention(id=channel_id, label=label if sep and label else None), close + 1


def _url_scheme(text: str, start: int) -> str | None:
    for scheme in _URL_SCHEMES:
        if text.startswith(scheme, start):
            return scheme
    return None


def _match_labeled_link(text: str, pos: int, closes: NextIndex) -> MatchResult:
    found = _angle_body(text, pos, "<", closes)
    if found is None:
        return None
    start, close = found
    scheme = _url_scheme(text, start)
    if scheme is None:
        return None
    host_start = start + len(scheme)
    pipe = text.find("|", host_start, close)
    if pipe <= host_start or pipe + 1 == close:
        return None
    return TextRun(text=text[pipe + 1:close], marks=[Link(href=text[start:pipe])]), close + 1


def _match_bare_link(text: str, pos: int, closes: NextIndex) -> MatchResult:
    found = _angle_body(text, pos, "<", closes)
    if found is None:
        return None
    start, close = found
    scheme = _url_scheme(text, start)
    if scheme is None or close == start + len(scheme):
        return None
    url = text[start:close]
    return TextRun(text=url, marks=[Link(href=url)]), close + 1


def _match_wrapped(text: str, pos: int, sigil: str, mark: Mark) -> MatchResult:
    """`sigil内容sigil` を単一マークのTextRunにする。

    閉じ記号は開き記号の直後から最も近い記号の1文字目で探し、
    そこから閉じ記号全体が続かない場合はマッチさせない。
    """
    if not text.startswith(sigil, pos):
        return None
    start = pos + len(sigil)
    close = text.find(sigil[0], start)
    if close <= start or not text.startswith(sigil, close):
        return None
    return TextRun(text=text[start:close], marks=[mark]), close + len(sigil)


def _make_wrapped_matcher(sigil: str, mark: Mark) -> Matcher:
    def matcher(text: str, pos: int, closes: NextIndex) -> MatchResult:
        return _match_wrapped(text, pos, sigil, mark)

    return matcher


_MATCHERS: tuple[Matcher, ...] = (
    _match_user_mention,
    _match_special_mention,
    _match_channel_mention,
    _match_labeled_link,
    _match_bare_link,
    *(_make_wrapped_matcher(sigil, mark) for sigil, mark in _WRAPPED_MARKS),
)


def resolve_emoji_node(shortcode: str, custom_emojis: Mapping[str, str] | None = None) -> EmojiNode | None:
    """ショートコードからEmojiNodeを組み立てる。

    標準絵文字を優先し、なければワークスペースのカスタム絵文字（名前→画像URL）を引く。

    Args:
        shortcode: ショートコード（コロンの有無は問わない）
        custom_emojis: カスタム絵文字の名前→画像URLのマップ

    Returns:
        EmojiNode。どちらにもなければNone。
    """
    name = strip_colons(shortcode)
    unicode = resolve_emoji(name)
    if unicode is not None:
        return EmojiNode(shortcode=name, unicode=unicode)
    if custom_emojis and name in custom_emojis:
        return EmojiNode(shortcode=name, image_url=custom_emojis[name])
    return None


def _match_emoji(text: str, pos: int, custom_emojis: Mapping[str, str] | None) -> MatchResult:
    if text[pos] != ":" or not at_word_start(text, pos):
        return None
    close = text.find(":", pos + 1)
    if close <= pos + 1:
        return None
    name = text[pos + 1:close]
    if any(ch.isspace() for ch in name):
        return None
    node = resolve_emoji_node(name, custom_emojis)
    if node is None:
        return None
    return node, close + 1


def iter_inline(text: str, custom_emojis: Mapping[str, str] | None = None) -> Iterator[Inline]:
    """テキストを走査してインラインノードを順に返すジェネレータ。

    マッチしなかった文字は1文字ずつ消費し、直前のマークなしテキストに連結する。
    絵文字 `:shortcode:` は最も低い優先度で、直前が英数字でなく、標準絵文字または
    custom_emojisで解決できる場合のみノードになる。

    Args:
        text: 走査するテキスト
        custom_emojis: カスタム絵文字の名前→画像URLのマップ

    Yields:
        Inline: 入力全体を隙間なく覆うインラインノード
    """
    pending: list[str] = []
    closes = NextIndex(text, ">")
    pos = 0
    length = len(text)

    while pos < length:
        result: MatchResult = None
        for matcher in _MATCHERS:
            result = matcher(text, pos, closes)
            if result is not None:
                break
        if result is None:
            result = _match_emoji(text, pos, custom_emojis)

        if result is None:
            pending.append(text[pos])
            pos += 1
            continue

        if pending:
            yield TextRun(text="".join(pending))
            pending = []
        node, pos = result
        yield node

    if pending:
        yield TextRun(text="".join(pending))


def tokenize_inline(text: str, custom_emojis: Mapping[str, str] | None = None) -> list[Inline]:
    """iter_inlineの結果をリストで返す"""
    return list(iter_inline(text, custom_emojis))
