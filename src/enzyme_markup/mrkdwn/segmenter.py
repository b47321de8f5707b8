"""mrkdwn文字列→ドキュメントツリー変換（ブロック分割）

既存メッセージを編集する際に、保存されたmrkdwnからエディタの状態を復元するために使う。
"""

import logging
import re
from collections.abc import Callable, Iterator, Mapping

from enzyme_markup.mrkdwn.nodes import (
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Document,
    HorizontalRule,
    Inline,
    OrderedList,
    Paragraph,
)
from enzyme_markup.mrkdwn.tokenizer import tokenize_inline

logger = logging.getLogger(__name__)

CODE_FENCE = "```"
HORIZONTAL_RULE = "---"

QUOTE_PREFIX_RE = re.compile(r"^> ?")
BULLET_PREFIX_RE = re.compile(r"^[•-] ")
ORDERED_PREFIX_RE = re.compile(r"^\d+\. ")


def _is_quote_line(line: str) -> bool:
    return line.startswith("> ") or line == ">"


def _is_bullet_line(line: str) -> bool:
    return BULLET_PREFIX_RE.match(line) is not None


def _is_ordered_line(line: str) -> bool:
    return ORDERED_PREFIX_RE.match(line) is not None


def _read_code_block(lines: list[str], start: int) -> tuple[CodeBlock, int]:
    """開きフェンス行から閉じフェンス行（または入力末尾）までを読む。

    本文は各行を改行で終端させてそのまま保持する（インライン解析はしない）。
    """
    language = lines[start][len(CODE_FENCE):] or None
    body: list[str] = []
    i = start + 1
    while i < len(lines) and lines[i] != CODE_FENCE:
        body.append(lines[i] + "\n")
        i += 1
    if i >= len(lines):
        logger.debug("閉じフェンスのないコードブロックを入力末尾で閉じます (開始行: %d)", start)
    return CodeBlock(language=language, text="".join(body)), i + 1


def _read_group(
    lines: list[str],
    start: int,
    predicate: Callable[[str], bool],
    prefix_re: re.Pattern[str],
) -> tuple[list[str], int]:
    """条件を満たす連続行を集め、行頭の記号を取り除いて返す。"""
    items: list[str] = []
    i = start
    while i < len(lines) and predicate(lines[i]):
        items.append(prefix_re.sub("", lines[i], count=1))
        i += 1
    return items, i


def iter_blocks(text: str, custom_emojis: Mapping[str, str] | None = None) -> Iterator[Block]:
    """mrkdwnテキストからブロックノードを順に返すジェネレータ。

    空行は段落の区切りとして扱い、ノードは生成しない。
    """
    lines = text.split("\n")
    i = 0

    def inline(source: str) -> list[Inline]:
        return tokenize_inline(source, custom_emojis)

    while i < len(lines):
        line = lines[i]

        if line.startswith(CODE_FENCE):
            block, i = _read_code_block(lines, i)
            yield block
            continue

        if _is_quote_line(line):
            quote_lines, i = _read_group(lines, i, _is_quote_line, QUOTE_PREFIX_RE)
            yield Blockquote(blocks=[Paragraph(inline=inline("\n".join(quote_lines)))])
            continue

        if _is_bullet_line(line):
            items, i = _read_group(lines, i, _is_bullet_line, BULLET_PREFIX_RE)
            yield BulletList(items=[inline(item) for item in items])
            continue

        if _is_ordered_line(line):
            # 番号は保持しない（シリアライズ時に1から振り直す）
            items, i = _read_group(lines, i, _is_ordered_line, ORDERED_PREFIX_RE)
            yield OrderedList(items=[inline(item) for item in items])
            continue

        i += 1

        if line == HORIZONTAL_RULE:
            yield HorizontalRule()
        elif line.strip():
            yield Paragraph(inline=inline(line))


def parse(text: str, custom_emojis: Mapping[str, str] | None = None) -> Document:
    """mrkdwn文字列をドキュメントツリーに変換する。

    結果が空になる場合（空文字列や空行のみ）は空の段落を1つだけ持つツリーを返す。

    Args:
        text: mrkdwn形式のテキスト
        custom_emojis: カスタム絵文字の名前→画像URLのマップ

    Returns:
        Document: ドキュメントツリー
    """
    blocks: list[Block] = list(iter_blocks(text, custom_emojis)) if text else []
    if not blocks:
        blocks = [Paragraph()]
    return Document(blocks=blocks)
