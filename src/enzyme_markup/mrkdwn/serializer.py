"""ドキュメントツリー→mrkdwn文字列変換

mrkdwn記法:
- *bold* / _italic_ / ++underline++ / ~strikethrough~ / `code`
- ```lang\\ncode\\n``` でコードブロック
- 行頭の > で引用
- <@userId> / <!here> / <#channelId> でメンション
- <url|text> でリンク
- :shortcode: で絵文字
"""

import logging

from enzyme_markup.mrkdwn.nodes import (
    Block,
    Blockquote,
    Bold,
    BulletList,
    ChannelMention,
    Code,
    CodeBlock,
    Document,
    EmojiNode,
    HardBreak,
    Heading,
    HorizontalRule,
    Inline,
    Italic,
    Link,
    OrderedList,
    Paragraph,
    SpecialMention,
    Strike,
    TextRun,
    Underline,
    UserMention,
)

logger = logging.getLogger(__name__)

BULLET_MARKER = "•"
MAX_HEADING_SIGILS = 3


def serialize(document: Document | None) -> str:
    """ドキュメントツリーをmrkdwn文字列に変換する。

    前後の空白の除去はここで一度だけ行う（ブロック単位では行わない）。

    Args:
        document: ドキュメントツリー

    Returns:
        mrkdwn形式の文字列。空のツリーなら空文字列。
    """
    if document is None:
        return ""
    return "".join(_serialize_block(block) for block in document.blocks).strip()


def _serialize_block(block: Block) -> str:
    if isinstance(block, Paragraph):
        return serialize_inline(block.inline) + "\n"

    if isinstance(block, Heading):
        # 見出しは太字に変換する。レベル4以上は3と区別できない
        sigil = "*" * min(block.level, MAX_HEADING_SIGILS)
        return sigil + serialize_inline(block.inline) + sigil + "\n"

    if isinstance(block, BulletList):
        return "".join(f"{BULLET_MARKER} {serialize_inline(item)}\n" for item in block.items)

    if isinstance(block, OrderedList):
        return "".join(f"{number}. {serialize_inline(item)}\n" for number, item in enumerate(block.items, start=1))

    if isinstance(block, Blockquote):
        # 空のリストなど出力のない子は引用記号も付けない
        children = (_serialize_block(child) for child in block.blocks)
        return "".join(_quote(text) for text in children if text)

    if isinstance(block, CodeBlock):
        code = block.text
        # 閉じフェンスがコード末尾に連結されないよう改行で終える
        if code and not code.endswith("\n"):
            code += "\n"
        return f"```{block.language or ''}\n{code}```\n"

    if isinstance(block, HorizontalRule):
        return "---\n"

    return _serialize_unknown(block)


def _quote(text: str) -> str:
    """ブロックの出力の各行に引用記号を付ける。空行は `>` のみにする。"""
    body = text.removesuffix("\n")
    return "\n".join(f"> {line}" if line else ">" for line in body.split("\n")) + "\n"


def serialize_inline(nodes: list[Inline]) -> str:
    """インラインノード列をmrkdwn文字列に変換する"""
    return "".join(_serialize_inline_node(node) for node in nodes)


def _serialize_inline_node(node: Inline) -> str:
    if isinstance(node, TextRun):
        return _serialize_text(node)
    if isinstance(node, HardBreak):
        return "\n"
    if isinstance(node, UserMention):
        return f"<@{node.id}>"
    if isinstance(node, SpecialMention):
        return f"<!{node.kind}>"
    if isinstance(node, ChannelMention):
        return f"<#{node.id}>"
    if isinstance(node, EmojiNode):
        return f":{node.shortcode}:"
    return _serialize_unknown(node)


def _serialize_text(node: TextRun) -> str:
    text = node.text
    marks = node.marks

    # インラインコードには他のマークを付けない（トークナイザは単一マークのランしか作らない）
    if any(isinstance(mark, Code) for mark in marks):
        return f"`{text}`"

    # 内側から外側の順に適用
    for mark in marks:
        if isinstance(mark, Bold):
            text = f"*{text}*"
        elif isinstance(mark, Italic):
            text = f"_{text}_"
        elif isinstance(mark, Underline):
            text = f"++{text}++"
        elif isinstance(mark, Strike):
            text = f"~{text}~"
        elif isinstance(mark, Link) and mark.href:
            text = f"<{mark.href}|{text}>"
    return text


def _serialize_unknown(node: object) -> str:
    """未知のノードは子要素だけを出力する"""
    logger.warning("未知のノード型のため子要素のみ出力します: %s", type(node).__name__)
    parts: list[str] = []
    for child in _children(node, "blocks"):
        parts.append(_serialize_block(child))
    for child in _children(node, "inline"):
        parts.append(_serialize_inline_node(child))
    for item in _children(node, "items"):
        if isinstance(item, list):
            parts.append(serialize_inline(item) + "\n")
    return "".join(parts)


def _children(node: object, name: str) -> list:
    value = getattr(node, name, None)
    return value if isinstance(value, list) else []
