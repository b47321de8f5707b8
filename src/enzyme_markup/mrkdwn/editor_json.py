"""エディタのJSON形式とドキュメントツリーの相互変換

エディタは `{"type": "doc", "content": [...]}` 形式のJSONでドキュメントを扱う。
未知のノード型は子要素だけを取り込む。不正な入力でも例外は出さない。
"""

import logging
from typing import Any

from enzyme_markup.mrkdwn.nodes import (
    SPECIAL_MENTION_KINDS,
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
    Mark,
    OrderedList,
    Paragraph,
    SpecialMention,
    Strike,
    TextRun,
    Underline,
    UserMention,
)

logger = logging.getLogger(__name__)

JSONContent = dict[str, Any]

_MARKS_FROM_JSON: dict[str, Mark] = {
    "bold": Bold(),
    "italic": Italic(),
    "underline": Underline(),
    "strike": Strike(),
    "code": Code(),
}

_INLINE_TYPES = frozenset({"text", "hardBreak", "userMention", "specialMention", "channelMention", "emojiNode"})


def _content(node: JSONContent) -> list[JSONContent]:
    content = node.get("content")
    if not isinstance(content, list):
        return []
    return [child for child in content if isinstance(child, dict)]


def _attrs(node: JSONContent) -> dict[str, Any]:
    attrs = node.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def from_editor_json(content: JSONContent | None) -> Document:
    """エディタのJSONをドキュメントツリーに変換する。

    ブロックが1つもない場合は空の段落を1つ持つツリーを返す。
    """
    blocks = _blocks_from_json(_content(content)) if isinstance(content, dict) else []
    return Document(blocks=blocks or [Paragraph()])


def _blocks_from_json(nodes: list[JSONContent]) -> list[Block]:
    blocks: list[Block] = []
    for node in nodes:
        blocks.extend(_block_from_json(node))
    return blocks


def _block_from_json(node: JSONContent) -> list[Block]:
    node_type = node.get("type")
    attrs = _attrs(node)

    if node_type == "paragraph":
        return [Paragraph(inline=_inline_from_json(_content(node)))]

    if node_type == "heading":
        level = attrs.get("level")
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return [Heading(level=level, inline=_inline_from_json(_content(node)))]

    if node_type in ("bulletList", "orderedList"):
        items = [_list_item_from_json(item) for item in _content(node)]
        if node_type == "bulletList":
            return [BulletList(items=items)]
        return [OrderedList(items=items)]

    if node_type == "blockquote":
        return [Blockquote(blocks=_blocks_from_json(_content(node)))]

    if node_type == "codeBlock":
        language = attrs.get("language")
        text = "".join(str(child.get("text", "")) for child in _content(node))
        return [CodeBlock(language=language if isinstance(language, str) and language else None, text=text)]

    if node_type == "horizontalRule":
        return [HorizontalRule()]

    logger.warning("未知のブロック型のため子要素のみ取り込みます: %s", node_type)
    children = _content(node)
    if any(child.get("type") in _INLINE_TYPES for child in children):
        return [Paragraph(inline=_inline_from_json(children))]
    return _blocks_from_json(children)


def _list_item_from_json(item: JSONContent) -> list[Inline]:
    # リスト項目は段落を持つ。段落以外の子はインラインとして扱う
    inline: list[Inline] = []
    for child in _content(item):
        if child.get("type") == "paragraph":
            inline.extend(_inline_from_json(_content(child)))
        else:
            inline.extend(_inline_from_json([child]))
    return inline


def _marks_from_json(raw_marks: object) -> list[Mark]:
    marks: list[Mark] = []
    seen: set[str] = set()
    if not isinstance(raw_marks, list):
        return marks
    for raw in raw_marks:
        if not isinstance(raw, dict):
            continue
        mark_type = raw.get("type")
        mark: Mark | None = _MARKS_FROM_JSON.get(mark_type) if isinstance(mark_type, str) else None
        if mark_type == "link":
            href = _attrs(raw).get("href")
            mark = Link(href=href) if isinstance(href, str) and href else None
        if mark is not None and mark.type not in seen:
            seen.add(mark.type)
            marks.append(mark)
    return marks


def _inline_from_json(nodes: list[JSONContent]) -> list[Inline]:
    inline: list[Inline] = []
    for node in nodes:
        node_type = node.get("type")
        attrs = _attrs(node)
        node_id = attrs.get("id")

        if node_type == "text":
            text = node.get("text")
            if isinstance(text, str) and text:
                inline.append(TextRun(text=text, marks=_marks_from_json(node.get("marks"))))
        elif node_type == "hardBreak":
            inline.append(HardBreak())
        elif node_type == "userMention" and isinstance(node_id, str):
            inline.append(UserMention(id=node_id))
        elif node_type == "specialMention" and node_id in SPECIAL_MENTION_KINDS:
            inline.append(SpecialMention(kind=node_id))
        elif node_type == "channelMention" and isinstance(node_id, str):
            label = attrs.get("label")
            inline.append(ChannelMention(id=node_id, label=label if isinstance(label, str) else None))
        elif node_type == "emojiNode" and isinstance(attrs.get("shortcode"), str):
            inline.append(
                EmojiNode(
                    shortcode=attrs["shortcode"],
                    unicode=attrs.get("unicode") if isinstance(attrs.get("unicode"), str) else None,
                    image_url=attrs.get("imageUrl") if isinstance(attrs.get("imageUrl"), str) else None,
                )
            )
        else:
            logger.warning("未知のインライン型のため子要素のみ取り込みます: %s", node_type)
            inline.extend(_inline_from_json(_content(node)))
    return inline


def to_editor_json(document: Document) -> JSONContent:
    """ドキュメントツリーをエディタのJSONに変換する"""
    return {"type": "doc", "content": [_block_to_json(block) for block in document.blocks]}


def _paragraph_json(inline: list[Inline]) -> JSONContent:
    node: JSONContent = {"type": "paragraph"}
    if inline:
        node["content"] = [_inline_to_json(child) for child in inline]
    return node


def _block_to_json(block: Block) -> JSONContent:
    if isinstance(block, Paragraph):
        return _paragraph_json(block.inline)
    if isinstance(block, Heading):
        return {
            "type": "heading",
            "attrs": {"level": block.level},
            "content": [_inline_to_json(child) for child in block.inline],
        }
    if isinstance(block, BulletList | OrderedList):
        return {
            "type": "bulletList" if isinstance(block, BulletList) else "orderedList",
            "content": [{"type": "listItem", "content": [_paragraph_json(item)]} for item in block.items],
        }
    if isinstance(block, Blockquote):
        return {"type": "blockquote", "content": [_block_to_json(child) for child in block.blocks]}
    if isinstance(block, CodeBlock):
        node: JSONContent = {"type": "codeBlock", "attrs": {"language": block.language}}
        if block.text:
            node["content"] = [{"type": "text", "text": block.text}]
        return node
    return {"type": "horizontalRule"}


def _inline_to_json(node: Inline) -> JSONContent:
    if isinstance(node, TextRun):
        result: JSONContent = {"type": "text", "text": node.text}
        if node.marks:
            result["marks"] = [
                {"type": "link", "attrs": {"href": mark.href}} if isinstance(mark, Link) else {"type": mark.type}
                for mark in node.marks
            ]
        return result
    if isinstance(node, HardBreak):
        return {"type": "hardBreak"}
    if isinstance(node, UserMention):
        return {"type": "userMention", "attrs": {"id": node.id}}
    if isinstance(node, SpecialMention):
        return {"type": "specialMention", "attrs": {"id": node.kind}}
    if isinstance(node, ChannelMention):
        return {"type": "channelMention", "attrs": {"id": node.id, "label": node.label}}
    return {
        "type": "emojiNode",
        "attrs": {"shortcode": node.shortcode, "unicode": node.unicode, "imageUrl": node.image_url},
    }
