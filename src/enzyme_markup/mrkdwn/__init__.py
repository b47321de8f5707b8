"""mrkdwn記法とドキュメントツリーの相互変換モジュール"""

from enzyme_markup.mrkdwn.display import render_plain_text
from enzyme_markup.mrkdwn.editor_json import from_editor_json, to_editor_json
from enzyme_markup.mrkdwn.markdown_converter import convert_markdown_to_mrkdwn, parse_markdown
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
    Mark,
    OrderedList,
    Paragraph,
    SpecialMention,
    Strike,
    TextRun,
    Underline,
    UserMention,
)
from enzyme_markup.mrkdwn.segmenter import parse
from enzyme_markup.mrkdwn.segments import (
    ChannelMentionSegment,
    EmojiShortcodeSegment,
    LineBreakSegment,
    MrkdwnSegment,
    SpecialMentionSegment,
    TextSegment,
    UserMentionSegment,
    is_emoji_only,
    to_segments,
)
from enzyme_markup.mrkdwn.serializer import serialize
from enzyme_markup.mrkdwn.tokenizer import iter_inline, resolve_emoji_node, tokenize_inline

__all__ = [
    "Block",
    "Blockquote",
    "Bold",
    "BulletList",
    "ChannelMention",
    "ChannelMentionSegment",
    "Code",
    "CodeBlock",
    "Document",
    "EmojiNode",
    "EmojiShortcodeSegment",
    "HardBreak",
    "Heading",
    "HorizontalRule",
    "Inline",
    "Italic",
    "LineBreakSegment",
    "Link",
    "Mark",
    "MrkdwnSegment",
    "OrderedList",
    "Paragraph",
    "SpecialMention",
    "SpecialMentionSegment",
    "Strike",
    "TextRun",
    "TextSegment",
    "Underline",
    "UserMention",
    "UserMentionSegment",
    "convert_markdown_to_mrkdwn",
    "from_editor_json",
    "is_emoji_only",
    "iter_inline",
    "parse",
    "parse_markdown",
    "render_plain_text",
    "resolve_emoji_node",
    "serialize",
    "to_editor_json",
    "to_segments",
    "tokenize_inline",
]
