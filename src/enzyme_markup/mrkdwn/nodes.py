"""エディタ用ドキュメントツリーの型定義"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

SpecialMentionKind = Literal["here", "channel", "everyone"]

SPECIAL_MENTION_KINDS: tuple[str, ...] = ("here", "channel", "everyone")
MAX_SPECIAL_MENTION_LENGTH = max(len(kind) for kind in SPECIAL_MENTION_KINDS)


class Bold(BaseModel, frozen=True):
    type: Literal["bold"] = "bold"


class Italic(BaseModel, frozen=True):
    type: Literal["italic"] = "italic"


class Underline(BaseModel, frozen=True):
    type: Literal["underline"] = "underline"


class Strike(BaseModel, frozen=True):
    type: Literal["strike"] = "strike"


class Code(BaseModel, frozen=True):
    type: Literal["code"] = "code"


class Link(BaseModel, frozen=True):
    type: Literal["link"] = "link"
    href: str


Mark = Bold | Italic | Underline | Strike | Code | Link


class TextRun(BaseModel, frozen=True):
    type: Literal["text"] = "text"
    text: str
    marks: list[Mark] = Field(default_factory=list)

    @field_validator("marks")
    @classmethod
    def _reject_duplicate_marks(cls, marks: list[Mark]) -> list[Mark]:
        kinds = [mark.type for mark in marks]
        if len(kinds) != len(set(kinds)):
            msg = f"Duplicate mark kinds: {kinds}"
            raise ValueError(msg)
        return marks


class HardBreak(BaseModel, frozen=True):
    type: Literal["hard_break"] = "hard_break"


class UserMention(BaseModel, frozen=True):
    type: Literal["user_mention"] = "user_mention"
    id: str


class SpecialMention(BaseModel, frozen=True):
    type: Literal["special_mention"] = "special_mention"
    kind: SpecialMentionKind


class ChannelMention(BaseModel, frozen=True):
    type: Literal["channel_mention"] = "channel_mention"
    id: str
    label: str | None = None  # パース時のみ付与されるメタデータ（シリアライズしない）


class EmojiNode(BaseModel, frozen=True):
    type: Literal["emoji"] = "emoji"
    shortcode: str
    unicode: str | None = None
    image_url: str | None = None


Inline = TextRun | HardBreak | UserMention | SpecialMention | ChannelMention | EmojiNode


class Paragraph(BaseModel, frozen=True):
    type: Literal["paragraph"] = "paragraph"
    inline: list[Inline] = Field(default_factory=list)


class Heading(BaseModel, frozen=True):
    type: Literal["heading"] = "heading"
    level: int = Field(default=1, ge=1, le=6)
    inline: list[Inline] = Field(default_factory=list)


class BulletList(BaseModel, frozen=True):
    type: Literal["bullet_list"] = "bullet_list"
    items: list[list[Inline]] = Field(default_factory=list)


class OrderedList(BaseModel, frozen=True):
    type: Literal["ordered_list"] = "ordered_list"
    items: list[list[Inline]] = Field(default_factory=list)


class Blockquote(BaseModel, frozen=True):
    type: Literal["blockquote"] = "blockquote"
    blocks: list["Block"] = Field(default_factory=list)


class CodeBlock(BaseModel, frozen=True):
    type: Literal["code_block"] = "code_block"
    language: str | None = None
    text: str = ""


class HorizontalRule(BaseModel, frozen=True):
    type: Literal["horizontal_rule"] = "horizontal_rule"


Block = Paragraph | Heading | BulletList | OrderedList | Blockquote | CodeBlock | HorizontalRule

Blockquote.model_rebuild()


class Document(BaseModel, frozen=True):
    """ドキュメントツリーのルート"""

    type: Literal["doc"] = "doc"
    blocks: list[Block] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """空の段落1つだけ（またはブロックなし）のドキュメントかどうか"""
        if not self.blocks:
            return True
        return len(self.blocks) == 1 and self.blocks[0] == Paragraph()
