"""mrkdwn→ドキュメントツリー変換のテスト"""

from enzyme_markup.mrkdwn.nodes import (
    Blockquote,
    Bold,
    BulletList,
    CodeBlock,
    Document,
    HorizontalRule,
    OrderedList,
    Paragraph,
    TextRun,
)
from enzyme_markup.mrkdwn.segmenter import parse


class TestParse:
    """parse関数のテスト"""

    def test_empty_text(self) -> None:
        """空文字列は空の段落1つのツリーになること"""
        document = parse("")
        assert document == Document(blocks=[Paragraph()])
        assert document.is_empty

    def test_blank_lines_only(self) -> None:
        """空行のみの入力も空の段落1つのツリーになること"""
        assert parse("\n\n") == Document(blocks=[Paragraph()])

    def test_bold_paragraph(self) -> None:
        """*hello* が太字1つを持つ段落になること"""
        assert parse("*hello*").blocks == [Paragraph(inline=[TextRun(text="hello", marks=[Bold()])])]

    def test_each_line_is_paragraph(self) -> None:
        """通常の行はそれぞれ段落になり、空行は無視されること"""
        assert parse("a\n\nb").blocks == [
            Paragraph(inline=[TextRun(text="a")]),
            Paragraph(inline=[TextRun(text="b")]),
        ]

    def test_blockquote(self) -> None:
        """連続する引用行が1つの引用ブロックにまとまること"""
        assert parse("> line one\n> line two").blocks == [
            Blockquote(blocks=[Paragraph(inline=[TextRun(text="line one\nline two")])])
        ]

    def test_code_block_with_language(self) -> None:
        """言語指定付きのコードブロックが読めること"""
        assert parse("```js\nconst x = 1;\n```").blocks == [CodeBlock(language="js", text="const x = 1;\n")]

    def test_code_block_without_language(self) -> None:
        """言語指定なしのコードブロックはlanguageがNoneになること"""
        assert parse("```\n*not bold*\n```").blocks == [CodeBlock(text="*not bold*\n")]

    def test_unterminated_code_block(self) -> None:
        """閉じフェンスがなければ入力末尾までがコードになること"""
        assert parse("```\na\nb").blocks == [CodeBlock(text="a\nb\n")]

    def test_code_block_between_paragraphs(self) -> None:
        """コードブロックの前後の行が段落になること"""
        assert parse("before\n```\ncode\n```\nafter").blocks == [
            Paragraph(inline=[TextRun(text="before")]),
            CodeBlock(text="code\n"),
            Paragraph(inline=[TextRun(text="after")]),
        ]

    def test_bullet_list(self) -> None:
        """• と - の行が箇条書きになること"""
        assert parse("• a\n- b").blocks == [BulletList(items=[[TextRun(text="a")], [TextRun(text="b")]])]

    def test_ordered_list(self) -> None:
        """番号付きの行が番号付きリストになること"""
        assert parse("3. a\n7. b").blocks == [OrderedList(items=[[TextRun(text="a")], [TextRun(text="b")]])]

    def test_horizontal_rule(self) -> None:
        """--- が水平線になること"""
        assert parse("a\n---\nb").blocks == [
            Paragraph(inline=[TextRun(text="a")]),
            HorizontalRule(),
            Paragraph(inline=[TextRun(text="b")]),
        ]
