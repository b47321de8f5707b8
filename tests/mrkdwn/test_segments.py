"""表示用セグメント分割のテスト"""

from enzyme_markup.mrkdwn.segments import (
    ChannelMentionSegment,
    EmojiShortcodeSegment,
    LineBreakSegment,
    SpecialMentionSegment,
    TextSegment,
    UserMentionSegment,
    is_emoji_only,
    to_segments,
)


class TestToSegments:
    """to_segments関数のテスト"""

    def test_empty_text(self) -> None:
        """空文字列は空リストになること"""
        assert to_segments("") == []

    def test_mentions_emoji_and_line_break(self) -> None:
        """メンション・絵文字・改行がそれぞれセグメントになること"""
        assert to_segments("Hey <@u1> :fire:\nbye <!here>") == [
            TextSegment(text="Hey "),
            UserMentionSegment(user_id="u1"),
            TextSegment(text=" "),
            EmojiShortcodeSegment(name="fire"),
            LineBreakSegment(),
            TextSegment(text="bye "),
            SpecialMentionSegment(kind="here"),
        ]

    def test_channel_mention_label_dropped(self) -> None:
        """チャンネルメンションはラベルの有無に関係なくIDだけを持つこと"""
        assert to_segments("<#C1|general> <#C2>") == [
            ChannelMentionSegment(channel_id="C1"),
            TextSegment(text=" "),
            ChannelMentionSegment(channel_id="C2"),
        ]

    def test_unknown_shortcode_is_segment(self) -> None:
        """解決できないショートコードもセグメントになること"""
        assert to_segments(":partyparrot:") == [EmojiShortcodeSegment(name="partyparrot")]

    def test_invalid_tokens_are_text(self) -> None:
        """トークンにならない記号は1つのテキストにまとまること"""
        assert to_segments("<!foo> :not an emoji:") == [TextSegment(text="<!foo> :not an emoji:")]


class TestIsEmojiOnly:
    """is_emoji_only関数のテスト"""

    def test_single_emoji(self) -> None:
        """絵文字1つだけならTrueになること"""
        assert is_emoji_only(to_segments(":fire:"))

    def test_up_to_three_with_whitespace(self) -> None:
        """空白と改行を挟んだ3つまでの絵文字ならTrueになること"""
        assert is_emoji_only(to_segments(":fire: :tada:\n:wave:"))

    def test_four_emoji(self) -> None:
        """絵文字が4つ以上ならFalseになること"""
        assert not is_emoji_only(to_segments(":fire::fire::fire::fire:"))

    def test_with_text(self) -> None:
        """テキストが含まれるとFalseになること"""
        assert not is_emoji_only(to_segments(":fire: nice"))

    def test_empty(self) -> None:
        """空のメッセージはFalseになること"""
        assert not is_emoji_only([])
        assert not is_emoji_only(to_segments("  "))


class TestToSegmentsBoundaries:
    """トークン境界のテスト"""

    def test_time_is_not_emoji(self) -> None:
        """時刻表記のコロンが絵文字として扱われないこと"""
        assert to_segments("at 10:30:45") == [TextSegment(text="at 10:30:45")]

    def test_adjacent_shortcodes(self) -> None:
        """連続するショートコードはそれぞれ絵文字になること"""
        assert to_segments(":fire::tada:") == [EmojiShortcodeSegment(name="fire"), EmojiShortcodeSegment(name="tada")]

    def test_many_open_brackets(self) -> None:
        """開き山括弧だけの行は1つのテキストになること"""
        assert to_segments("<" * 20000) == [TextSegment(text="<" * 20000)]
        assert to_segments("<>" * 10000) == [TextSegment(text="<>" * 10000)]
