"""@メンション入力トリガー検出のテスト"""

from enzyme_markup.mentions.models import MentionTrigger
from enzyme_markup.mentions.trigger import detect_trigger


class TestDetectTrigger:
    """detect_trigger関数のテスト"""

    def test_trigger_after_space(self) -> None:
        """空白の後の @query がトリガーになること"""
        assert detect_trigger("hello @al", 9) == MentionTrigger(is_active=True, query="al", start_index=6)

    def test_trigger_at_start(self) -> None:
        """先頭の @ がトリガーになること"""
        assert detect_trigger("@jo", 3) == MentionTrigger(is_active=True, query="jo", start_index=0)

    def test_empty_query(self) -> None:
        """@ を入力した直後は空クエリのトリガーになること"""
        assert detect_trigger("hi @", 4) == MentionTrigger(is_active=True, query="", start_index=3)

    def test_trigger_after_newline(self) -> None:
        """改行の後の @ もトリガーになること"""
        assert detect_trigger("line\n@x", 7) == MentionTrigger(is_active=True, query="x", start_index=5)

    def test_query_ends_at_cursor(self) -> None:
        """クエリはカーソル位置までであること"""
        assert detect_trigger("@alice", 3) == MentionTrigger(is_active=True, query="al", start_index=0)

    def test_mid_word_at_sign(self) -> None:
        """単語の途中の @ はトリガーにならないこと"""
        assert detect_trigger("test@example.com", 16) is None

    def test_space_after_query(self) -> None:
        """カーソルと @ の間に空白があればトリガーにならないこと"""
        assert detect_trigger("@al bob", 7) is None

    def test_no_at_sign(self) -> None:
        """@ がなければトリガーにならないこと"""
        assert detect_trigger("hello", 5) is None
        assert detect_trigger("", 0) is None

    def test_cursor_clamped(self) -> None:
        """範囲外のカーソル位置は末尾として扱われること"""
        assert detect_trigger("@jo", 99) == MentionTrigger(is_active=True, query="jo", start_index=0)
