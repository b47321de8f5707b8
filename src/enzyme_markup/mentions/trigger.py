"""@メンションの入力トリガー検出"""

from enzyme_markup.mentions.models import MentionTrigger


def detect_trigger(text: str, cursor_pos: int) -> MentionTrigger | None:
    """カーソル位置が未確定の @query の中にあるかを判定する。

    カーソルから後ろ向きに走査し、空白より先に @ が見つかればトリガーとする。
    @ は先頭か空白・改行の直後にある場合のみ有効（メールアドレス等の途中の @ は無視）。

    Args:
        text: 入力中のテキスト
        cursor_pos: カーソル位置（文字インデックス）

    Returns:
        MentionTrigger。トリガーがなければNone。
    """
    cursor = max(0, min(cursor_pos, len(text)))

    for i in range(cursor - 1, -1, -1):
        char = text[i]
        # @ より先に空白に当たった場合はトリガーなし
        if char.isspace():
            return None
        if char == "@":
            if i == 0 or text[i - 1].isspace():
                return MentionTrigger(is_active=True, query=text[i + 1:cursor], start_index=i)
            return None

    return None
