"""前進のみの走査で使う補助"""

_UNKNOWN = -2


class NextIndex:
    """指定した文字の、開始位置以降で最初の出現位置を返す。

    前回見つけた位置が開始位置以降にある間はそれを再利用するので、
    開始位置を単調非減少で呼び出す限り、走査全体の探索量は入力長に比例する。
    """

    def __init__(self, text: str, char: str) -> None:
        self._text = text
        self._char = char
        self._index = _UNKNOWN

    def find(self, start: int) -> int:
        """start以降で最初の出現位置。なければ-1。"""
        if self._index == _UNKNOWN or 0 <= self._index < start:
            self._index = self._text.find(self._char, start)
        return self._index


def at_word_start(text: str, pos: int) -> bool:
    """posの直前が英数字でないかどうか（`10:30` の `:` などを除外する）"""
    return pos == 0 or not text[pos - 1].isalnum()
