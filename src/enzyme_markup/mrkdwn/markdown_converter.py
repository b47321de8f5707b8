"""Markdown→mrkdwn変換モジュール

コンポーザーに貼り付けられたGitHub Markdownをmrkdwnに変換する薄いラッパー。
ライブラリ差し替え時の変更箇所を限定するため、変換ロジックを集約する。
"""

from collections.abc import Mapping

from markdown_to_mrkdwn import SlackMarkdownConverter

from enzyme_markup.mrkdwn.nodes import Document
from enzyme_markup.mrkdwn.segmenter import parse


def convert_markdown_to_mrkdwn(text: str) -> str:
    """Markdownテキストをmrkdwn記法に変換する。

    mrkdwnは文字参照（&amp; 等）を使わないため、変換結果をエスケープせずそのまま返す。

    Args:
        text: Markdown形式のテキスト

    Returns:
        mrkdwn形式に変換されたテキスト
    """
    converter = SlackMarkdownConverter()
    return converter.convert(text)


def parse_markdown(text: str, custom_emojis: Mapping[str, str] | None = None) -> Document:
    """Markdownテキストをドキュメントツリーに変換する"""
    return parse(convert_markdown_to_mrkdwn(text), custom_emojis)
