"""コマンドラインインターフェースのテスト"""

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from enzyme_markup.__main__ import main


def _run(argv: list[str], stdin: str = "") -> int:
    with patch("sys.stdin", io.StringIO(stdin)):
        return main(argv)


class TestMain:
    """main関数のテスト"""

    def test_parse(self, capsys: pytest.CaptureFixture[str]) -> None:
        """mrkdwnをドキュメントツリーのJSONに変換すること"""
        assert _run(["parse"], "*hi*") == 0

        document = json.loads(capsys.readouterr().out)
        assert document["type"] == "doc"
        assert document["blocks"][0]["inline"] == [{"type": "text", "text": "hi", "marks": [{"type": "bold"}]}]

    def test_serialize(self, capsys: pytest.CaptureFixture[str]) -> None:
        """ドキュメントツリーのJSONをmrkdwnに変換すること"""
        document = {
            "type": "doc",
            "blocks": [
                {"type": "paragraph", "inline": [{"type": "text", "text": "hi", "marks": [{"type": "bold"}]}]},
                {"type": "ordered_list", "items": [[{"type": "text", "text": "a"}]]},
            ],
        }
        assert _run(["serialize"], json.dumps(document)) == 0
        assert capsys.readouterr().out == "*hi*\n1. a\n"

    def test_serialize_invalid_json(self) -> None:
        """不正なJSONならエラー終了すること"""
        assert _run(["serialize"], "{not json") == 1

    def test_segments(self, capsys: pytest.CaptureFixture[str]) -> None:
        """mrkdwnを表示用セグメントのJSONに変換すること"""
        assert _run(["segments"], "Hey <@u1>") == 0

        segments = json.loads(capsys.readouterr().out)
        assert segments == [{"type": "text", "text": "Hey "}, {"type": "user_mention", "user_id": "u1"}]

    def test_emoji(self, capsys: pytest.CaptureFixture[str]) -> None:
        """絵文字を検索すること"""
        assert _run(["emoji", "fire"]) == 0

        matches = json.loads(capsys.readouterr().out)
        assert matches[0] == {"shortcode": "fire", "emoji": "🔥"}

    def test_emoji_limit_from_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """設定ファイルの件数上限が使われること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("emoji_search_limit: 2\n")

        assert _run(["--config", str(config_file), "emoji", "th"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_mentions(self, capsys: pytest.CaptureFixture[str]) -> None:
        """メンバー一覧からメンション候補を検索すること"""
        members = [{"user_id": "u1", "display_name": "John Doe"}, {"user_id": "u2", "display_name": "Alice"}]
        assert _run(["mentions", "jo"], json.dumps(members)) == 0

        options = json.loads(capsys.readouterr().out)
        assert options == [{"type": "user", "id": "u1", "display_name": "John Doe", "avatar_url": None}]

    def test_storage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """@表示名を保存用のID形式に変換すること"""
        assert _run(["storage", "--map", "John Doe=u1"], "Hello @John Doe and @here") == 0
        assert capsys.readouterr().out == "Hello <@u1> and <!here>\n"

    def test_storage_invalid_mapping(self) -> None:
        """NAME=ID 形式でない対応はエラー終了すること"""
        assert _run(["storage", "--map", "John"], "Hello @John") == 1

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """設定ファイルが存在しなければエラー終了すること"""
        assert _run(["--config", str(tmp_path / "missing.yaml"), "parse"], "hi") == 1
