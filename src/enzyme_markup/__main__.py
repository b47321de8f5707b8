import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from enzyme_markup.config import Config, load_config
from enzyme_markup.directory import Member
from enzyme_markup.emoji import search_emoji
from enzyme_markup.mentions import MentionOption, resolve_mention_options, to_storage_text
from enzyme_markup.mrkdwn import Document, MrkdwnSegment, parse, serialize, to_segments

logger = logging.getLogger(__name__)

_SEGMENTS_ADAPTER = TypeAdapter(list[MrkdwnSegment])
_MEMBERS_ADAPTER = TypeAdapter(list[Member])
_OPTIONS_ADAPTER = TypeAdapter(list[MentionOption])


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数のパーサーを作る"""
    parser = argparse.ArgumentParser(prog="enzyme_markup", description="mrkdwnテキストエンジン")
    parser.add_argument("--config", type=Path, default=None, help="設定ファイル (YAML) のパス")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("parse", help="標準入力のmrkdwnをドキュメントツリー(JSON)に変換")
    subparsers.add_parser("serialize", help="標準入力のドキュメントツリー(JSON)をmrkdwnに変換")
    subparsers.add_parser("segments", help="標準入力のmrkdwnを表示用セグメント(JSON)に変換")

    emoji_parser = subparsers.add_parser("emoji", help="絵文字ショートコードを検索")
    emoji_parser.add_argument("query", nargs="?", default="")

    mentions_parser = subparsers.add_parser("mentions", help="標準入力のメンバー一覧(JSON)からメンション候補を検索")
    mentions_parser.add_argument("query", nargs="?", default="")

    storage_parser = subparsers.add_parser("storage", help="標準入力の@表示名を保存用のID形式に変換")
    storage_parser.add_argument(
        "--map",
        dest="mentions",
        action="append",
        default=[],
        metavar="NAME=ID",
        help="表示名とユーザーIDの対応（複数指定可）",
    )
    return parser


def _parse_mention_map(pairs: list[str]) -> dict[str, str]:
    mention_map: dict[str, str] = {}
    for pair in pairs:
        name, sep, user_id = pair.rpartition("=")
        if not sep or not name or not user_id:
            msg = f"Invalid mention mapping (expected NAME=ID): {pair}"
            raise ValueError(msg)
        mention_map[name] = user_id
    return mention_map


def run(args: argparse.Namespace, config: Config, stdin: str) -> str:
    """サブコマンドを実行し、標準出力に書く文字列を返す

    Raises:
        ValueError: 入力が不正な場合
    """
    if args.command == "parse":
        return parse(stdin).model_dump_json(indent=2)

    if args.command == "serialize":
        try:
            document = Document.model_validate_json(stdin)
        except ValidationError as e:
            msg = f"Invalid document JSON: {e}"
            raise ValueError(msg) from e
        return serialize(document)

    if args.command == "segments":
        return _SEGMENTS_ADAPTER.dump_json(to_segments(stdin), indent=2).decode()

    if args.command == "emoji":
        matches = search_emoji(args.query, limit=config.emoji_search_limit)
        return json.dumps([{"shortcode": m.shortcode, "emoji": m.emoji} for m in matches], ensure_ascii=False)

    if args.command == "mentions":
        try:
            members = _MEMBERS_ADAPTER.validate_json(stdin or "[]")
        except ValidationError as e:
            msg = f"Invalid member directory JSON: {e}"
            raise ValueError(msg) from e
        options = resolve_mention_options(args.query, members, limit=config.mention_option_limit)
        return _OPTIONS_ADAPTER.dump_json(options, indent=2).decode()

    if args.command == "storage":
        return to_storage_text(stdin, _parse_mention_map(args.mentions))

    msg = f"Unknown command: {args.command}"
    raise ValueError(msg)


def main(argv: list[str] | None = None) -> int:
    """アプリケーションのエントリーポイント"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("設定の読み込みに失敗しました: %s", e)
        return 1

    logging.basicConfig(level=config.log_level)
    logger.debug(
        "Config loaded: emoji_search_limit=%d, mention_option_limit=%d",
        config.emoji_search_limit,
        config.mention_option_limit,
    )

    stdin = "" if args.command == "emoji" else sys.stdin.read()
    try:
        output = run(args, config, stdin)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
