"""外部ディレクトリ（メンバー・チャンネル）のスナップショット型

呼び出し側が毎回渡す読み取り専用のデータで、このパッケージでは保持しない。
"""

from pydantic import BaseModel


class Member(BaseModel, frozen=True):
    """ワークスペースメンバー"""

    user_id: str
    display_name: str
    avatar_url: str | None = None


class Channel(BaseModel, frozen=True):
    """チャンネル"""

    id: str
    name: str
    type: str = "public"
