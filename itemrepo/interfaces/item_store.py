"""ItemStoreの抽象インターフェース。

振る舞いの契約（インターフェース）と実装を分離する。
呼び出し側はこの抽象クラスだけを知り、実装は構成時に注入される。
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """保存対象のアイテム（DTO）。

    振る舞いを持たないデータ専用コンテナ。
    フィールドは生成時に設定され、以降は読み取りのみ。
    """

    user_id: int
    text: str


class ItemStoreInterface(ABC):
    """アイテム永続化の抽象インターフェース。

    実装（リスト、SQLite等）はこのインターフェースに準拠する。
    save(x) の後の get_all() には必ず x が含まれる。
    """

    @abstractmethod
    def get_all(self) -> list[Item]:
        """保存済みの全アイテムを挿入順で返す。"""
        raise NotImplementedError

    @abstractmethod
    def save(self, item: Item) -> None:
        """アイテムを1件保存する。重複も別エントリとして保持する。"""
        raise NotImplementedError

    @abstractmethod
    def delete_all_data(self) -> None:
        """全データを削除する（デバッグ用）。"""
        raise NotImplementedError
