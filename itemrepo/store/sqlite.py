"""ItemStoreのSQLite実装。

ItemStoreInterfaceに準拠したSQLite実装を提供する。
クエリは全てプレースホルダでパラメータ化する。
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import closing, contextmanager

from itemrepo.interfaces.item_store import Item, ItemStoreInterface

logger = logging.getLogger(__name__)

# スキーマ定義
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS items (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     INTEGER NOT NULL,
    text        TEXT NOT NULL
);
"""


class SqliteItemStore(ItemStoreInterface):
    """SQLiteによるItemStore実装。"""

    def __init__(self, db_path: str):
        """初期化。

        Args:
            db_path: SQLiteデータベースファイルのパス
        """
        self._db_path = db_path
        self._init_schema()

    def _init_schema(self):
        """スキーマを初期化する。"""
        with self._connect() as conn:
            conn.executescript(SCHEMA_SQL)
            conn.commit()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """データベース接続を取得する。

        gRPC のワーカースレッドから呼ばれるため、操作ごとに接続を開き、
        ブロックを抜けるとコミット（例外時はロールバック）して閉じる。

        Yields:
            sqlite3.Connection
        """
        with closing(sqlite3.connect(self._db_path)) as conn:
            with conn:
                yield conn

    def get_all(self) -> list[Item]:
        """全アイテムを取得する。

        Returns:
            アイテムのリスト（id昇順 = 挿入順）
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT user_id, text FROM items ORDER BY id ASC")
            rows = cursor.fetchall()
            return [Item(user_id=row[0], text=row[1]) for row in rows]

    def save(self, item: Item) -> None:
        """アイテムを1件保存する。

        Args:
            item: 保存するアイテム
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO items (user_id, text) VALUES (?, ?)",
                (item.user_id, item.text),
            )
            conn.commit()
            logger.debug("Inserted item id=%s user_id=%s", cursor.lastrowid, item.user_id)

    def delete_all_data(self) -> None:
        """全データを削除する（デバッグ用）。"""
        with self._connect() as conn:
            conn.execute("DELETE FROM items")
            conn.commit()
        logger.info("Deleted all items from %s", self._db_path)
