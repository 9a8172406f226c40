"""DI用ファクトリ関数。

itemrepo/ 直下に配置することで、api/ や rpc/ から store/ への
直接依存を避けつつ、FastAPI の Depends() で注入できる。
"""

from itemrepo.config import get_settings
from itemrepo.interfaces.item_store import ItemStoreInterface

_item_store: ItemStoreInterface | None = None


def get_item_store() -> ItemStoreInterface:
    """ItemStoreのシングルトンインスタンスを返す。

    実装は設定の store_backend で選ぶ。
    """
    global _item_store
    if _item_store is None:
        settings = get_settings()
        if settings.store_backend == "memory":
            from itemrepo.store.memory import InMemoryItemStore

            _item_store = InMemoryItemStore()
        else:
            from itemrepo.store.sqlite import SqliteItemStore

            settings.db_path.parent.mkdir(parents=True, exist_ok=True)
            _item_store = SqliteItemStore(str(settings.db_path))
    return _item_store


def _reset_all() -> None:
    """全シングルトンをリセットする（テスト用）。"""
    global _item_store
    _item_store = None
    get_settings.cache_clear()
