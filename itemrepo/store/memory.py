"""ItemStoreのインメモリ実装。"""

import logging

from itemrepo.interfaces.item_store import Item, ItemStoreInterface

logger = logging.getLogger(__name__)


class InMemoryItemStore(ItemStoreInterface):
    """リストによるItemStore実装。プロセス終了で消える。"""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def get_all(self) -> list[Item]:
        # 内部リストを外に漏らさない
        return list(self._items)

    def save(self, item: Item) -> None:
        self._items.append(item)
        logger.debug("Saved item user_id=%s (count=%d)", item.user_id, len(self._items))

    def delete_all_data(self) -> None:
        self._items.clear()
