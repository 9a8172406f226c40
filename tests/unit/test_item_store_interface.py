"""ItemStoreInterface と Item の振る舞いテスト。"""

import dataclasses

import pytest

from itemrepo.interfaces.item_store import Item, ItemStoreInterface


class _PartialStore(ItemStoreInterface):
    """get_all だけを実装したストア。"""

    def get_all(self) -> list[Item]:
        return []


class _DelegatingStore(ItemStoreInterface):
    """抽象メソッドの本体をそのまま呼ぶストア。"""

    def get_all(self) -> list[Item]:
        return super().get_all()

    def save(self, item: Item) -> None:
        super().save(item)

    def delete_all_data(self) -> None:
        super().delete_all_data()


def test_incomplete_implementation_cannot_be_instantiated():
    """未実装の抽象メソッドが残るとインスタンス化できない。"""
    with pytest.raises(TypeError):
        _PartialStore()


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ItemStoreInterface()


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_all(),
        lambda s: s.save(Item(user_id=1, text="hello")),
        lambda s: s.delete_all_data(),
    ],
    ids=["get_all", "save", "delete_all_data"],
)
def test_contract_methods_raise_not_implemented(call):
    """インターフェース側のメソッド本体は NotImplementedError を送出する。"""
    with pytest.raises(NotImplementedError):
        call(_DelegatingStore())


def test_item_is_immutable():
    """Item は生成後に変更できない。"""
    item = Item(user_id=1, text="hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.text = "changed"


def test_items_compare_by_value():
    assert Item(user_id=1, text="hello") == Item(user_id=1, text="hello")
    assert Item(user_id=1, text="hello") != Item(user_id=2, text="hello")
