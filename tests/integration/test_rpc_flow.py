"""統合テスト — gRPC サービスを実サーバー経由で呼び出す。"""

import grpc
import pytest
from fastapi.testclient import TestClient

from itemrepo.api.main import app
from itemrepo.dependencies import _reset_all, get_item_store
from itemrepo.interfaces.item_store import Item, ItemStoreInterface
from itemrepo.rpc.client import EchoClient, ItemClient
from itemrepo.rpc.messages import ItemMessage
from itemrepo.rpc.server import create_server
from itemrepo.store.memory import InMemoryItemStore


class _BrokenStore(ItemStoreInterface):
    """常に失敗するストア。"""

    def get_all(self) -> list[Item]:
        raise RuntimeError("disk on fire")

    def save(self, item: Item) -> None:
        raise RuntimeError("disk on fire")

    def delete_all_data(self) -> None:
        pass


def _start(store: ItemStoreInterface):
    server, port = create_server(store, "localhost:0", max_workers=2)
    server.start()
    channel = grpc.insecure_channel(f"localhost:{port}")
    return server, channel


@pytest.fixture
def store():
    return InMemoryItemStore()


@pytest.fixture
def channel(store):
    server, channel = _start(store)
    yield channel
    channel.close()
    server.stop(None)


class TestEcho:
    def test_echo_returns_same_fields(self, channel):
        reply = EchoClient(channel).echo(Item(user_id=1, text="hello"), timeout=5)
        assert reply == Item(user_id=1, text="hello")

    def test_echo_default_values(self, channel):
        """空のメッセージもそのまま返る。"""
        reply = EchoClient(channel).echo(Item(user_id=0, text=""), timeout=5)
        assert reply == Item(user_id=0, text="")

    def test_unknown_method_is_unimplemented(self, channel):
        call = channel.unary_unary(
            "/itemrepo.v1.EchoService/Shout",
            request_serializer=ItemMessage.SerializeToString,
            response_deserializer=ItemMessage.FromString,
        )
        with pytest.raises(grpc.RpcError) as exc_info:
            call(ItemMessage(user_id=1, text="hello"), timeout=5)
        assert exc_info.value.code() == grpc.StatusCode.UNIMPLEMENTED


class TestItemService:
    def test_save_then_list(self, channel, store):
        client = ItemClient(channel)
        client.save(Item(user_id=1, text="hello"), timeout=5)

        assert client.get_all(timeout=5) == [Item(user_id=1, text="hello")]
        assert store.get_all() == [Item(user_id=1, text="hello")]

    def test_saved_over_rpc_visible_over_http(self, channel, store):
        """同じストアを共有すれば gRPC で保存した内容が HTTP から見える。"""
        ItemClient(channel).save(Item(user_id=5, text="shared"), timeout=5)

        app.dependency_overrides[get_item_store] = lambda: store
        try:
            items = TestClient(app).get("/api/items").json()["items"]
        finally:
            app.dependency_overrides.clear()
            _reset_all()

        assert items == [{"user_id": 5, "text": "shared"}]


class TestStoreFailure:
    """ストアの例外は INTERNAL として返る。"""

    @pytest.fixture
    def broken_channel(self):
        server, channel = _start(_BrokenStore())
        yield channel
        channel.close()
        server.stop(None)

    def test_save_failure(self, broken_channel):
        with pytest.raises(grpc.RpcError) as exc_info:
            ItemClient(broken_channel).save(Item(user_id=1, text="x"), timeout=5)
        assert exc_info.value.code() == grpc.StatusCode.INTERNAL

    def test_list_failure(self, broken_channel):
        with pytest.raises(grpc.RpcError) as exc_info:
            ItemClient(broken_channel).get_all(timeout=5)
        assert exc_info.value.code() == grpc.StatusCode.INTERNAL
