"""gRPC クライアントスタブ。ドメインの Item を受け渡しする。"""

import grpc

from itemrepo.interfaces.item_store import Item
from itemrepo.rpc.messages import (
    ECHO_SERVICE,
    ITEM_SERVICE,
    ItemMessage,
    ListItemsRequest,
    ListItemsResponse,
    SaveItemResponse,
    from_message,
    to_message,
)


class EchoClient:
    """EchoService のクライアント。"""

    def __init__(self, channel: grpc.Channel):
        self._echo = channel.unary_unary(
            f"/{ECHO_SERVICE}/Echo",
            request_serializer=ItemMessage.SerializeToString,
            response_deserializer=ItemMessage.FromString,
        )

    def echo(self, item: Item, timeout: float | None = None) -> Item:
        return from_message(self._echo(to_message(item), timeout=timeout))


class ItemClient:
    """ItemService のクライアント。"""

    def __init__(self, channel: grpc.Channel):
        self._save_item = channel.unary_unary(
            f"/{ITEM_SERVICE}/SaveItem",
            request_serializer=ItemMessage.SerializeToString,
            response_deserializer=SaveItemResponse.FromString,
        )
        self._list_items = channel.unary_unary(
            f"/{ITEM_SERVICE}/ListItems",
            request_serializer=ListItemsRequest.SerializeToString,
            response_deserializer=ListItemsResponse.FromString,
        )

    def save(self, item: Item, timeout: float | None = None) -> None:
        self._save_item(to_message(item), timeout=timeout)

    def get_all(self, timeout: float | None = None) -> list[Item]:
        response = self._list_items(ListItemsRequest(), timeout=timeout)
        return [from_message(message) for message in response.items]
