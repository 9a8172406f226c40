"""gRPC サービス実装。

サービサーは ItemStoreInterface のみに依存し、実装は構成時に渡される。
"""

import logging

import grpc

from itemrepo.interfaces.item_store import ItemStoreInterface
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

logger = logging.getLogger(__name__)


class EchoServicer:
    """EchoService の実装。受け取った Item をそのまま返す。"""

    def Echo(self, request, context):
        return ItemMessage(user_id=request.user_id, text=request.text)


class ItemServicer:
    """ItemService の実装。保存・取得を注入された ItemStore に委譲する。"""

    def __init__(self, store: ItemStoreInterface):
        self._store = store

    def SaveItem(self, request, context):
        try:
            self._store.save(from_message(request))
        except Exception:
            logger.exception("SaveItem failed")
            context.abort(grpc.StatusCode.INTERNAL, "failed to save item")
        return SaveItemResponse()

    def ListItems(self, request, context):
        try:
            items = self._store.get_all()
        except Exception:
            logger.exception("ListItems failed")
            context.abort(grpc.StatusCode.INTERNAL, "failed to list items")
        return ListItemsResponse(items=[to_message(item) for item in items])


def add_echo_servicer_to_server(servicer: EchoServicer, server: grpc.Server) -> None:
    """EchoService をサーバーに登録する。"""
    handlers = {
        "Echo": grpc.unary_unary_rpc_method_handler(
            servicer.Echo,
            request_deserializer=ItemMessage.FromString,
            response_serializer=ItemMessage.SerializeToString,
        ),
    }
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(ECHO_SERVICE, handlers),)
    )


def add_item_servicer_to_server(servicer: ItemServicer, server: grpc.Server) -> None:
    """ItemService をサーバーに登録する。"""
    handlers = {
        "SaveItem": grpc.unary_unary_rpc_method_handler(
            servicer.SaveItem,
            request_deserializer=ItemMessage.FromString,
            response_serializer=SaveItemResponse.SerializeToString,
        ),
        "ListItems": grpc.unary_unary_rpc_method_handler(
            servicer.ListItems,
            request_deserializer=ListItemsRequest.FromString,
            response_serializer=ListItemsResponse.SerializeToString,
        ),
    }
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(ITEM_SERVICE, handlers),)
    )
