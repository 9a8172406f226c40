"""gRPC サーバーの起動処理。"""

import logging
from concurrent import futures

import grpc

from itemrepo.config import configure_logging, get_settings
from itemrepo.dependencies import get_item_store
from itemrepo.interfaces.item_store import ItemStoreInterface
from itemrepo.rpc.service import (
    EchoServicer,
    ItemServicer,
    add_echo_servicer_to_server,
    add_item_servicer_to_server,
)

logger = logging.getLogger(__name__)


def create_server(
    store: ItemStoreInterface,
    address: str,
    max_workers: int = 10,
) -> tuple[grpc.Server, int]:
    """サービスを登録したサーバーを作成する（未起動）。

    Args:
        store: ItemService に注入する ItemStore
        address: 待ち受けアドレス。ポート 0 なら空きポートを割り当てる
        max_workers: ワーカースレッド数

    Returns:
        (server, 実際にバインドされたポート)
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    add_echo_servicer_to_server(EchoServicer(), server)
    add_item_servicer_to_server(ItemServicer(store), server)
    port = server.add_insecure_port(address)
    return server, port


def serve() -> None:
    """設定に従ってサーバーを起動し、終了まで待つ。"""
    settings = get_settings()
    configure_logging(settings)
    server, port = create_server(
        get_item_store(),
        settings.grpc_address,
        max_workers=settings.grpc_max_workers,
    )
    server.start()
    logger.info(
        "gRPC server listening on %s (port %d, backend=%s)",
        settings.grpc_address,
        port,
        settings.store_backend,
    )
    server.wait_for_termination()


if __name__ == "__main__":
    serve()
