"""protos/echo.proto に対応するメッセージクラス。

protoc によるコード生成の代わりに、FileDescriptorProto を組み立てて
専用の DescriptorPool に登録し、protobuf ランタイムからクラスを得る。
echo.proto を変更したらここも合わせて変更すること。
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from itemrepo.interfaces.item_store import Item

PACKAGE = "itemrepo.v1"
ECHO_SERVICE = f"{PACKAGE}.EchoService"
ITEM_SERVICE = f"{PACKAGE}.ItemService"

_FDP = descriptor_pb2.FieldDescriptorProto


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """echo.proto と同じ内容の FileDescriptorProto を返す。"""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="itemrepo/v1/echo.proto",
        package=PACKAGE,
        syntax="proto3",
    )

    item = file_proto.message_type.add(name="Item")
    item.field.add(
        name="user_id", number=1, type=_FDP.TYPE_INT64, label=_FDP.LABEL_OPTIONAL
    )
    item.field.add(
        name="text", number=2, type=_FDP.TYPE_STRING, label=_FDP.LABEL_OPTIONAL
    )

    file_proto.message_type.add(name="ListItemsRequest")
    list_response = file_proto.message_type.add(name="ListItemsResponse")
    list_response.field.add(
        name="items",
        number=1,
        type=_FDP.TYPE_MESSAGE,
        label=_FDP.LABEL_REPEATED,
        type_name=f".{PACKAGE}.Item",
    )
    file_proto.message_type.add(name="SaveItemResponse")

    echo = file_proto.service.add(name="EchoService")
    echo.method.add(
        name="Echo",
        input_type=f".{PACKAGE}.Item",
        output_type=f".{PACKAGE}.Item",
    )
    items = file_proto.service.add(name="ItemService")
    items.method.add(
        name="SaveItem",
        input_type=f".{PACKAGE}.Item",
        output_type=f".{PACKAGE}.SaveItemResponse",
    )
    items.method.add(
        name="ListItems",
        input_type=f".{PACKAGE}.ListItemsRequest",
        output_type=f".{PACKAGE}.ListItemsResponse",
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(
        _pool.FindMessageTypeByName(f"{PACKAGE}.{name}")
    )


ItemMessage = _message_class("Item")
ListItemsRequest = _message_class("ListItemsRequest")
ListItemsResponse = _message_class("ListItemsResponse")
SaveItemResponse = _message_class("SaveItemResponse")


def to_message(item: Item):
    """ドメインの Item → ItemMessage。"""
    return ItemMessage(user_id=item.user_id, text=item.text)


def from_message(message) -> Item:
    """ItemMessage → ドメインの Item。"""
    return Item(user_id=message.user_id, text=message.text)
