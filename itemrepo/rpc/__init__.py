"""gRPC トランスポート層。

- protos/echo.proto: サービス契約（IDL）
- messages: IDL と同じ記述子から組み立てたメッセージクラス
- service / client / server: サーバー実装、クライアントスタブ、起動処理
"""
