"""層間インターフェース定義。

api/ と rpc/ はこのパッケージの抽象クラスにのみ依存する。
itemrepo/store/ の実装に直接依存してはならない。
"""
