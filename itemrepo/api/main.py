"""FastAPIアプリケーション。

ItemStoreInterface を HTTP で公開する。実装は dependencies で注入する。
"""

import io
import logging
from typing import Annotated

import pandas as pd
from fastapi import Depends, FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field, ValidationError, field_validator

from itemrepo.dependencies import get_item_store
from itemrepo.interfaces.item_store import Item, ItemStoreInterface

logger = logging.getLogger(__name__)

StoreDep = Annotated[ItemStoreInterface, Depends(get_item_store)]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

app = FastAPI(
    title="itemrepo API",
    version="0.1.0",
)


# ---------- Pydantic モデル ----------


class ItemPayload(BaseModel):
    """1件のアイテム（リクエスト・レスポンス共通）。"""

    # IDL の int64 と SQLite の INTEGER に収まる範囲
    user_id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    text: str

    @field_validator("text", mode="after")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class ItemsBatchRequest(BaseModel):
    """POST /api/items のリクエストボディ。"""

    items: list[ItemPayload]


# ---------- エンドポイント ----------


@app.get("/api/health")
async def health_check():
    """ヘルスチェック。"""
    return {"status": "ok"}


@app.get("/api/items")
async def get_items(store: StoreDep):
    """保存済みの全アイテムを取得する。"""
    return {
        "items": [
            ItemPayload(user_id=item.user_id, text=item.text)
            for item in store.get_all()
        ]
    }


@app.post("/api/items")
async def post_items(body: ItemsBatchRequest, store: StoreDep):
    """アイテムをバッチ保存する。"""
    for payload in body.items:
        store.save(Item(user_id=payload.user_id, text=payload.text))
    logger.info("Saved %d items via HTTP", len(body.items))
    return {"saved": len(body.items)}


@app.post("/api/items/csv")
async def post_items_csv(file: UploadFile, store: StoreDep):
    """CSVファイルからアイテムをバッチ保存する（デバッグ用）。"""
    content = await file.read()
    # 文字列のまま読む。"007" や "NA" を型推測・欠損扱いさせない
    try:
        df = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=f"invalid CSV: {e}") from e
    # 列数が足りない行の欠損も空文字として扱う
    df = df.fillna("")

    if "user_id" not in df.columns or "text" not in df.columns:
        raise HTTPException(
            status_code=400,
            detail="user_id and text columns are required",
        )

    # 全行を検証してから保存する（途中失敗で部分保存しない）
    items: list[Item] = []
    skipped = 0
    for line_no, (user_id, text) in enumerate(
        zip(df["user_id"], df["text"]), start=2
    ):
        if not text.strip():
            skipped += 1
            continue
        try:
            payload = ItemPayload(user_id=user_id.strip(), text=text)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"invalid row at line {line_no}: user_id={user_id!r}",
            ) from e
        items.append(Item(user_id=payload.user_id, text=payload.text))

    for item in items:
        store.save(item)

    logger.info("Saved %d items from CSV (skipped %d)", len(items), skipped)
    return {"saved": len(items), "skipped": skipped}


# ---------- デバッグ用エンドポイント ----------


@app.delete("/api/debug/items", tags=["debug"])
async def delete_all_items(store: StoreDep):
    """【デバッグ用】全アイテムを削除する。"""
    store.delete_all_data()
    return {"deleted": "items"}
