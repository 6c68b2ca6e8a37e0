"""
common.py — 多言語フィールド・permalink 関連の共通ユーティリティ
"""

from __future__ import annotations

import re
from typing import Any, Tuple

from pydantic import BaseModel


# researchmap の permalink とみなす入力（英数字・アンダースコア・ハイフンのみ）
PERMALINK_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def get_lang_fallback(d: Any, prefer: Tuple[str, ...] = ("ja", "en"), default: str = "") -> str:
    """
    多言語フィールド（例: {"ja": "...", "en": "..."}）から prefer 順に値を取得。
    どの言語も空なら default（プレースホルダー）を返す。
    d が str の場合はそのまま返す。

    空白だけの値は未入力とみなす。
    """
    if d is None:
        return default
    if isinstance(d, str):
        return d if d.strip() else default
    if isinstance(d, BaseModel):
        d = d.model_dump()
    if isinstance(d, dict):
        for lang in prefer:
            v = d.get(lang)
            if isinstance(v, str) and v.strip():
                return v
    return default


def is_permalink(text: str) -> bool:
    """入力全体が permalink の形式かどうか"""
    return bool(text) and PERMALINK_PATTERN.fullmatch(text) is not None


def extract_researchmap_id(url: str | None) -> str | None:
    """researchmap URLからIDを抽出"""
    if not url:
        return None
    match = re.search(r'researchmap\.jp/([^/?#]+)', url)
    return match.group(1) if match else None
