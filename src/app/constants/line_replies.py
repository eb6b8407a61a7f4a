"""Textos fixos enviados aos usuários do canal LINE."""

from __future__ import annotations

ACCESS_DENIED_TEXT = "この操作は管理者のみ可能です。"

TARGET_NOT_FOUND_TEXT = "指定されたメッセージが見つかりません。"

BINDING_PROMPT_TEXT = "どのメッセージに紐づけますか？"

BINDING_UPDATED_TEXT = "画像を更新しました: {key}"
