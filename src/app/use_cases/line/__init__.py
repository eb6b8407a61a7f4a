"""Use cases do canal LINE."""

from app.use_cases.line.bind_preset_image import (
    BindPresetImageUseCase,
    PromotionResult,
    UploadResult,
)

__all__ = [
    "BindPresetImageUseCase",
    "PromotionResult",
    "UploadResult",
]
