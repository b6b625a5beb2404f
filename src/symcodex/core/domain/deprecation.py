"""
DeprecationInfo — Метаданные устаревания

Прикрепляется к Module, Symbol или отдельному Variant. Replacement —
рекомендательный текст (например, "arrow.r.double"), а не живая ссылка:
замена сама может быть позже переименована.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DeprecationInfo(BaseModel):
    """Advisory об устаревании. Не ошибка: поиск по-прежнему успешен."""

    message: str = Field(..., min_length=1, description="Сообщение для пользователя")
    replacement: Optional[str] = Field(
        None, min_length=1, description="Подсказка о замене (dotted name)"
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.replacement and self.replacement not in self.message:
            return f"{self.message} (use {self.replacement})"
        return self.message
