"""Scholar assistant request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class ScholarRequest(BaseModel):
    question: str

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        # Checked trimmed; the untrimmed text is what gets sent upstream
        if not value.strip():
            raise ValueError("question is blank")
        return value


class ScholarResponse(BaseModel):
    answer: str
    model: Any = None
    usage: Any = None
    at: str
