from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortKey(StrEnum):
    NONE = "NONE"
    TITLE = "TITLE"
    AUTHOR = "AUTHOR"
    COMMENTS = "COMMENTS"
    POINTS = "POINTS"


class Hit(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    object_id: str = Field(..., alias="objectID")
    title: str | None = None
    author: str | None = None
    url: str | None = None
    num_comments: int | None = None
    points: int | None = None

    @field_validator("object_id", mode="before")
    @classmethod
    def _coerce_object_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class PageResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    hits: list[Hit] = Field(default_factory=list)
    page: int = Field(default=0, ge=0)
    nb_pages: int | None = Field(default=None, alias="nbPages")


class ViewSnapshot(BaseModel):
    search_term: str
    search_key: str
    displayed_hits: list[Hit] = Field(default_factory=list)
    page: int = 0
    is_loading: bool = False
    error: str | None = None
    sort_key: SortKey = SortKey.NONE
    is_sort_reverse: bool = False


class TermChangeRequest(BaseModel):
    text: str


class SubmitRequest(BaseModel):
    term: str | None = None
