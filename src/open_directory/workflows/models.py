from typing import Literal

from pydantic import BaseModel, Field


class ItemIcon(BaseModel):
    type: Literal["fileicon", "filetype"] | None = None
    path: str


class ScriptFilterItem(BaseModel):
    title: str
    subtitle: str = ""
    arg: str | None = None
    uid: str | None = None
    autocomplete: str | None = None
    match: str | None = None
    type: Literal["default", "file", "file:skipcheck"] = "default"
    valid: bool = True
    icon: ItemIcon | None = None


class ScriptFilterResponse(BaseModel):
    items: list[ScriptFilterItem] = Field(default_factory=list)
