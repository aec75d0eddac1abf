from pydantic import BaseModel, Field


class Candidate(BaseModel):
    title: str
    path: str


class RootWarning(BaseModel):
    root: str
    reason: str


class ScanResult(BaseModel):
    candidates: list[Candidate] = Field(default_factory=list)
    warnings: list[RootWarning] = Field(default_factory=list)
