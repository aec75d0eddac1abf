from pydantic import BaseModel, Field


class LaunchRequest(BaseModel):
    binary: str
    path: str
    timeout_seconds: float | None = Field(default=None, gt=0)


class LaunchResult(BaseModel):
    success: bool
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    timing_ms: int = 0
