import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

DIRECTORY_PATH_ENV = "DIRECTORY_PATH"
BINARY_TO_EXECUTE_ENV = "BINARY_TO_EXECUTE"
ROOT_PATH_DELIMITER = ","


class ConfigError(ValueError):
    """Raised when the workflow configuration cannot be read."""


class MissingVariableError(ConfigError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable {name} is not set")
        self.name = name


class WorkflowConfig(BaseModel):
    roots: list[str] = Field(default_factory=list)
    binary: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WorkflowConfig":
        env = os.environ if environ is None else environ
        directory_path = cls._get_required_env(env, DIRECTORY_PATH_ENV)
        binary = cls._get_required_env(env, BINARY_TO_EXECUTE_ENV)
        return cls(roots=parse_root_paths(directory_path), binary=binary)

    @staticmethod
    def _get_required_env(env: Mapping[str, str], key: str) -> str:
        """Get required environment variable or raise descriptive error.

        An empty value counts as set: an empty directory list is valid and
        simply scans nothing.
        """
        value = env.get(key)
        if value is None:
            raise MissingVariableError(key)
        return value


def parse_root_paths(value: str) -> list[str]:
    # Paths are taken literally, only empty segments are dropped.
    return [segment for segment in value.split(ROOT_PATH_DELIMITER) if segment]


def read_config(environ: Mapping[str, str] | None = None) -> WorkflowConfig:
    return WorkflowConfig.from_env(environ)
