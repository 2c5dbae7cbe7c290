from dataclasses import dataclass
from enum import Enum


class SetupError(Exception):
    """A step failed in a way that must stop the whole run."""


class Status(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FAILED = "failed"


@dataclass
class StepResult:
    name: str
    status: Status = Status.SUCCESS
    message: str = ""
    elapsed: float = 0.0

    @property
    def fatal(self) -> bool:
        return self.status is Status.FAILED

    @classmethod
    def from_warnings(cls, name: str, warnings: list) -> "StepResult":
        if warnings:
            return cls(name, Status.WARNING, "; ".join(warnings))
        return cls(name)
