from enum import Enum
from typing import Optional

from CliqueEnum.errors import InvalidConfigError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class Algorithm(str, Enum):
    NON_PIVOTING = "v1"
    PIVOTING = "v2"


class SearchConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_size: int = Field(
        default=1,
        ge=1,
        description="Smallest clique size that is counted and reported (LB).",
    )
    max_size: Optional[int] = Field(
        default=None,
        ge=1,
        description="Largest clique size explored by the pivoting search (UB), None for no bound.",
    )
    algorithm: Algorithm = Field(default=Algorithm.PIVOTING)
    emit: bool = Field(
        default=True,
        description="Hand every clique to the reporter; when False cliques are only counted.",
    )
    trace: bool = Field(default=False, description="Trace every search frame.")

    @model_validator(mode="after")
    def _check_bounds(self) -> "SearchConfig":
        if self.max_size is not None and self.max_size < self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) is smaller than min_size ({self.min_size})"
            )
        return self

    @classmethod
    def create(cls, **kwargs) -> "SearchConfig":
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise InvalidConfigError(str(e)) from e

    def upper_bound(self, n: int) -> int:
        return n if self.max_size is None else self.max_size
