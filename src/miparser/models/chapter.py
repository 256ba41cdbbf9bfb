"""Chapter model for Menu section entries."""

from pydantic import BaseModel, ConfigDict


class Chapter(BaseModel):
    """A chapter mark: start time in milliseconds and its title."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    title: str
