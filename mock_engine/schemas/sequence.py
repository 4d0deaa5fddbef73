import uuid

from pydantic import BaseModel, ConfigDict, Field


class MockSequence(BaseModel):
    """Key object grouping in-sequence setups of one mock."""

    model_config = ConfigDict(frozen=True)

    sequence_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str | None = None
