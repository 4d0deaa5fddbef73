from typing import Optional

from pydantic import BaseModel, ConfigDict

from mock_engine.schemas.invocation import Resolution
from mock_engine.schemas.responses import ResponseProducer
from mock_engine.schemas.setup import Setup


class MatchResult(BaseModel):
    # allow the non-pydantic response producers
    model_config = ConfigDict(arbitrary_types_allowed=True)

    resolution: Resolution
    setup: Optional[Setup] = None
    response: Optional[ResponseProducer] = None

    @classmethod
    def unmatched(cls) -> "MatchResult":
        return cls(resolution=Resolution.unmatched())

    @classmethod
    def matched(cls, setup: Setup, response: Optional[ResponseProducer]) -> "MatchResult":
        return cls(resolution=Resolution.matched_setup(setup.id), setup=setup, response=response)

    @property
    def is_matched(self) -> bool:
        return self.resolution.is_matched
