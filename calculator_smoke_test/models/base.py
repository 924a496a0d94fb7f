"""Base model for harness configuration and calculation scenarios."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that rejects unknown keys.

    Configuration arrives as user-written JSON, so a misspelt key is an
    error instead of a silently ignored default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
