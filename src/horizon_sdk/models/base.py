from pydantic import BaseModel, ConfigDict


class HorizonModel(BaseModel):
    """Base for all response models. Parsed models are immutable."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)
