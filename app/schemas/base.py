from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Models serialized with camelCase keys, the format the web client expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
