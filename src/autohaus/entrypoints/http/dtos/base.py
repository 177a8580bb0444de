from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelDTO(BaseModel):
    """Serialises field names as camelCase; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
