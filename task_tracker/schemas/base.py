from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest value an INTEGER primary key can hold (signed 64-bit)
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(le=MAX_ID)]


class CamelModel(BaseModel):
    """JSON uses camelCase keys; snake_case is accepted on input too"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
