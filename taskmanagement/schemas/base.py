from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Largest value a signed 64-bit integer column can hold
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
