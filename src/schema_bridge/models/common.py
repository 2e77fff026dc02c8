"""Shared base for source nodes, response schemas and response formats."""
from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    # Subclasses override single keys (frozen nodes, lenient wire schemas);
    # pydantic merges them with these defaults.
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }
