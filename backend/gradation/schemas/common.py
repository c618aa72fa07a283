"""Common Schema Base — camelCase wire format shared by every schema.

Invariants:
    - Wire keys are camelCase; Python attributes are snake_case
    - Either spelling is accepted on input (populate_by_name)
    - Response models can be built straight from ORM rows (from_attributes)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")
