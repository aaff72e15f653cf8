from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices are stored as NUMERIC but travel as JSON numbers
Price = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):  # type: ignore[misc]
    """
    Base schema for the public JSON API.

    Fields are declared in snake_case and exposed in camelCase
    (``first_name`` <-> ``firstName``). Both spellings are accepted on input
    and ORM objects can be validated directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
