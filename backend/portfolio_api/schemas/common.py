"""Shared schema building blocks."""

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Base for every wire schema: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class WriteModel(CamelModel):
    """Base for create/update bodies: enums dumped as their plain string values."""
    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class PartialUpdate(WriteModel):
    """PUT body where every field is optional but non-nullable columns refuse null.

    Subclasses list the columns that accept an explicit null in NULLABLE_FIELDS.
    """

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE_FIELDS:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    message: str
