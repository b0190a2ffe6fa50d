# backend/lawdesk/models/common.py

from typing import ClassVar, Tuple

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Base for PATCH bodies: every field is optional, but a column that is
    NOT NULL in the table may not be explicitly set to null.
    """

    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in self.not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class ORMRead(BaseModel):
    class Config:
        from_attributes = True
