"""
Document types stored in Elasticsearch.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """
    Base class for indexed documents.

    Fields are stored and returned in camelCase; snake_case input is
    accepted too. ``id`` doubles as the Elasticsearch document id.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Document id in the index.")


class User(Document):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)

    @property
    def full_name(self) -> str:
        return self.first_name + self.last_name
