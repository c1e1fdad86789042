"""
Pydantic schemas for person records.

Field names are snake_case in Python and camelCase on the wire
(``numberPassport``, ``totalPages``...). Responses are serialised by alias.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonView(BaseModel):
    """Transport projection of a person, without the store-assigned id."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    number_passport: Optional[int] = Field(None, alias="numberPassport")
    name: Optional[str] = None
    surname: Optional[str] = None
    age: int = Field(0, ge=0)
    sex: Optional[str] = None


class PersonRead(PersonView):
    """Person including its identifier."""

    id: int


class PageResult(BaseModel):
    """One page of person views with paging metadata."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[PersonView]
    page_number: int = Field(..., alias="pageNumber")
    page_size: int = Field(..., alias="pageSize")
    total_pages: int = Field(..., alias="totalPages")
    total_elements: int = Field(..., alias="totalElements")


class PersonPage(BaseModel):
    """One page of person entities, identifiers included."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[PersonRead]
    page_number: int = Field(..., alias="pageNumber")
    page_size: int = Field(..., alias="pageSize")
    total_pages: int = Field(..., alias="totalPages")
    total_elements: int = Field(..., alias="totalElements")
    number_of_elements: int = Field(..., alias="numberOfElements")
    first: bool
    last: bool
