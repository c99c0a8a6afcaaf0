"""Pydantic schemas for users. Serialized with the camelCase field names."""
from pydantic import BaseModel, Field


class UserOutSchema(BaseModel):
    id: int
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    email_address: str = Field(serialization_alias="emailAddress")

    class Config:
        from_attributes = True
