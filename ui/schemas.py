from __future__ import annotations

import uuid
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    brand: str = ""
    category: str = ""
    description: str = ""
    image: str = ""


class CatalogDocument(BaseModel):
    products: List[Product] = Field(default_factory=list)

    @field_validator("products", mode="before")
    @classmethod
    def _null_is_empty(cls, value):
        return [] if value is None else value


class ProductPayload(BaseModel):
    """The part of a product that is sent to the worker."""

    name: str
    brand: str
    category: str
    description: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductPayload":
        return cls(
            name=product.name,
            brand=product.brand,
            category=product.category,
            description=product.description,
        )


Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: Role
    content: str


class WorkerRequest(BaseModel):
    messages: List[ChatMessage]


class Turn(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    transient: bool = False
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    def as_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)
