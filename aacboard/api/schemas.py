"""
Request and response schemas for the catalog API.

Wire names are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from aacboard.models.catalog import Card, CardCreate, Category, CategoryCreate


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryResponse(CamelModel):
    """A category as returned by the API."""

    id: int
    name: str
    name_portuguese: str
    icon: str
    display_order: int

    @classmethod
    def from_model(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            name_portuguese=category.name_portuguese,
            icon=category.icon,
            display_order=category.display_order,
        )


class CardResponse(CamelModel):
    """A card as returned by the API."""

    id: int
    category_id: int
    label: str
    label_portuguese: str
    image_url: str
    display_order: int

    @classmethod
    def from_model(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            category_id=card.category_id,
            label=card.label,
            label_portuguese=card.label_portuguese,
            image_url=card.image_url,
            display_order=card.display_order,
        )


class CategoryCreateRequest(CamelModel):
    """Request body for creating a category."""

    name: str = Field(..., description="English display name", examples=["Basic Needs"])
    name_portuguese: str | None = Field(
        default=None,
        description="Portuguese display name",
        examples=["Necessidades Básicas"],
    )
    icon: str = Field(..., description="Glyph key for the category tab", examples=["home"])
    display_order: StrictInt | None = Field(
        default=None, description="Ascending presentation order"
    )

    def to_model(self) -> CategoryCreate:
        return CategoryCreate(
            name=self.name,
            name_portuguese=self.name_portuguese,
            icon=self.icon,
            display_order=self.display_order,
        )


class CardCreateRequest(CamelModel):
    """Request body for creating a card."""

    category_id: StrictInt = Field(..., description="Owning category ID", examples=[1])
    label: str = Field(..., description="English label", examples=["Water"])
    label_portuguese: str | None = Field(
        default=None,
        description="Portuguese label (required non-blank by the store)",
        examples=["Água"],
    )
    image_url: str = Field(
        ...,
        description="Absolute http(s) image URL",
        examples=["https://example.com/water.png"],
    )
    display_order: StrictInt | None = Field(
        default=None, description="Ascending order within category"
    )

    def to_model(self) -> CardCreate:
        return CardCreate(
            category_id=self.category_id,
            label=self.label,
            label_portuguese=self.label_portuguese,
            image_url=self.image_url,
            display_order=self.display_order,
        )


class MessageResponse(BaseModel):
    """Body of every error response."""

    message: str
