"""Pizza menu data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PizzaKind(str, Enum):
    SAVORY = "salgada"
    SWEET = "doce"


class Pizza(BaseModel):
    """One flavour on the rodízio menu."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = Field(alias="nome")
    ingredients: str = Field(alias="ingredientes")
    image_url: Optional[str] = Field(None, alias="imagem_url")
    active: bool = Field(True, alias="ativo")
    order: int = Field(0, alias="ordem")
    kind: PizzaKind = Field(PizzaKind.SAVORY, alias="tipo")
