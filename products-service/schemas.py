from typing import Optional
from pydantic import BaseModel


class ProductCreate(BaseModel):
    id: Optional[int] = None  # Ignoré: l'id est attribué par le serveur
    name: str
    price: float
    description: str
    image: str


class ProductUpdate(BaseModel):
    id: int  # Doit correspondre à un produit existant
    name: str
    price: float
    description: str
    image: str


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    description: str
    image: str

    class Config:
        from_attributes = True
