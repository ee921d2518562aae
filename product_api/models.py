# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Union, Dict, Any


class ProductIn(BaseModel):
    """Write payload that already passed the validation gate."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")


class Product(ProductIn):
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }


def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description,
        price=p.price,
        category=p.category,
        in_stock=p.in_stock,
    )


SEED_PRODUCTS = [
    ProductIn(
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        in_stock=True,
    ),
    ProductIn(
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    ProductIn(
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
]
