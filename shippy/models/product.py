# models/product.py
from dataclasses import dataclass, asdict

CATEGORIES = ["T-Shirt", "Pants", "Shoes", "Watches", "Accessories", "Electronics", "Sports"]
GST_OPTIONS = ["0%", "5%", "12%", "18%", "28%"]
CONDITIONS = ["New", "Good", "Fair", "Refurbished", "Used"]


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category: str = "T-Shirt"
    stock: int = 0              # >= 0, enforced by the input widget
    price: float = 0            # >= 0
    gst: str = "18%"
    condition: str = "New"

    def to_dict(self):
        return asdict(self)

    @staticmethod
    def from_dict(data):
        return Product(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            stock=data["stock"],
            price=data["price"],
            gst=data["gst"],
            condition=data["condition"],
        )
