from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Union

Number = Union[int, float]


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: Number
    image: str
    sizes: List[str] = field(default_factory=list)
    category: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        return cls(
            id=d["id"],
            name=str(d["name"]),
            description=str(d.get("description", "")),
            price=d["price"],
            image=str(d.get("image", "")),
            sizes=[str(s) for s in d.get("sizes", [])],
            category=str(d.get("category", "")),
        )


@dataclass
class CartLine:
    id: int
    name: str
    price: Number
    size: str
    quantity: int
    image: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Any) -> "CartLine":
        if not isinstance(d, dict):
            raise ValueError(f"cart line must be an object, got {type(d).__name__}")
        missing = [k for k in ("id", "name", "price", "size", "quantity", "image") if k not in d]
        if missing:
            raise ValueError(f"cart line is missing {', '.join(missing)}")
        if not _is_number(d["price"]):
            raise ValueError("cart line price must be a number")
        qty = d["quantity"]
        if not isinstance(qty, int) or isinstance(qty, bool) or qty < 1:
            raise ValueError("cart line quantity must be a positive integer")
        return cls(
            id=d["id"],
            name=str(d["name"]),
            price=d["price"],
            size=str(d["size"]),
            quantity=qty,
            image=str(d["image"]),
        )

    @property
    def line_total(self) -> Number:
        return self.price * self.quantity
