# product_api/logic.py
from typing import Any, Dict, List, Optional

from .core import count_by_category, paginate, parse_int_param
from .database import ProductStore
from .errors import NotFoundError
from .models import ProductIn

# Core logic behind the product endpoints. Routes in main.py run the access
# guard and the validation gate, then call into these.

PRODUCT_NOT_FOUND = "Product not found"


# Query endpoints
async def list_all_logic(store: ProductStore) -> List[Dict[str, Any]]:
    with store.lock:
        return [p.to_dict() for p in store.get_all()]


async def list_products_logic(store: ProductStore, category: Optional[str] = None,
                              page: Optional[str] = None, limit: Optional[str] = None) -> Dict[str, Any]:
    page_n = parse_int_param("page", page, 1)
    limit_n = parse_int_param("limit", limit, 10)

    with store.lock:
        out = store.get_all()
        if category:
            term = category.lower()
            out = [p for p in out if p.category.lower() == term]
        data = [p.to_dict() for p in paginate(out, page_n, limit_n)]

    return {"page": page_n, "limit": limit_n, "total": len(out), "data": data}


async def search_products_logic(store: ProductStore, name: str) -> List[Dict[str, Any]]:
    term = name.lower()
    with store.lock:
        return [p.to_dict() for p in store.get_all() if term in p.name.lower()]


async def product_stats_logic(store: ProductStore) -> Dict[str, Any]:
    with store.lock:
        products = store.get_all()
        return {
            "totalProducts": len(products),
            "countByCategory": count_by_category([p.category for p in products]),
        }


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    with store.lock:
        p = store.get_by_id(product_id)
        if p is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return p.to_dict()


# Command endpoints
async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    with store.lock:
        product = store.append(payload)
        return {"message": "Product Added Successfully", "product": product.to_dict()}


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    with store.lock:
        product = store.replace(product_id, payload)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return {"message": "Product updated successfully", "product": product.to_dict()}


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    with store.lock:
        index = store.find_index(product_id)
        if index is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        removed = store.remove_at(index)
        return {"message": "Product Deleted successfully", "product": removed.to_dict()}
