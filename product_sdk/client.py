# product_sdk/client.py
from typing import Any, Dict, List, Optional

import httpx
import requests

API_KEY_HEADER = "x-api-key"


class ProductApiError(Exception):
    """Raised for any non-2xx response; keeps the decoded error body."""

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"HTTP {status_code}: {self.message}")

    @property
    def message(self) -> str:
        if isinstance(self.payload, dict):
            if "error" in self.payload and isinstance(self.payload["error"], dict):
                return self.payload["error"].get("message", "")
            if "message" in self.payload:
                return self.payload["message"]
        return str(self.payload)


def _decode(r) -> Any:
    try:
        return r.json()
    except ValueError:
        return r.text


def _product_body(name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "inStock": in_stock,
    }


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        # any requests.Session-like object works, e.g. a FastAPI TestClient
        self.session = session if session is not None else requests.Session()
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    def _handle(self, r) -> Any:
        body = _decode(r)
        if r.status_code >= 400:
            raise ProductApiError(r.status_code, body)
        return body

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        r = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        return self._handle(r)

    def welcome(self) -> str:
        return self._get("/")

    # Listing
    def list_all(self) -> List[Dict[str, Any]]:
        return self._get("/api/product")

    def list_products(self, category: Optional[str] = None, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if category:
            params["category"] = category
        return self._get("/api/products/", params=params)

    def search_products(self, name: str) -> List[Dict[str, Any]]:
        return self._get("/api/products/search", params={"name": name})

    def stats(self) -> Dict[str, Any]:
        return self._get("/api/products/stats")

    def get_product(self, product_id: str) -> Dict[str, Any]:
        return self._get(f"/api/products/{product_id}")

    # Writes
    def create_product(self, name: str, description: str, price: float, category: str,
                       in_stock: bool = True) -> Dict[str, Any]:
        r = self.session.post(f"{self.base_url}/api/products",
                              json=_product_body(name, description, price, category, in_stock),
                              timeout=self.timeout)
        return self._handle(r)

    def update_product(self, product_id: str, name: str, description: str, price: float, category: str,
                       in_stock: bool = True) -> Dict[str, Any]:
        r = self.session.put(f"{self.base_url}/api/products/{product_id}",
                             json=_product_body(name, description, price, category, in_stock),
                             timeout=self.timeout)
        return self._handle(r)

    def delete_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._handle(r)

    # Async create (example)
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: bool = True, transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(base_url=self.base_url, headers=headers, timeout=self.timeout,
                                     transport=transport) as client:
            r = await client.post("/api/products",
                                  json=_product_body(name, description, price, category, in_stock))
            return self._handle(r)
