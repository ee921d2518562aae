# tests/test_concurrency.py
import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx

from conftest import AUTH, NEW_PRODUCT
from product_api.models import ProductIn


async def _create_many(app, n):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", headers=AUTH) as ac:
        return await asyncio.gather(*[
            ac.post("/api/products", json={**NEW_PRODUCT, "name": f"Item {i}"}) for i in range(n)
        ])


def test_concurrent_creates_get_unique_ids(app, store):
    results = asyncio.run(_create_many(app, 20))
    assert [r.status_code for r in results] == [201] * 20
    ids = [r.json()["product"]["id"] for r in results]
    assert len(set(ids)) == 20
    assert len(store) == 23


def test_threaded_store_writes_stay_consistent(store):
    draft = ProductIn.model_validate(NEW_PRODUCT)

    def create_and_delete(_):
        with store.lock:
            product = store.append(draft)
            store.remove_at(store.find_index(product.id))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(create_and_delete, range(200)))
    assert [p.id for p in store.get_all()] == ["1", "2", "3"]
