import asyncio
from sdk.pycatalog import CatalogClient
import httpx

async def create_one(client, ac, i):
    r = await client.create_product_async(f"Widget {i}", 1.0 + i, 1, "Gadgets", client=ac)
    if r.status_code == 201:
        print(f"✅ Widget {i} -> id {r.json()['id']}")
    else:
        print(f"❌ Widget {i} failed with {r.status_code}: {r.text}")
    return r

async def main(n: int = 20):
    c = CatalogClient(base_url="http://127.0.0.1:8081")
    c.reset()
    before = len(c.list_products())

    print(f"\n⚡ Creating {n} products concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout) as ac:
        results = await asyncio.gather(*(create_one(c, ac, i) for i in range(n)))

    ids = [r.json()["id"] for r in results if r.status_code == 201]
    after = len(c.list_products())
    print(f"\n📦 {len(ids)} created, {len(set(ids))} distinct ids")
    print(f"📈 Catalog size {before} -> {after}")

if __name__ == "__main__":
    asyncio.run(main())
