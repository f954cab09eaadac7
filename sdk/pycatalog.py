# sdk/pycatalog.py
import requests
import httpx
from typing import Any, Dict, Optional
from rich import print


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:8081", api_key: Optional[str] = None,
                 timeout: int = 10, session: Optional[Any] = None):
        # ``session`` may be any requests-compatible client (e.g. FastAPI's TestClient)
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if api_key:
            self.session.headers.update({"Authorization": f"Bearer {api_key}"})

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    @staticmethod
    def _payload(name: Optional[str], price: Optional[float], quantity: Optional[int] = None,
                 category: Optional[str] = None, description: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "price": price}
        if quantity is not None:
            payload["quantity"] = int(quantity)
        if category is not None:
            payload["category"] = category
        if description is not None:
            payload["description"] = description
        return payload

    def health(self):
        r = self.session.get(self._url("/health"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def reset(self):
        r = self.session.post(self._url("/reset"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Products
    def list_products(self, category: Optional[str] = None):
        params = {}
        if category:
            params["category"] = category
        r = self.session.get(self._url("/products"), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/products/{product_id}"), timeout=self.timeout)
        # unknown id is a normal answer, not an error
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, quantity: Optional[int] = None,
                       category: Optional[str] = None, description: Optional[str] = None):
        payload = self._payload(name, price, quantity, category, description)
        r = self.session.post(self._url("/products"), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: str, price: float, quantity: Optional[int] = None,
                       category: Optional[str] = None, description: Optional[str] = None):
        payload = self._payload(name, price, quantity, category, description)
        r = self.session.put(self._url(f"/products/{product_id}"), json=payload, timeout=self.timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> bool:
        r = self.session.delete(self._url(f"/products/{product_id}"), timeout=self.timeout)
        if r.status_code == 404:
            return False
        r.raise_for_status()
        return True

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, price: float, quantity: Optional[int] = None,
                                   category: Optional[str] = None, description: Optional[str] = None,
                                   client: Optional[httpx.AsyncClient] = None):
        payload = self._payload(name, price, quantity, category, description)
        if client is not None:
            return await client.post(self._url("/products"), json=payload)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            return await ac.post(self._url("/products"), json=payload)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8081", help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="Check the service is up")

    lp = subparsers.add_parser("list-products", help="List all products")
    lp.add_argument("--category", help="Filter products by category (case-insensitive)")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--quantity", type=int, default=0, help="Quantity available")
    cp.add_argument("--category", help="Product category")
    cp.add_argument("--description", help="Product description")

    up = subparsers.add_parser("update-product", help="Replace an existing product")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name", required=True, help="Product name")
    up.add_argument("--price", type=float, required=True, help="Price")
    up.add_argument("--quantity", type=int, default=0, help="Quantity available")
    up.add_argument("--category", help="Product category")
    up.add_argument("--description", help="Product description")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("reset", help="Restore the demo catalog")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url)

    if args.command == "health":
        print(c.health())
    elif args.command == "list-products":
        print(c.list_products(args.category))
    elif args.command == "get-product":
        print(c.get_product(args.product_id) or f"No product with id {args.product_id}")
    elif args.command == "create-product":
        print(c.create_product(args.name, args.price, args.quantity, args.category, args.description))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.price, args.quantity,
                               args.category, args.description) or f"No product with id {args.product_id}")
    elif args.command == "delete-product":
        print("deleted" if c.delete_product(args.product_id) else f"No product with id {args.product_id}")
    elif args.command == "reset":
        print(c.reset())
