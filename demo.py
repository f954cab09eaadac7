#!/usr/bin/env python
from sdk.pycatalog import CatalogClient

def main():
    c = CatalogClient(base_url="http://127.0.0.1:8081")

    # -----------------------------
    # Reset to the demo catalog
    # -----------------------------
    print("Resetting catalog...")
    print(c.reset())
    print(c.health())

    # -----------------------------
    # List / filter
    # -----------------------------
    print("\nListing products...")
    for p in c.list_products():
        print(f"  {p['id']}: {p['name']} ({p['category']}) ${p['price']:.2f}")

    print("\nElectronics only (case-insensitive filter)...")
    print([p["name"] for p in c.list_products("electronics")])

    # -----------------------------
    # Create / update / delete
    # -----------------------------
    print("\nCreating a product...")
    lamp = c.create_product("Desk Lamp", 49.5, 12, "Furniture", "LED desk lamp")
    print(lamp)

    print("\nUpdating it...")
    print(c.update_product(lamp["id"], "Desk Lamp Pro", 59.0, 8, "Furniture"))

    print("\nDeleting product 2...")
    print(c.delete_product("2"))
    print("Deleting product 2 again...")
    print(c.delete_product("2"))

    print("\nLooking up a missing product...")
    print(c.get_product("999"))

if __name__ == "__main__":
    main()
