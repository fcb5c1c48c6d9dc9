# Loads the home screen (profile + products) concurrently against a running stub.
import asyncio

from rich import print

from marketplace import MarketplaceClient, MemorySessionStore, ProductFilters, Settings


async def main():
    c = MarketplaceClient(Settings(api_base_url="http://127.0.0.1:8085"), session_store=MemorySessionStore())
    c.auth_api.post("/reset")

    # Logged out: the profile call fails, the listing still comes back
    print("\n⚡ Loading home while logged out...")
    data = await c.load_home()
    print("user:", data.user)
    print("products:", [p.title for p in data.products])
    print("errors:", [f"{e.kind}: {e.message}" for e in data.errors])

    c.login("maria@example.com", "maria123")

    print("\n⚡ Loading home while logged in, searching 'jaqueta'...")
    data = await c.load_home(ProductFilters().with_search("jaqueta"))
    print("user:", data.user.name if data.user else None)
    print("products:", [p.title for p in data.products])

    c.close()


if __name__ == "__main__":
    asyncio.run(main())
