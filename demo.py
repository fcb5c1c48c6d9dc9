#!/usr/bin/env python
# Walkthrough against a running stub: python -m stub_server
import tempfile
from pathlib import Path

from rich import print

from marketplace import (
    AuthError, FileSessionStore, MarketplaceClient, ProductFilters, Settings, ValidationError,
    format_price, whatsapp_url,
)


def main():
    settings = Settings(api_base_url="http://127.0.0.1:8085", token_path=Path(tempfile.mkdtemp()) / "token")
    c = MarketplaceClient(settings, session_store=FileSessionStore(settings.token_path))

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Resetting stub...")
    c.auth_api.post("/reset")

    # -----------------------------
    # Validation happens before the network
    # -----------------------------
    print("\nRegistering with mismatched passwords...")
    try:
        c.register("Ana", "11999999999", "ana@example.com", "abcdef", "abcdeg")
    except ValidationError as e:
        print(e.fields)

    # -----------------------------
    # Register and log in
    # -----------------------------
    print("\nRegistering...")
    print(c.register("Ana", "11999999999", "ana@example.com", "abcdef", "abcdef"))
    print("state:", c.state.value)

    print("\nLogging in with a wrong password...")
    try:
        c.login("ana@example.com", "wrong-pass")
    except AuthError as e:
        print(e.message)

    # -----------------------------
    # Catalog
    # -----------------------------
    print("\nCategories:", c.list_categories())
    print("\nFurniture under R$ 2000:")
    for p in c.list_products(ProductFilters(category="Móvel", max_price=2000)):
        print(f"  {p.id} {p.title} {format_price(p.price)}")

    product = c.get_product("p1")
    print("\nProduct detail:", product.title, "views:", product.views)
    print("Contact:", whatsapp_url(product))

    # -----------------------------
    # Profile
    # -----------------------------
    print("\nUpdating profile...")
    print(c.update_profile("Ana Lima", "11988887777", "ana@example.com"))
    c.update_password("abcdef", "ghijkl", "ghijkl")
    print("Password changed")

    # -----------------------------
    # Log out
    # -----------------------------
    c.logout()
    print("\nstate:", c.state.value)
    c.close()


if __name__ == "__main__":
    main()
