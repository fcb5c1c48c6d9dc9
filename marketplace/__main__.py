import argparse
import getpass
import sys

from rich import print

from .client import MarketplaceClient
from .config import get_settings
from .contact import format_price, whatsapp_url
from .errors import MarketplaceError, ValidationError
from .log import configure_logging
from .models import ProductFilters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="marketplace", description="Marketplace CLI")
    parser.add_argument("--base-url", help="API base URL (overrides MARKETPLACE_API_BASE_URL)")
    parser.add_argument("--log-level", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------
    # Session commands
    # ---------------------------
    li = subparsers.add_parser("login", help="Log in and store the session token")
    li.add_argument("--email", required=True)
    li.add_argument("--password", help="Prompted for when omitted")

    rg = subparsers.add_parser("register", help="Create an account and log in")
    rg.add_argument("--name", required=True)
    rg.add_argument("--phone", required=True)
    rg.add_argument("--email", required=True)
    rg.add_argument("--password", help="Prompted for when omitted")
    rg.add_argument("--avatar", help="Avatar image URI")

    subparsers.add_parser("logout", help="Forget the stored session token")
    subparsers.add_parser("status", help="Show whether a session token is stored")

    # ---------------------------
    # Profile commands
    # ---------------------------
    subparsers.add_parser("profile", help="Show the logged-in user's profile")

    up = subparsers.add_parser("update-profile", help="Update name, phone, email and avatar")
    up.add_argument("--name", required=True)
    up.add_argument("--phone", required=True)
    up.add_argument("--email", required=True)
    up.add_argument("--avatar")

    subparsers.add_parser("change-password", help="Change the account password (prompts)")

    # ---------------------------
    # Catalog commands
    # ---------------------------
    lp = subparsers.add_parser("products", help="List products")
    lp.add_argument("--search", help="Substring of the product title")
    lp.add_argument("--category", help="Exact category name")
    lp.add_argument("--min-price", type=float)
    lp.add_argument("--max-price", type=float)

    gp = subparsers.add_parser("product", help="Show one product")
    gp.add_argument("product_id")

    subparsers.add_parser("categories", help="List product categories")

    ct = subparsers.add_parser("contact", help="Print the WhatsApp link for a product's seller")
    ct.add_argument("product_id")
    return parser


def _password(value, prompt="Password: "):
    return value if value is not None else getpass.getpass(prompt)


def run(args, client: MarketplaceClient):
    if args.command == "login":
        user = client.login(args.email, _password(args.password))
        print(f"[green]Logged in as {user.name} <{user.email}>[/green]")

    elif args.command == "register":
        password = _password(args.password)
        confirm = _password(None, "Confirm password: ") if args.password is None else password
        user = client.register(args.name, args.phone, args.email, password, confirm, args.avatar)
        print(f"[green]Welcome, {user.name}![/green]")

    elif args.command == "logout":
        client.logout()
        print("[yellow]Logged out[/yellow]")

    elif args.command == "status":
        print(client.state.value)

    elif args.command == "profile":
        print(client.get_profile().model_dump())

    elif args.command == "update-profile":
        print(client.update_profile(args.name, args.phone, args.email, args.avatar).model_dump())

    elif args.command == "change-password":
        current = getpass.getpass("Current password: ")
        new = getpass.getpass("New password: ")
        confirm = getpass.getpass("Confirm new password: ")
        client.update_password(current, new, confirm)
        print("[green]Password updated[/green]")

    elif args.command == "products":
        filters = ProductFilters(
            search=args.search, category=args.category, min_price=args.min_price, max_price=args.max_price
        )
        for p in client.list_products(filters):
            print(f"{p.id}  {p.title}  {format_price(p.price)}  [dim]{p.category.value}[/dim]")

    elif args.command == "product":
        print(client.get_product(args.product_id).model_dump(mode="json"))

    elif args.command == "categories":
        print(client.list_categories())

    elif args.command == "contact":
        url = whatsapp_url(client.get_product(args.product_id))
        print(url or "[yellow]Seller has no phone number[/yellow]")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if args.base_url:
        settings = settings.model_copy(update={"api_base_url": args.base_url})
    configure_logging(args.log_level or settings.log_level)

    client = MarketplaceClient(settings)
    try:
        run(args, client)
    except ValidationError as e:
        for field, msg in e.fields.items():
            print(f"[red]{field}: {msg}[/red]")
        return 2
    except MarketplaceError as e:
        print(f"[red]{e.kind} error: {e.message}[/red]")
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
