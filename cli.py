# cli.py - interactive marketplace shell
import asyncio
import sys
from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from marketplace import (
    Category, MarketplaceClient, MarketplaceError, Product, ProductFilters, SessionState, User,
    ValidationError, format_price, get_settings, whatsapp_url,
)
from marketplace.log import configure_logging

console = Console()
c: Optional[MarketplaceClient] = None

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Product] = []
filters = ProductFilters()

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Product]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Products",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Title", style="bold", width=30)
    table.add_column("Price", justify="right", width=14)
    table.add_column("Category", width=16)

    for p in products:
        table.add_row(p.id, p.title, format_price(p.price), p.category.value)
    console.print(table)


def show_product(p: Product):
    body = Table.grid(padding=(0, 2))
    body.add_column(style="bold")
    body.add_column()
    body.add_row("Price", f"[green]{format_price(p.price)}[/green]")
    body.add_row("Category", p.category.value)
    body.add_row("Views", str(p.views))
    body.add_row("Description", p.description)
    body.add_row("Images", "\n".join(p.images) or "-")
    body.add_row("Seller", f"{p.seller.name} ({p.seller.phone})")
    console.print(Panel(body, title=f"🏷️ {p.title}", border_style="magenta"))


def show_user(user: User):
    console.print(
        Panel.fit(
            f"[bold]{user.name}[/bold]\n📧 {user.email}\n📱 {user.phone}\n🖼️ {user.avatar or '-'}",
            title="👤 Profile",
            border_style="green"
        )
    )


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def describe_filters(f: ProductFilters) -> str:
    q = f.to_query()
    return ", ".join(f"{k}={v}" for k, v in q.items()) if q else "none"


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    MarketplaceErrors become a status message and a None result.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except ValidationError as e:
        status_message = "Error: invalid input"
        for field, msg in e.fields.items():
            console.print(f"[red]• {field}: {msg}[/red]")
        return None
    except MarketplaceError as e:
        status_message = f"Error: {e.message}"
        console.print(show_status(f"{e.kind} error: {e.message}", False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([p.id for p in product_cache] + [p.title for p in product_cache], ignore_case=True)


def get_category_completer():
    return WordCompleter([cat.value for cat in Category], ignore_case=True, sentence=True)


def resolve_product_id(value: str) -> str:
    for p in product_cache:
        if value == p.title:
            return p.id
    return value


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    session = "[green]logged in[/green]" if c.state is SessionState.LOGGED_IN else "[yellow]logged out[/yellow]"
    header.add_row(
        "🛍️ Marketplace",
        f"[bold blue]{c.settings.api_base_url}[/bold blue]",
        f"{session} [dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = "", is_password: bool = False):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default, is_password=is_password)


def ask_price(message: str) -> Optional[float]:
    # blank means "no bound"; 0 is a real bound
    while True:
        raw = Prompt.ask(message, default="").strip().replace(",", ".")
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


# ---------------------------
# Screens
# ---------------------------
def home_screen():
    global product_cache
    data = asyncio.run(c.load_home(filters))
    for err in data.errors:
        console.print(show_status(f"{err.kind} error: {err.message}", False))
    if data.user:
        console.print(f"Olá, [bold]{data.user.name}[/bold]!")
    product_cache = data.products
    console.print(f"[dim]Filters: {describe_filters(filters)}[/dim]")
    show_products(data.products)


def filter_screen():
    global filters
    category = prompt_with_autocomplete("🏷️ Category (blank for any)", completer=get_category_completer()).strip()
    filters = ProductFilters(
        search=filters.search,
        category=category or None,
        min_price=ask_price("💰 Min price"),
        max_price=ask_price("💰 Max price"),
    )
    console.print(f"[dim]Filters: {describe_filters(filters)}[/dim]")


def product_screen():
    value = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    product = try_api(c.get_product, resolve_product_id(value))
    if product is None:
        return
    show_product(product)
    if Confirm.ask("📞 Contact seller on WhatsApp?", default=False):
        url = whatsapp_url(product)
        if url:
            console.print(Panel.fit(url, title="WhatsApp", border_style="green"))
        else:
            console.print("[yellow]Seller has no phone number[/yellow]")


def profile_edit_screen():
    user = try_api(c.get_profile)
    if user is None:
        return
    name = prompt_with_autocomplete("Name", default=user.name)
    phone = prompt_with_autocomplete("Phone", default=user.phone)
    email = prompt_with_autocomplete("Email", default=user.email)
    avatar = prompt_with_autocomplete("Avatar URI", default=user.avatar or "").strip() or None
    updated = try_api(c.update_profile, name, phone, email, avatar, success_msg="Profile updated")
    if updated:
        show_user(updated)


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, filters

    console.clear()
    console.print(create_header())

    while True:
        # Display status
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "🔑 Log in", "7", "👤 View profile"),
            ("2", "📝 Register", "8", "✏️ Edit profile"),
            ("3", "🏠 Home (products)", "9", "🔒 Change password"),
            ("4", "🔍 Search", "10", "🏷️ Categories"),
            ("5", "⚙️ Filters", "11", "🚪 Log out"),
            ("6", "ℹ️ Product details", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 12)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            email = prompt_with_autocomplete("📧 Email")
            password = prompt_with_autocomplete("🔒 Password", is_password=True)
            user = try_api(c.login, email, password, success_msg="Logged in")
            if user:
                console.print(f"Welcome back, [bold]{user.name}[/bold]!")

        elif choice == "2":
            name = prompt_with_autocomplete("Name")
            phone = prompt_with_autocomplete("Phone")
            email = prompt_with_autocomplete("📧 Email")
            avatar = prompt_with_autocomplete("Avatar URI (optional)").strip() or None
            password = prompt_with_autocomplete("🔒 Password", is_password=True)
            confirm = prompt_with_autocomplete("🔒 Confirm password", is_password=True)
            user = try_api(c.register, name, phone, email, password, confirm, avatar, success_msg="Account created")
            if user:
                show_user(user)

        elif choice == "3":
            home_screen()

        elif choice == "4":
            term = prompt_with_autocomplete("Enter search term").strip()
            filters = filters.with_search(term)
            home_screen()

        elif choice == "5":
            filter_screen()
            home_screen()

        elif choice == "6":
            product_screen()

        elif choice == "7":
            user = try_api(c.get_profile, success_msg="Profile loaded")
            if user:
                show_user(user)

        elif choice == "8":
            profile_edit_screen()

        elif choice == "9":
            current = prompt_with_autocomplete("Current password", is_password=True)
            new = prompt_with_autocomplete("New password", is_password=True)
            confirm = prompt_with_autocomplete("Confirm new password", is_password=True)
            try_api(c.update_password, current, new, confirm, success_msg="Password updated")

        elif choice == "10":
            cats = try_api(c.list_categories, success_msg="Categories loaded")
            if cats:
                console.print(", ".join(cats))

        elif choice == "11":
            if Confirm.ask("Are you sure you want to log out?"):
                c.logout()
                status_message = "Logged out"

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Até logo! 👋[/bold green]", title="Goodbye"))
                c.close()
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    global c
    settings = get_settings()
    configure_logging(settings.log_level)
    c = MarketplaceClient(settings)
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
