# product_sdk/cli.py
import argparse
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle
import requests
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from .client import ProductApiError, ProductClient

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def products_table(products: List[Dict[str, Any]], title: str = "📦 Products Catalog") -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"{p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if in_stock else "[red]no[/red]",
        )
    return table


def show_products(products: List[Dict[str, Any]], out: Optional[Console] = None):
    out = out or console
    if not products:
        out.print("[italic yellow]No products found[/italic yellow]")
        return
    out.print(products_table(products))


def show_page(page: Dict[str, Any], out: Optional[Console] = None):
    out = out or console
    show_products(page.get("data", []), out)
    out.print(f"[dim]page {page.get('page')} · limit {page.get('limit')} · total {page.get('total')}[/dim]")


def show_stats(stats: Dict[str, Any], out: Optional[Console] = None):
    out = out or console
    table = Table(title="📊 Products by category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in stats.get("countByCategory", {}).items():
        table.add_row(category, str(count))
    out.print(table)
    out.print(f"[bold]Total products:[/bold] {stats.get('totalProducts', 0)}")


def show_status(message: str, is_success: bool = True) -> Panel:
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, out: Optional[Console] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. API errors are shown in a
    status panel and turn into a None result.
    """
    out = out or console
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
            console=out,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except (ProductApiError, requests.RequestException) as e:
        out.print(show_status(f"Error: {e}", False))
        return None

    if success_msg:
        out.print(show_status(success_msg, True))
    return result


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def product_completer(client: ProductClient) -> WordCompleter:
    products = try_api(client.list_all) or []
    words = [p.get("id", "") for p in products] + [p.get("name", "") for p in products]
    return WordCompleter([w for w in words if w], ignore_case=True)


def ask_product_fields(defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    defaults = defaults or {}
    return {
        "name": Prompt.ask("Name", default=defaults.get("name", ...)),
        "description": Prompt.ask("Description", default=defaults.get("description", ...)),
        "price": FloatPrompt.ask("💰 Price", default=float(defaults.get("price", 10.0))),
        "category": Prompt.ask("🏷️ Category", default=defaults.get("category", "general")),
        "in_stock": Confirm.ask("In stock?", default=defaults.get("inStock", True)),
    }


def create_header() -> Panel:
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row("🛍️ Product API", "[bold blue]Catalog CLI[/bold blue]", f"[dim]{now}[/dim]")
    return Panel(header, style="bold blue")


MENU_OPTIONS = [
    ("1", "📦 List all products", "5", "➕ Create product"),
    ("2", "📄 Browse (page/category)", "6", "✏️ Update product"),
    ("3", "🔍 Search by name", "7", "🗑️ Delete product"),
    ("4", "ℹ️ Get product by ID", "8", "📊 Category stats"),
    ("", "", "q", "👋 Quit"),
]


# ---------------------------
# Menu actions
# ---------------------------
def run_choice(choice: str, client: ProductClient) -> bool:
    """Execute one menu option. Returns False when the user asked to quit."""
    if choice == "1":
        products = try_api(client.list_all, success_msg="Products loaded")
        if products is not None:
            show_products(products)

    elif choice == "2":
        category = Prompt.ask("🏷️ Category (blank for all)", default="")
        page = IntPrompt.ask("Page", default=1)
        limit = IntPrompt.ask("Limit", default=10)
        res = try_api(client.list_products, category or None, page, limit)
        if res is not None:
            show_page(res)

    elif choice == "3":
        term = prompt_with_autocomplete("Enter search term")
        res = try_api(client.search_products, term, success_msg=f"Search for '{term}' completed")
        if res is not None:
            show_products(res)

    elif choice == "4":
        pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(client))
        res = try_api(client.get_product, pid)
        if res is not None:
            show_products([res])

    elif choice == "5":
        fields = ask_product_fields()
        res = try_api(client.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
        if res is not None:
            show_products([res["product"]])

    elif choice == "6":
        pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(client))
        current = try_api(client.get_product, pid)
        if current is not None:
            fields = ask_product_fields(current)
            res = try_api(client.update_product, pid, success_msg=f"Product {pid} updated", **fields)
            if res is not None:
                show_products([res["product"]])

    elif choice == "7":
        pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(client))
        if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
            try_api(client.delete_product, pid, success_msg=f"Product {pid} deleted")

    elif choice == "8":
        res = try_api(client.stats)
        if res is not None:
            show_stats(res)

    elif choice.lower() in ("q", "quit", "exit"):
        return False

    else:
        console.print(show_status(f"Unknown option '{choice}'", False))
    return True


def menu(client: ProductClient):
    console.clear()
    console.print(create_header())

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in MENU_OPTIONS:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
        ).strip()

        if not run_choice(choice, client):
            console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
            return

        console.print()
        console.rule(style="dim")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Interactive Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY"))
    args = parser.parse_args(argv)

    try:
        menu(ProductClient(base_url=args.base_url, api_key=args.api_key))
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
