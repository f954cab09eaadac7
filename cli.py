# cli.py - interactive catalog browser with autocomplete
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pycatalog import CatalogClient

console = Console()
c = CatalogClient(base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:8081"))


status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def product_table(products: List[Dict[str, Any]], title: str = "📦 Products Catalog") -> Optional[Table]:
    if not products:
        return None

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Category", width=15)
    table.add_column("Updated", width=19)

    for p in products:
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            f"${p.get('price', 0):.2f}",
            str(p.get("quantity", 0)),
            p.get("category") or "-",
            (p.get("updatedAt") or "")[:19]
        )
    return table


def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    table = product_table(products, title)
    if table is None:
        console.print("[italic yellow]No products found[/italic yellow]")
        return
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, on_error: Any = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or ``on_error`` after printing the error.
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
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return on_error


FAILED = object()


def fetch_product(pid: str) -> Optional[Dict[str, Any]]:
    """Look up one product; "not found" is only reported when the API actually answered."""
    product = try_api(c.get_product, pid, on_error=FAILED)
    if product is FAILED:
        return None
    if product is None:
        console.print(f"[yellow]No product with id {pid}[/yellow]")
    return product


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    return WordCompleter([p.get("id", "") for p in product_cache if p.get("id")], ignore_case=True)


def get_category_completer():
    categories = {p.get("category") for p in product_cache if p.get("category")}
    return WordCompleter(sorted(categories), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog SDK",
        "[bold blue]Product Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Product name", default=current.get("name", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
        "quantity": IntPrompt.ask("📦 Quantity", default=current.get("quantity", 1)),
        "category": prompt_with_autocomplete(
            "🏷️ Category", completer=get_category_completer(), default=current.get("category") or ""
        ) or None,
        "description": prompt_with_autocomplete("Description", default=current.get("description") or "") or None,
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())
    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "✏️ Update product"),
            ("2", "🏷️ Filter by category", "6", "🗑️ Delete product"),
            ("3", "ℹ️ Get product by ID", "7", "🔄 Reset catalog"),
            ("4", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            category = prompt_with_autocomplete("Category", completer=get_category_completer())
            products = try_api(c.list_products, category, success_msg=f"Filtered by '{category}'")
            if products is not None:
                show_products(products, title=f"🏷️ {category}")

        elif choice == "3":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            resp = fetch_product(pid)
            if resp:
                show_products([resp])

        elif choice == "4":
            fields = ask_product_fields()
            resp = try_api(c.create_product, **fields, success_msg=f"Product '{fields['name']}' created")
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                product_cache = try_api(c.list_products) or []

        elif choice == "5":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            current = fetch_product(pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, **fields, success_msg=f"Product {pid} updated")
                if resp:
                    show_products([resp])
                    product_cache = try_api(c.list_products) or []

        elif choice == "6":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            if Confirm.ask(f"Delete product {pid}?"):
                deleted = try_api(c.delete_product, pid)
                if deleted:
                    console.print(show_status(f"Product {pid} deleted"))
                    product_cache = try_api(c.list_products) or []
                elif deleted is False:
                    console.print(f"[yellow]No product with id {pid}[/yellow]")

        elif choice == "7":
            if Confirm.ask("[red]This restores the demo catalog. Continue?[/red]"):
                console.print(try_api(c.reset, success_msg="Catalog reset"))
                product_cache = []

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
