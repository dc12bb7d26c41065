from __future__ import annotations

import logging
import uuid
from pathlib import Path

import typer
from rich import print
from rich.table import Table

from beautify.cart import CartEvent, CartEventType, CartStore
from beautify.catalog import CatalogClient, Product
from beautify.checkout import CardDetails, CheckoutFlow, PaymentMethod, ShippingDetails
from beautify.config import Settings
from beautify.core.logging import configure_logging, get_logger
from beautify.exceptions import BeautifyError
from beautify.services import export_catalog, run_doctor_checks

app = typer.Typer(no_args_is_help=True, help="Beautify CLI: каталог товаров, корзина и оформление заказа")

EVENT_COLORS = {
    CartEventType.ADDED: "green",
    CartEventType.QUANTITY_UPDATED: "yellow",
    CartEventType.QUANTITY_CHANGED: "yellow",
    CartEventType.REMOVED: "red",
    CartEventType.CLEARED: "blue",
}


def _load_settings(base_dir: Path | None = None) -> Settings:
    settings = Settings.load(base_dir=base_dir)
    settings.ensure_directories()
    return settings


def _start_session(settings: Settings, name: str) -> logging.LoggerAdapter:
    session_id = uuid.uuid4().hex
    configure_logging(settings.logs_dir, session_id=session_id, level=settings.log_level)
    return get_logger(name, session_id)


def _fetch_products(settings: Settings, logger: logging.LoggerAdapter) -> list[Product]:
    client = CatalogClient(settings.products_url, timeout_sec=settings.http_timeout_sec, logger=logger)
    try:
        return client.fetch_products()
    except BeautifyError as exc:
        print(f"[red]Не удалось загрузить каталог[/red]: {exc}")
        raise typer.Exit(1) from exc


def _money(value: float) -> str:
    return f"${value:.2f}"


def _print_cart_event(event: CartEvent) -> None:
    color = EVENT_COLORS.get(event.type, "white")
    print(f"[{color}]{event.title}[/{color}] {event.message}")


@app.command("products")
def products_command(
    limit: int | None = typer.Option(None, min=1, help="Показать только первые N товаров"),
) -> None:
    settings = _load_settings()
    logger = _start_session(settings, "beautify.catalog")
    products = _fetch_products(settings, logger)
    shown = products[:limit] if limit else products

    table = Table(title=f"Catalog ({len(products)} products)")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Brand")
    table.add_column("Price", justify="right")
    table.add_column("Discount", justify="right")
    table.add_column("Rating", justify="right")
    table.add_column("Stock")
    for product in shown:
        discount = f"-{product.discount_percentage:.0f}%" if product.discount_percentage > 0 else ""
        table.add_row(
            str(product.id),
            product.title,
            product.brand,
            _money(product.discounted_price),
            discount,
            f"{product.rating:.1f}",
            "In Stock" if product.in_stock else "Out of Stock",
        )
    print(table)


@app.command("product")
def product_command(product_id: int = typer.Argument(..., help="ID товара")) -> None:
    settings = _load_settings()
    logger = _start_session(settings, "beautify.catalog")
    products = {product.id: product for product in _fetch_products(settings, logger)}
    product = products.get(product_id)
    if product is None:
        print(f"[red]Товар {product_id} не найден[/red]")
        raise typer.Exit(1)

    print(f"[bold]{product.title}[/bold] ({product.brand or 'no brand'}, {product.category})")
    print(product.description)
    if product.discount_percentage > 0:
        print(
            f"Price: [strike]{_money(product.price)}[/strike] {_money(product.discounted_price)} "
            f"(-{product.discount_percentage:.0f}% OFF)"
        )
    else:
        print(f"Price: {_money(product.price)}")
    print(f"Rating: {product.rating:.1f} ({len(product.reviews)} reviews)")
    print(f"Stock: {product.stock} ({'In Stock' if product.in_stock else 'Out of Stock'})")
    print(f"Minimum order: {product.minimum_order_quantity}")
    for label, value in [
        ("Warranty", product.warranty_information),
        ("Shipping", product.shipping_information),
        ("Return policy", product.return_policy),
    ]:
        if value:
            print(f"{label}: {value}")
    if product.tags:
        print(f"Tags: {', '.join(product.tags)}")
    for review in product.reviews:
        print(f"- {'★' * review.rating}{'☆' * (5 - review.rating)} {review.reviewer_name}: {review.comment}")


@app.command("order")
def order_command(
    add: list[int] = typer.Option(..., "--add", help="ID товара в корзину; повтор увеличивает количество"),
    name: str = typer.Option(..., help="Имя получателя"),
    email: str = typer.Option(..., help="Email получателя"),
    phone: str = typer.Option(..., help="Телефон"),
    address: str = typer.Option(..., help="Адрес доставки"),
    city: str = typer.Option(..., help="Город"),
    zip_code: str = typer.Option(..., "--zip", help="Почтовый индекс"),
    payment: PaymentMethod = typer.Option(PaymentMethod.CARD, help="Способ оплаты: card|paypal|apple"),
    card_number: str | None = typer.Option(None, help="Номер карты (для card)"),
    expiry: str | None = typer.Option(None, help="Срок действия карты MM/YY (для card)"),
    cvv: str | None = typer.Option(None, help="CVV карты (для card)"),
    delay: bool = typer.Option(True, "--delay/--no-delay", help="Имитировать задержку добавления в корзину и обработки заказа"),
) -> None:
    settings = _load_settings()
    logger = _start_session(settings, "beautify.order")
    products = {product.id: product for product in _fetch_products(settings, logger)}

    unknown = sorted({product_id for product_id in add if product_id not in products})
    if unknown:
        raise typer.BadParameter(f"Неизвестные товары: {unknown}")

    cart = CartStore(add_delay_sec=settings.add_to_cart_delay_sec if delay else 0.0, logger=logger)
    cart.subscribe(_print_cart_event)
    for product_id in add:
        cart.add_item(products[product_id])

    flow = CheckoutFlow(
        cart,
        processing_delay_sec=settings.checkout_delay_sec if delay else 0.0,
        free_shipping_threshold=settings.free_shipping_threshold,
        shipping_fee=settings.shipping_fee,
        logger=logger,
    )
    card = None
    if payment is PaymentMethod.CARD and card_number:
        card = CardDetails(number=card_number, expiry=expiry or "", cvv=cvv or "")

    try:
        flow.submit_shipping(
            ShippingDetails(
                full_name=name,
                email=email,
                phone=phone,
                address=address,
                city=city,
                zip_code=zip_code,
            )
        )
        flow.select_payment(payment, card)
        summary = flow.review()

        table = Table(title="Order review")
        table.add_column("Item")
        table.add_column("Qty", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("Total", justify="right")
        for line in summary.lines:
            table.add_row(line.title, str(line.quantity), _money(line.unit_price), _money(line.total_price))
        print(table)
        print(f"Subtotal: {_money(summary.subtotal)}")
        print(f"Shipping: {'FREE' if summary.free_shipping else _money(summary.shipping_fee)}")
        print(f"[bold]TOTAL: {_money(summary.total)}[/bold]")
        payment_label = summary.payment_method.label
        if summary.card and summary.card.masked_number:
            payment_label = f"{payment_label} {summary.card.masked_number}"
        print(f"Payment: {payment_label}")
        print(f"Ship to: {summary.shipping.full_name}, {summary.shipping.address}, {summary.shipping.city} {summary.shipping.zip_code}")

        confirmation = flow.place_order()
    except BeautifyError as exc:
        print(f"[red]Ошибка оформления заказа[/red]: {exc}")
        raise typer.Exit(1) from exc

    print(f"[green]Order Placed Successfully![/green] id={confirmation.order_id}")
    print(confirmation.message)


@app.command("export")
def export_command(
    format: str = typer.Option("xlsx,csv", help="Список форматов через запятую: xlsx,csv"),
    out: Path | None = typer.Option(None, help="Папка экспорта"),
) -> None:
    formats = [item.strip().lower() for item in format.split(",") if item.strip()]
    supported = {"xlsx", "csv"}
    unknown = [item for item in formats if item not in supported]
    if unknown:
        raise typer.BadParameter(f"Неподдерживаемые форматы: {unknown}")

    settings = _load_settings()
    logger = _start_session(settings, "beautify.export")
    out_dir = (out or settings.exports_dir).resolve()
    files = export_catalog(_fetch_products(settings, logger), formats=formats, out_dir=out_dir)

    print("[green]Экспорт завершен[/green]")
    for file_path in files:
        print(f"- {file_path}")


@app.command("doctor")
def doctor_command() -> None:
    settings = _load_settings()
    checks = run_doctor_checks(settings)

    print("Результаты doctor:")
    for check in checks:
        status = check["status"].upper()
        print(f"- [{status}] {check['check']}: {check['detail']}")


if __name__ == "__main__":
    app()
