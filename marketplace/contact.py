"""Seller contact link and price display for the product detail screen."""

import re
from typing import Optional
from urllib.parse import quote

from .models import Product

COUNTRY_CODE = "55"
GREETING = 'Olá! Vi seu produto "{title}" no Marketplace e gostaria de saber mais informações.'


def whatsapp_url(product: Product, country_code: str = COUNTRY_CODE) -> Optional[str]:
    digits = re.sub(r"\D", "", product.seller.phone or "")
    if not digits:
        return None
    text = quote(GREETING.format(title=product.title))
    return f"whatsapp://send?phone={country_code}{digits}&text={text}"


def format_price(price: float) -> str:
    return "R$ " + f"{price:.2f}".replace(".", ",")
