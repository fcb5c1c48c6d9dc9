# stub_server/database.py
from typing import Any, Dict, List

# This file holds all the in-memory data stores.

CATEGORIES = ["Brinquedo", "Móvel", "Papelaria", "Saúde & Beleza", "Utensílio", "Vestuário"]

USERS: Dict[str, Dict[str, Any]] = {}
TOKENS: Dict[str, str] = {}
PRODUCTS: Dict[str, Dict[str, Any]] = {}
# one entry per request seen, for asserting wire behaviour in tests
REQUEST_LOG: List[Dict[str, Any]] = []


def _seed():
    seller = {
        "id": "s1",
        "name": "Maria Souza",
        "email": "maria@example.com",
        "phone": "(11) 98888-7777",
        "avatar": None,
        "password": "maria123",
    }
    USERS[seller["id"]] = seller
    rows = [
        ("p1", "Sofá retrátil", "Sofá de 3 lugares, pouco uso.", 1200.0, "Móvel"),
        ("p2", "Kit de lápis de cor", "Caixa com 36 cores.", 25.9, "Papelaria"),
        ("p3", "Jaqueta jeans", "Tamanho M, azul claro.", 89.5, "Vestuário"),
        ("p4", "Carrinho de controle remoto", "Acompanha bateria recarregável.", 150.0, "Brinquedo"),
        ("p5", "Amostra grátis de sabonete", "Sabonete artesanal de lavanda.", 0.0, "Saúde & Beleza"),
    ]
    for pid, title, description, price, category in rows:
        PRODUCTS[pid] = {
            "id": pid,
            "title": title,
            "description": description,
            "price": price,
            "category": category,
            "images": [f"https://images.example.com/{pid}/1.jpg", f"https://images.example.com/{pid}/2.jpg"],
            "views": 0,
            "seller": {"id": seller["id"], "name": seller["name"], "phone": seller["phone"]},
        }


def reset(seed: bool = True):
    USERS.clear()
    TOKENS.clear()
    PRODUCTS.clear()
    REQUEST_LOG.clear()
    if seed:
        _seed()


reset()
