"""Pizza menu catalog shown on the public menu page and edited by admins."""

import logging
import uuid
from typing import Any, Optional

from pizzahouse.schemas.menu_schema import Pizza, PizzaKind

logger = logging.getLogger(__name__)

_SEED_MENU: list[dict[str, Any]] = [
    {"nome": "Margherita", "ingredientes": "Molho de tomate, muçarela, tomate e manjericão", "tipo": "salgada"},
    {"nome": "Calabresa", "ingredientes": "Molho de tomate, muçarela, calabresa e cebola", "tipo": "salgada"},
    {"nome": "Frango com Catupiry", "ingredientes": "Molho de tomate, frango desfiado e catupiry", "tipo": "salgada"},
    {"nome": "Quatro Queijos", "ingredientes": "Muçarela, provolone, parmesão e gorgonzola", "tipo": "salgada"},
    {"nome": "Chocolate", "ingredientes": "Chocolate ao leite e granulado", "tipo": "doce"},
    {"nome": "Romeu e Julieta", "ingredientes": "Muçarela e goiabada", "tipo": "doce"},
]

_pizzas: dict[str, Pizza] = {}


def list_pizzas(kind: Optional[PizzaKind] = None, active_only: bool = False) -> list[Pizza]:
    """Return the menu in display order."""
    rows = [
        p for p in _pizzas.values()
        if (kind is None or p.kind == kind) and (p.active or not active_only)
    ]
    return sorted(rows, key=lambda p: p.order)


def get_pizza(pizza_id: str) -> Optional[Pizza]:
    return _pizzas.get(pizza_id)


def add_pizza(
    name: str,
    ingredients: str,
    kind: PizzaKind = PizzaKind.SAVORY,
    image_url: Optional[str] = None,
) -> Optional[Pizza]:
    """Append a flavour at the end of the menu. Returns None if name or ingredients are blank."""
    if not name.strip() or not ingredients.strip():
        return None
    pizza = Pizza(
        id=uuid.uuid4().hex,
        name=name.strip(),
        ingredients=ingredients.strip(),
        image_url=image_url or None,
        kind=kind,
        order=max((p.order for p in _pizzas.values()), default=-1) + 1,
    )
    _pizzas[pizza.id] = pizza
    logger.info("Pizza added: %s (%s)", pizza.name, pizza.kind.value)
    return pizza


def update_pizza(pizza_id: str, **changes: Any) -> Optional[Pizza]:
    pizza = _pizzas.get(pizza_id)
    if pizza is None:
        return None
    updated = Pizza.model_validate({**pizza.model_dump(), **changes})
    _pizzas[pizza_id] = updated
    logger.info("Pizza updated: %s", updated.name)
    return updated


def delete_pizza(pizza_id: str) -> bool:
    pizza = _pizzas.pop(pizza_id, None)
    if pizza is None:
        return False
    logger.info("Pizza deleted: %s", pizza.name)
    return True


def reset() -> None:
    """Restore the seeded menu. Used by test fixtures for isolation."""
    _pizzas.clear()
    for order, row in enumerate(_SEED_MENU):
        pizza = Pizza.model_validate({"id": f"pizza-{order + 1}", "ordem": order, **row})
        _pizzas[pizza.id] = pizza


reset()
