"""Demo menu loaded by ``manage.py serve --seed-demo-menu`` or ``SEED_DEMO_MENU=1``."""

from protean.utils.globals import current_domain

from catalogue.category.management import CreateCategory
from catalogue.domain import logger
from catalogue.menu.management import AddMenuItem

DEMO_MENU = {
    "Tradicionais": [
        ("Margherita", 32.00, "Molho de tomate, mussarela, manjericão fresco e azeite"),
        ("Calabresa", 35.00, "Calabresa fatiada, cebola roxa e azeitonas pretas"),
        ("Mussarela", 30.00, "Mussarela, tomate e orégano"),
    ],
    "Especiais": [
        ("Quatro Queijos", 42.00, "Mussarela, provolone, gorgonzola e parmesão"),
        ("Portuguesa", 40.00, "Presunto, ovos, cebola, ervilha e azeitonas"),
    ],
    "Doces": [
        ("Chocolate com Morango", 38.00, "Chocolate ao leite e morangos frescos"),
    ],
}


def seed_demo_menu(menu=None) -> dict[str, list[str]]:
    """Create the demo categories and pizzas in the active catalogue domain.

    Returns a mapping of category id to the ids of the pizzas created in it.
    """
    menu = menu or DEMO_MENU
    created: dict[str, list[str]] = {}

    for display_order, (category_name, pizzas) in enumerate(menu.items()):
        category_id = current_domain.process(
            CreateCategory(name=category_name, display_order=display_order),
            asynchronous=False,
        )
        created[category_id] = []

        for name, price, description in pizzas:
            item_id = current_domain.process(
                AddMenuItem(
                    name=name,
                    price=price,
                    description=description,
                    category_id=category_id,
                ),
                asynchronous=False,
            )
            created[category_id].append(item_id)

    logger.info(
        "Demo menu seeded",
        categories=len(created),
        items=sum(len(ids) for ids in created.values()),
    )
    return created
