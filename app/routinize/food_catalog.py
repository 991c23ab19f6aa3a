"""
Built-in Spanish food catalog.

Seeded into ``food_database`` on first start-up with ``external_id``
values ``es-1`` .. ``es-N``.  Values are per serving as listed.
"""

from __future__ import annotations

import logging

from sqlmodel import Session

from app.db.repositories.food import FoodRepository
from app.models.food import FoodItem

logger = logging.getLogger(__name__)

CATALOG_PREFIX = "es-"

# (name, brand, category, subcategory, region, kcal, protein, carbs, fat, fiber, sugar, serving, unit, supermarkets)
_SPANISH_FOODS: list[tuple] = [
    ("Jamón serrano", None, "Carnes", "Embutidos", "Andalucía", 241, 31.0, 0.5, 13.0, 0.0, 0.5, 100, "g",
     ["Mercadona", "Carrefour", "Dia"]),
    ("Jamón ibérico de bellota", None, "Carnes", "Embutidos", "Extremadura", 375, 43.0, 0.0, 22.0, 0.0, 0.0, 100, "g",
     ["El Corte Inglés", "Carrefour"]),
    ("Pechuga de pollo", None, "Carnes", "Aves", None, 110, 23.0, 0.0, 1.5, 0.0, 0.0, 100, "g",
     ["Mercadona", "Carrefour", "Lidl", "Dia"]),
    ("Pechuga de pavo", "Hacendado", "Carnes", "Aves", None, 104, 21.0, 1.0, 1.8, 0.0, 1.0, 100, "g",
     ["Mercadona"]),
    ("Chorizo", "Revilla", "Carnes", "Embutidos", "Castilla y León", 455, 24.0, 2.0, 39.0, 0.0, 1.0, 100, "g",
     ["Carrefour", "Dia", "Alcampo"]),
    ("Lomo embuchado", None, "Carnes", "Embutidos", "Castilla y León", 260, 38.0, 1.0, 11.0, 0.0, 0.5, 100, "g",
     ["Mercadona", "Carrefour"]),
    ("Merluza", None, "Pescados", "Pescado blanco", "Galicia", 86, 17.0, 0.0, 2.0, 0.0, 0.0, 100, "g",
     ["Mercadona", "Carrefour", "Eroski"]),
    ("Bacalao fresco", None, "Pescados", "Pescado blanco", "País Vasco", 82, 18.0, 0.0, 0.7, 0.0, 0.0, 100, "g",
     ["Mercadona", "Eroski"]),
    ("Sardinas", None, "Pescados", "Pescado azul", "Galicia", 208, 25.0, 0.0, 11.0, 0.0, 0.0, 100, "g",
     ["Mercadona", "Carrefour"]),
    ("Atún en aceite de oliva", "Calvo", "Pescados", "Conservas", None, 198, 26.0, 0.0, 10.0, 0.0, 0.0, 100, "g",
     ["Mercadona", "Carrefour", "Dia", "Lidl"]),
    ("Boquerones en vinagre", None, "Pescados", "Pescado azul", "Andalucía", 130, 20.0, 0.5, 5.5, 0.0, 0.0, 100, "g",
     ["Mercadona", "Carrefour"]),
    ("Queso manchego curado", None, "Lácteos", "Quesos", "Castilla-La Mancha", 392, 26.0, 0.5, 32.0, 0.0, 0.5, 100,
     "g", ["Mercadona", "Carrefour", "El Corte Inglés"]),
    ("Queso fresco de Burgos", "Hacendado", "Lácteos", "Quesos", "Castilla y León", 174, 12.0, 4.0, 12.0, 0.0, 4.0,
     100, "g", ["Mercadona"]),
    ("Yogur natural", "Danone", "Lácteos", "Yogures", None, 61, 3.5, 4.7, 3.3, 0.0, 4.7, 125, "g",
     ["Mercadona", "Carrefour", "Dia", "Lidl"]),
    ("Leche semidesnatada", "Central Lechera Asturiana", "Lácteos", "Leches", "Asturias", 46, 3.1, 4.7, 1.6, 0.0,
     4.7, 100, "ml", ["Mercadona", "Carrefour", "Alcampo"]),
    ("Huevos camperos", None, "Huevos", None, None, 143, 12.6, 0.7, 9.5, 0.0, 0.4, 100, "g",
     ["Mercadona", "Carrefour", "Lidl"]),
    ("Garbanzos cocidos", "Luengo", "Legumbres", None, None, 139, 7.2, 17.0, 2.6, 6.0, 0.3, 100, "g",
     ["Mercadona", "Carrefour", "Dia"]),
    ("Lentejas pardinas cocidas", None, "Legumbres", None, "Castilla y León", 116, 9.0, 16.5, 0.4, 7.9, 1.8, 100,
     "g", ["Mercadona", "Carrefour"]),
    ("Alubias blancas cocidas", None, "Legumbres", None, "Asturias", 104, 7.0, 14.5, 0.5, 6.3, 0.3, 100, "g",
     ["Mercadona", "Eroski"]),
    ("Arroz bomba", "La Fallera", "Cereales", "Arroces", "Comunidad Valenciana", 349, 7.0, 78.0, 0.6, 1.0, 0.1,
     100, "g", ["Mercadona", "Carrefour", "El Corte Inglés"]),
    ("Pan de barra", None, "Cereales", "Panes", None, 261, 8.5, 52.0, 1.6, 2.7, 2.5, 100, "g",
     ["Mercadona", "Carrefour", "Dia", "Lidl"]),
    ("Copos de avena", "Hacendado", "Cereales", "Desayuno", None, 372, 13.5, 59.0, 7.0, 10.0, 1.0, 100, "g",
     ["Mercadona"]),
    ("Aceite de oliva virgen extra", "Carbonell", "Aceites", None, "Andalucía", 884, 0.0, 0.0, 100.0, 0.0, 0.0,
     100, "ml", ["Mercadona", "Carrefour", "Dia", "Alcampo"]),
    ("Almendras marcona", None, "Frutos secos", None, "Comunidad Valenciana", 579, 21.0, 22.0, 50.0, 12.5, 4.4,
     100, "g", ["Mercadona", "Carrefour"]),
    ("Aceitunas manzanilla", "La Española", "Encurtidos", None, "Andalucía", 145, 1.0, 3.8, 15.0, 3.3, 0.0, 100,
     "g", ["Mercadona", "Carrefour", "Dia"]),
    ("Tortilla de patatas", "Hacendado", "Platos preparados", None, None, 165, 6.0, 13.0, 10.0, 1.3, 1.0, 100, "g",
     ["Mercadona"]),
    ("Gazpacho", "Alvalle", "Platos preparados", "Sopas frías", "Andalucía", 41, 0.8, 3.9, 2.4, 0.9, 3.2, 100,
     "ml", ["Mercadona", "Carrefour", "El Corte Inglés"]),
    ("Naranja", None, "Frutas", "Cítricos", "Comunidad Valenciana", 47, 0.9, 11.8, 0.1, 2.4, 9.4, 100, "g",
     ["Mercadona", "Carrefour", "Lidl"]),
    ("Plátano de Canarias", None, "Frutas", None, "Canarias", 89, 1.1, 22.8, 0.3, 2.6, 12.2, 100, "g",
     ["Mercadona", "Carrefour", "Dia"]),
    ("Pimiento del piquillo", "El Navarrico", "Verduras", "Conservas", "Navarra", 25, 1.0, 4.4, 0.3, 1.8, 3.5, 100,
     "g", ["Carrefour", "El Corte Inglés"]),
]


def catalog_items() -> list[FoodItem]:
    """Fresh :class:`FoodItem` rows for the whole catalog."""
    items = []
    for index, row in enumerate(_SPANISH_FOODS, start=1):
        (name, brand, category, subcategory, region, calories, protein, carbs, fat, fiber, sugar, serving, unit,
         supermarkets) = row
        items.append(FoodItem(
            external_id=f"{CATALOG_PREFIX}{index}",
            name=name,
            brand=brand,
            category=category,
            subcategory=subcategory,
            region=region,
            calories=float(calories),
            protein=protein,
            carbs=carbs,
            fat=fat,
            fiber=fiber,
            sugar=sugar,
            serving_size=float(serving),
            serving_unit=unit,
            supermarkets=list(supermarkets),
        ))
    return items


def seed_food_catalog(session: Session) -> int:
    """Insert the catalog unless it is already present.

    Returns:
        Number of rows inserted (0 when the catalog was already seeded).
    """
    repository = FoodRepository(session)
    if repository.exists_with_prefix(CATALOG_PREFIX):
        logger.info("Spanish food catalog already seeded; skipping")
        return 0

    items = catalog_items()
    repository.create_many(items)
    logger.info("Seeded %d foods into the food database", len(items))
    return len(items)
