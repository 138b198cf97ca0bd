"""Turn a structured ingredient into display text.

``render`` returns the separate fragments (quantity, unit, name, note,
recipe link), each sanitized on its own; ``render_flat`` joins them into
one line.
"""
import logging
import re
from typing import Optional
from urllib.parse import quote

from ingredient_display.locales import PluralPolicy, active_plural_policy
from ingredient_display.models import Food, Ingredient, ParsedFields, RecipeRef, Unit
from ingredient_display.sanitize import escape_attribute, escape_text, sanitize_fragment
from ingredient_display.scaling import RenderMode, coerce_quantity, format_quantity

log = logging.getLogger(__name__)

MULTI_SPACE = re.compile(r" {2,}")


def should_pluralize_food(effective_quantity, has_unit: bool, policy) -> bool:
    # one or less is always singular, whatever the locale says
    if effective_quantity and effective_quantity <= 1:
        return False
    policy = PluralPolicy.of(policy)
    if policy is PluralPolicy.ALWAYS:
        return True
    if policy is PluralPolicy.NEVER:
        return False
    return not (effective_quantity and has_unit)


def should_pluralize_unit(raw_quantity, scale: float) -> bool:
    """A present quantity of zero counts as plural ("0 cups")."""
    quantity = coerce_quantity(raw_quantity)
    if quantity is None:
        return False
    scaled = quantity * scale
    return scaled > 1 or scaled == 0


def food_name(food: Optional[Food], plural: bool) -> str:
    if not food:
        return ""
    return ((food.plural_name or food.name) if plural else food.name) or ""


def unit_name(unit: Optional[Unit], plural: bool) -> str:
    if not unit:
        return ""
    txt = ""
    if unit.use_abbreviation:
        txt = (unit.plural_abbreviation or unit.abbreviation) if plural else unit.abbreviation
    if not txt:
        txt = (unit.plural_name or unit.name) if plural else unit.name
    return txt or ""


def recipe_link(ref: Optional[RecipeRef], container_id) -> Optional[str]:
    if not (ref and ref.slug and ref.name and container_id):
        return None
    href = f"/g/{quote(str(container_id), safe='')}/r/{quote(str(ref.slug), safe='')}"
    return f'<a href={escape_attribute(href)} target="_blank">{escape_text(ref.name)}</a>'


def _fragment(txt) -> Optional[str]:
    return sanitize_fragment(txt) if txt else None


def render(ingredient, scale: float = 1, mode=RenderMode.MARKUP, container_id=None, policy=None) -> ParsedFields:
    """Display fragments for ``ingredient`` at ``scale``.

    ``policy`` is the plural food handling; when omitted the active
    locale's policy is used. ``container_id`` namespaces the recipe link
    and no link is built without it.
    """
    if not isinstance(ingredient, Ingredient):
        ingredient = Ingredient.from_dict(ingredient)
    if policy is None:
        policy = active_plural_policy()

    quantity, unit = ingredient.quantity, ingredient.unit
    effective = (quantity or 0) * scale
    plural_unit = should_pluralize_unit(quantity, scale)
    plural_food = should_pluralize_food(effective, unit is not None, policy)

    use_fraction = unit is not None and unit.fraction
    qty = format_quantity(quantity, scale, use_fraction, RenderMode.of(mode))

    unit_txt = unit_name(unit, plural_unit) if quantity else ""
    ref = ingredient.referenced_recipe
    if ref:
        if ingredient.food:
            log.debug("referenced recipe %r shadows food %r", ref.slug, ingredient.food.name)
        name = ref.name or ""
    else:
        name = food_name(ingredient.food, plural_food)

    return ParsedFields(
        quantity=_fragment(qty),
        unit=_fragment(unit_txt),
        name=_fragment(name),
        note=_fragment(ingredient.note),
        recipe_link=recipe_link(ref, container_id),
    )


def render_flat(ingredient, scale: float = 1, mode=RenderMode.MARKUP, policy=None) -> str:
    fields = render(ingredient, scale, mode, policy=policy)
    parts = [fields.quantity, fields.unit, fields.name, fields.note]
    txt = MULTI_SPACE.sub(" ", " ".join(p or "" for p in parts)).strip()
    return sanitize_fragment(txt)
