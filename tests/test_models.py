"""Tests for record coercion into the ingredient models."""

from ingredient_display.models import Food, Ingredient, ParsedFields, RecipeRef, Unit


def test_from_dict_camel_case():
    ing = Ingredient.from_dict({
        "quantity": "2.5",
        "unit": {"name": "tablespoon", "pluralName": "tablespoons", "abbreviation": "tbsp",
                 "pluralAbbreviation": "tbsps", "useAbbreviation": True, "fraction": False},
        "food": {"name": "oil", "pluralName": "oils"},
        "note": "olive",
        "referencedRecipe": {"slug": "dressing", "name": "Dressing"},
        "disableAmount": False,
    })
    assert ing.quantity == 2.5
    assert ing.unit == Unit("tablespoon", "tablespoons", "tbsp", "tbsps", True, False)
    assert ing.food == Food("oil", "oils")
    assert ing.note == "olive"
    assert ing.referenced_recipe == RecipeRef("dressing", "Dressing")


def test_from_dict_snake_case():
    unit = Unit.from_dict({"name": "cup", "plural_name": "cups", "use_abbreviation": True})
    assert unit.plural_name == "cups"
    assert unit.use_abbreviation is True
    assert unit.fraction is True


def test_missing_records_become_none():
    ing = Ingredient.from_dict({"quantity": None, "unit": None, "food": {}})
    assert ing == Ingredient()
    assert Unit.from_dict(None) is None
    assert RecipeRef.from_dict({}) is None


def test_non_numeric_quantity_is_absent():
    assert Ingredient(quantity="a handful").quantity is None
    assert Ingredient(quantity="3").quantity == 3.0


def test_constructor_accepts_mappings():
    ing = Ingredient(unit={"name": "cup"}, food={"name": "flour"})
    assert ing.unit == Unit(name="cup")
    assert ing.food == Food(name="flour")


def test_parsed_fields_as_dict():
    assert ParsedFields(quantity="2").as_dict() == {
        "quantity": "2", "unit": None, "name": None, "note": None, "recipe_link": None,
    }


def test_bare_string_records_become_names():
    ing = Ingredient.from_dict({"quantity": 2, "food": "apple", "unit": "cup", "referencedRecipe": "Pie"})
    assert ing.food == Food(name="apple")
    assert ing.unit == Unit(name="cup")
    assert ing.referenced_recipe == RecipeRef(name="Pie")


def test_other_non_mapping_records_are_dropped():
    ing = Ingredient.from_dict({"food": 42, "unit": ["cup"], "referencedRecipe": True})
    assert ing.food is None
    assert ing.unit is None
    assert ing.referenced_recipe is None
    assert Food.from_dict("   ") is None
    assert Ingredient.from_dict("2 cups flour") == Ingredient()


def test_string_flags_are_parsed():
    unit = Unit.from_dict({"name": "cup", "fraction": "false", "useAbbreviation": "true"})
    assert unit.fraction is False
    assert unit.use_abbreviation is True
    assert Unit.from_dict({"name": "cup", "fraction": "0", "useAbbreviation": "no"}) == Unit(name="cup", fraction=False)
    assert Unit.from_dict({"name": "cup", "fraction": 0}).fraction is False
