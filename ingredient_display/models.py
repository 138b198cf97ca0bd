from dataclasses import dataclass, asdict
from typing import Mapping, Optional

from ingredient_display.scaling import coerce_quantity


def _get(data: Mapping, *keys, default=None):
    """First present key wins; API records use camelCase, ours snake_case."""
    if not isinstance(data, Mapping):
        return default
    for k in keys:
        if k in data and data[k] is not None:
            return data[k]
    return default


def _flag(value, default: bool) -> bool:
    # JSON from forms sometimes carries "false" or "0"
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _record(data):
    """A bare string stands for a record with just a name."""
    if isinstance(data, str):
        return {"name": data} if data.strip() else None
    return data if isinstance(data, Mapping) and data else None


@dataclass(frozen=True)
class Unit:
    name: str = ""
    plural_name: Optional[str] = None
    abbreviation: Optional[str] = None
    plural_abbreviation: Optional[str] = None
    use_abbreviation: bool = False
    fraction: bool = True

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        data = _record(data)
        if data is None:
            return None
        return cls(
            name=_get(data, "name", default=""),
            plural_name=_get(data, "plural_name", "pluralName"),
            abbreviation=_get(data, "abbreviation"),
            plural_abbreviation=_get(data, "plural_abbreviation", "pluralAbbreviation"),
            use_abbreviation=_flag(_get(data, "use_abbreviation", "useAbbreviation"), False),
            fraction=_flag(_get(data, "fraction"), True),
        )


@dataclass(frozen=True)
class Food:
    name: str = ""
    plural_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        data = _record(data)
        if data is None:
            return None
        return cls(name=_get(data, "name", default=""), plural_name=_get(data, "plural_name", "pluralName"))


@dataclass(frozen=True)
class RecipeRef:
    slug: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        data = _record(data)
        if data is None:
            return None
        return cls(slug=_get(data, "slug"), name=_get(data, "name"))


@dataclass(frozen=True)
class Ingredient:
    quantity: Optional[float] = None
    unit: Optional[Unit] = None
    food: Optional[Food] = None
    note: Optional[str] = None
    referenced_recipe: Optional[RecipeRef] = None

    def __post_init__(self):
        # quantities sometimes arrive as strings
        object.__setattr__(self, "quantity", coerce_quantity(self.quantity))
        object.__setattr__(self, "unit", Unit.from_dict(self.unit))
        object.__setattr__(self, "food", Food.from_dict(self.food))
        object.__setattr__(self, "referenced_recipe", RecipeRef.from_dict(self.referenced_recipe))

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            quantity=_get(data, "quantity"),
            unit=_get(data, "unit"),
            food=_get(data, "food"),
            note=_get(data, "note"),
            referenced_recipe=_get(data, "referenced_recipe", "referencedRecipe"),
        )


@dataclass(frozen=True)
class ParsedFields:
    quantity: Optional[str] = None
    unit: Optional[str] = None
    name: Optional[str] = None
    note: Optional[str] = None
    recipe_link: Optional[str] = None

    def as_dict(self):
        return asdict(self)
