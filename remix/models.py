from typing import Any, Self


MAX_INGREDIENTS = 20


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class Ingredient:
    def __init__(self, name: str, measure: str = "") -> None:
        self.name = name
        self.measure = measure

    def __repr__(self) -> str:
        return f"<Ingredient(name={self.name}, measure={self.measure})>"

    def __str__(self) -> str:
        return f"{self.measure} {self.name}" if self.measure else self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.measure) == (other.name, other.measure)


class Recipe:
    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Self:
        """Build from a TheMealDB meal record.

        Ingredients come from the parallel `strIngredientN` / `strMeasureN`
        fields, N in 1..20. Blank ingredients are skipped, blank measures
        are dropped.
        """
        ingredients: list[Ingredient] = []
        for i in range(1, MAX_INGREDIENTS + 1):
            name = _text(record.get(f"strIngredient{i}"))
            if not name:
                continue
            ingredients.append(Ingredient(name, _text(record.get(f"strMeasure{i}"))))
        return cls(
            id=_text(record.get("idMeal")),
            name=_text(record.get("strMeal")),
            image=_text(record.get("strMealThumb")),
            instructions=_text(record.get("strInstructions")),
            ingredients=ingredients,
            record=record,
        )

    def __init__(
        self,
        *,
        id: str,
        name: str,
        image: str = "",
        instructions: str = "",
        ingredients: list[Ingredient] | None = None,
        record: dict[str, Any] | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.image = image
        self.instructions = instructions
        self.ingredients = [] if ingredients is None else ingredients
        self.record = {} if record is None else record

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.name})>"

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return dict(self.record)
