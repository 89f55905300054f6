import logging
from typing import Callable, List, Optional

import requests

from models import GenerationRequest, Recipe
from recipe_templates import CUISINE_LABELS, EQUIPMENT_OPTIONS, TIME_OPTIONS

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
GENERATE_PATH = "/api/generate-recipe"
REQUEST_TIMEOUT = 120

VALIDATION_MESSAGE = "Please fill in all required fields"
FAILURE_MESSAGE = "Failed to generate recipe. Please try again."


def _log_alert(message: str) -> None:
    logger.warning(message)


class RecipeForm:
    """State behind the recipe form: selections, busy flag and the last recipe."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session=None,
        on_alert: Callable[[str], None] = _log_alert,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.on_alert = on_alert

        self.ingredients: List[str] = []
        self.equipment: List[str] = []
        self.cuisine: Optional[str] = None
        self.time_available: Optional[int] = None
        self.dietary_restrictions: str = ""

        self.recipe: Optional[Recipe] = None
        self.recipe_source: Optional[str] = None
        self.is_generating = False
        self.last_alert: Optional[str] = None

    def add_ingredient(self, text: str) -> bool:
        name = (text or "").strip()
        if not name or name in self.ingredients:
            return False
        self.ingredients.append(name)
        return True

    def remove_ingredient(self, name: str) -> None:
        self.ingredients = [i for i in self.ingredients if i != name]

    def toggle_equipment(self, label: str) -> bool:
        """Flip one equipment checkbox. Returns True if the label is now selected."""
        if label not in EQUIPMENT_OPTIONS:
            raise ValueError(f"Unknown equipment: {label!r}")
        if label in self.equipment:
            self.equipment.remove(label)
            return False
        self.equipment.append(label)
        return True

    def set_cuisine(self, cuisine: str) -> None:
        if cuisine not in CUISINE_LABELS:
            raise ValueError(f"Unknown cuisine: {cuisine!r}")
        self.cuisine = cuisine

    def set_time_available(self, minutes) -> None:
        # select widgets hand back strings
        minutes = int(minutes)
        if minutes not in TIME_OPTIONS:
            raise ValueError(f"Unsupported time budget: {minutes}")
        self.time_available = minutes

    def set_dietary_restrictions(self, text: str) -> None:
        self.dietary_restrictions = text or ""

    @property
    def is_complete(self) -> bool:
        return bool(self.ingredients) and bool(self.cuisine) and bool(self.time_available)

    @property
    def can_generate(self) -> bool:
        return self.is_complete and not self.is_generating

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            ingredients=list(self.ingredients),
            equipment=list(self.equipment),
            cuisine=self.cuisine,
            time_available=self.time_available,
            dietary_restrictions=self.dietary_restrictions,
        )

    def _alert(self, message: str) -> None:
        self.last_alert = message
        self.on_alert(message)

    def generate(self) -> Optional[Recipe]:
        """
        Sends the form to the server and stores the returned recipe.

        Returns the new recipe, or None when nothing was sent (busy or
        incomplete form) or the request failed. A failure keeps the
        previously displayed recipe.
        """
        if self.is_generating:
            return None
        if not self.is_complete:
            self._alert(VALIDATION_MESSAGE)
            return None

        self.is_generating = True
        try:
            response = self.session.post(
                self.base_url + GENERATE_PATH,
                json=self.to_request().model_dump(by_alias=True),
                timeout=REQUEST_TIMEOUT,
            )
            if not 200 <= response.status_code < 300:
                raise RuntimeError(f"Server answered {response.status_code}")
            data = response.json()
            recipe = Recipe.model_validate(data["recipe"])
        except Exception as e:
            logger.error("Error generating recipe: %s", e)
            self._alert(FAILURE_MESSAGE)
            return None
        finally:
            self.is_generating = False

        self.recipe = recipe
        self.recipe_source = data.get("source")
        return recipe


def render_recipe(recipe: Recipe) -> str:
    """Markdown rendering of a recipe."""
    md = [f"# {recipe.name}", "", recipe.description, ""]
    md.append(f"{recipe.total_time} min total | {recipe.difficulty} | {recipe.servings} servings")
    md.append("")

    md.append("## Ingredients")
    for ing in recipe.ingredients:
        line = f"- {ing.name}: {ing.amount}"
        if ing.notes:
            line += f" ({ing.notes})"
        md.append(line)
    md.append("")

    if recipe.equipment:
        md.append("## Equipment Needed")
        md.extend(f"- {item}" for item in recipe.equipment)
        md.append("")

    md.append("## Instructions")
    for step in recipe.instructions:
        line = f"{step.step}. {step.instruction}"
        if step.time:
            line += f" ({step.time} minutes)"
        md.append(line)
    md.append("")

    if recipe.tips:
        md.append("## Chef's Tips")
        md.extend(f"- {tip}" for tip in recipe.tips)
        md.append("")

    if recipe.nutrition_highlights:
        md.append("## Nutrition Highlights")
        md.extend(f"- {item}" for item in recipe.nutrition_highlights)
        md.append("")

    return "\n".join(md).strip() + "\n"
