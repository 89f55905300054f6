import logging
from typing import List

from models import GenerationRequest, InstructionStep, Recipe, RecipeIngredient
from recipe_templates import (
    DEFAULT_EQUIPMENT,
    DEFAULT_SERVINGS,
    FALLBACK_AMOUNT,
    INGREDIENT_AMOUNTS,
    MAIN_INGREDIENT_NOTE,
    MAX_EQUIPMENT,
    MAX_INGREDIENTS,
    MIN_USER_INGREDIENTS,
    NUTRITION_HIGHLIGHTS,
    PANTRY_STAPLES,
    TIPS,
    get_cuisine_template,
)

logger = logging.getLogger(__name__)


def difficulty_for(time_available: int) -> str:
    if time_available <= 30:
        return "Easy"
    if time_available <= 60:
        return "Medium"
    return "Hard"


def split_time(time_available: int):
    """Split a time budget into (prep, cook) minutes. prep is capped at 15."""
    prep_time = min(15, int(time_available * 0.3))
    return prep_time, time_available - prep_time


def build_ingredients(ingredients: List[str]) -> List[RecipeIngredient]:
    result = []
    for index, name in enumerate(ingredients[:MAX_INGREDIENTS]):
        amount = INGREDIENT_AMOUNTS[index] if index < len(INGREDIENT_AMOUNTS) else FALLBACK_AMOUNT
        notes = MAIN_INGREDIENT_NOTE if index == 0 else None
        result.append(RecipeIngredient(name=name, amount=amount, notes=notes))

    if len(result) < MIN_USER_INGREDIENTS:
        result.extend(RecipeIngredient(name=name, amount=amount) for name, amount in PANTRY_STAPLES)
    return result


def build_instructions(main_ingredient: str, cuisine: str, prep_time: int, cook_time: int) -> List[InstructionStep]:
    texts_and_times = [
        (
            f"Prepare all ingredients by washing and chopping {main_ingredient}. "
            "Gather your equipment and organize your workspace.",
            prep_time,
        ),
        (
            "Heat olive oil in your cooking vessel and add aromatics like garlic, onions, "
            "or ginger to build the flavor base.",
            3,
        ),
        (
            f"Add your main ingredients and cook according to the {cuisine} style, "
            "stirring occasionally to prevent sticking.",
            int(cook_time * 0.6),
        ),
        (
            "Season with salt, pepper, and cuisine-specific spices. Taste and adjust flavors as needed.",
            2,
        ),
        (
            "Finish cooking and let rest briefly. Garnish appropriately and serve hot.",
            int(cook_time * 0.2),
        ),
    ]
    return [
        InstructionStep(step=number, instruction=text, time=minutes)
        for number, (text, minutes) in enumerate(texts_and_times, start=1)
    ]


def generate_template_recipe(request: GenerationRequest) -> Recipe:
    """
    Builds a recipe from fixed templates and simple arithmetic on the request.

    Deterministic: the same request always yields the same recipe. Unknown
    cuisine tags use the american template.
    """
    template = get_cuisine_template(request.cuisine)
    time_available = request.time_available
    prep_time, cook_time = split_time(time_available)
    main_ingredient = request.ingredients[0] if request.ingredients else MAIN_INGREDIENT_NOTE
    equipment = request.equipment[:MAX_EQUIPMENT] or list(DEFAULT_EQUIPMENT)

    logger.debug("Filling '%s' template for cuisine %r", template["name"], request.cuisine)

    return Recipe(
        name=template["name"],
        description=template["description"],
        prep_time=prep_time,
        cook_time=cook_time,
        total_time=time_available,
        servings=DEFAULT_SERVINGS,
        difficulty=difficulty_for(time_available),
        ingredients=build_ingredients(request.ingredients),
        equipment=equipment,
        instructions=build_instructions(main_ingredient, request.cuisine, prep_time, cook_time),
        tips=[tip.format(cuisine=request.cuisine) for tip in TIPS],
        nutrition_highlights=list(NUTRITION_HIGHLIGHTS),
    )
