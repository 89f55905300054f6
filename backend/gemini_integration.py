import logging
from typing import Optional

import google.generativeai as genai
from pydantic import ValidationError

from config import Settings
from models import GenerationRequest, Recipe

logger = logging.getLogger(__name__)

NO_EQUIPMENT_TEXT = "basic kitchen tools"

# Gemini response schema mirroring models.Recipe (wire names)
RECIPE_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING", "description": "Creative and appetizing recipe name"},
        "description": {"type": "STRING", "description": "Brief, enticing description of the dish"},
        "prepTime": {"type": "INTEGER", "description": "Preparation time in minutes"},
        "cookTime": {"type": "INTEGER", "description": "Cooking time in minutes"},
        "totalTime": {"type": "INTEGER", "description": "Total time in minutes"},
        "servings": {"type": "INTEGER", "description": "Number of servings"},
        "difficulty": {
            "type": "STRING",
            "format": "enum",
            "enum": ["Easy", "Medium", "Hard"],
            "description": "Difficulty level",
        },
        "ingredients": {
            "type": "ARRAY",
            "description": "List of ingredients with amounts",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING", "description": "Ingredient name"},
                    "amount": {"type": "STRING", "description": "Amount needed (e.g., 2 cups, 1 lb)"},
                    "notes": {"type": "STRING", "description": "Optional preparation notes"},
                },
                "required": ["name", "amount"],
            },
        },
        "equipment": {
            "type": "ARRAY",
            "description": "Kitchen equipment needed from the available list",
            "items": {"type": "STRING"},
        },
        "instructions": {
            "type": "ARRAY",
            "description": "Step-by-step cooking instructions",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "step": {"type": "INTEGER", "description": "Step number"},
                    "instruction": {"type": "STRING", "description": "Detailed instruction for this step"},
                    "time": {"type": "INTEGER", "description": "Time for this step in minutes if applicable"},
                },
                "required": ["step", "instruction"],
            },
        },
        "tips": {
            "type": "ARRAY",
            "description": "Helpful cooking tips and variations",
            "items": {"type": "STRING"},
        },
        "nutritionHighlights": {
            "type": "ARRAY",
            "description": "Key nutritional benefits or highlights",
            "items": {"type": "STRING"},
        },
    },
    "required": [
        "name", "description", "prepTime", "cookTime", "totalTime", "servings", "difficulty",
        "ingredients", "equipment", "instructions", "tips", "nutritionHighlights",
    ],
}


def build_recipe_prompt(request: GenerationRequest) -> str:
    """Builds the natural-language instruction sent to Gemini for one request."""
    cuisine = request.cuisine
    time_limit = request.time_available
    equipment_list = ", ".join(request.equipment) if request.equipment else NO_EQUIPMENT_TEXT
    dietary_text = ""
    if request.dietary_restrictions and request.dietary_restrictions.strip():
        dietary_text = (
            "The recipe should accommodate these dietary restrictions: "
            f"{request.dietary_restrictions.strip()}."
        )

    lines = [
        f"Create a delicious {cuisine} recipe using these available ingredients: {', '.join(request.ingredients)}.",
        "",
        f"Available equipment: {equipment_list}",
        f"Maximum total cooking time: {time_limit} minutes",
    ]
    if dietary_text:
        lines.append(dietary_text)
    lines += [
        "",
        "Requirements:",
        "- Use as many of the provided ingredients as possible",
        f"- Stay within the time limit of {time_limit} minutes",
        "- Only use equipment from the available list",
        "- Make the recipe practical and delicious",
        "- Include helpful tips and cooking techniques",
        f"- Ensure the recipe fits the {cuisine} cuisine style",
        "- Provide realistic cooking times for each step",
        "- Include nutritional highlights of the dish",
        "",
        "If some ingredients don't work well together or with the cuisine type, prioritize the most "
        "important ones and suggest the best combination. Be creative but practical.",
    ]
    return "\n".join(lines)


async def generate_recipe_with_gemini(request: GenerationRequest, settings: Settings) -> Optional[Recipe]:
    """
    Asks Gemini for a recipe constrained to the Recipe schema.

    Args:
        request (GenerationRequest): The user's ingredients, equipment and preferences.
        settings (Settings): Supplies the API key, model name and request timeout.

    Returns:
        Recipe: The provider's recipe, or None if the call failed or the
        output did not match the schema.
    """
    try:
        genai.configure(api_key=settings.google_api_key)

        generation_config = {
            "response_mime_type": "application/json",
            "response_schema": RECIPE_RESPONSE_SCHEMA,
        }
        model = genai.GenerativeModel(
            model_name=settings.gemini_model,
            generation_config=generation_config,
        )
        response = await model.generate_content_async(
            build_recipe_prompt(request),
            request_options={"timeout": settings.gemini_timeout},
        )
        logger.debug("Gemini API response: %s", response.text)
        return Recipe.model_validate_json(response.text)

    except ValidationError as e:
        logger.warning("Gemini returned a recipe that does not match the schema: %s", e)
        return None
    except Exception as e:
        logger.warning("Gemini recipe generation failed: %s", e)
        return None
