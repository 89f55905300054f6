import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

import gemini_integration
from config import Settings, get_settings
from models import GenerationRequest, Recipe
from recipe_templates import get_form_options
from template_generator import generate_template_recipe

logger = logging.getLogger(__name__)

router = APIRouter()

GENERATION_ERROR = "Failed to generate recipe. Please try again."
SOURCE_PROVIDER = "provider"
SOURCE_TEMPLATE = "template"


async def generate_recipe(request: GenerationRequest, settings: Settings):
    """
    Produces one recipe for a request and reports which path made it.

    Gemini is tried only when an API key is configured; a missing key or a
    failed call ends in the templated recipe, returned after the simulated
    delay.

    Returns:
        tuple: (Recipe, source) where source is "provider" or "template".
    """
    if settings.has_api_key:
        recipe = await gemini_integration.generate_recipe_with_gemini(request, settings)
        if recipe is not None:
            logger.info("Generated '%s' with Gemini", recipe.name)
            return recipe, SOURCE_PROVIDER
        logger.warning("AI generation failed, falling back to template recipe")
    else:
        logger.info("No API key available, using template recipe generation")

    recipe = generate_template_recipe(request)
    await asyncio.sleep(settings.fallback_delay)
    return recipe, SOURCE_TEMPLATE


@router.post("/generate-recipe")
async def generate(request: Request):
    """
    Expected body:
    {
        "ingredients": ["chicken", "rice", "garlic"],
        "equipment": ["Stovetop"],
        "cuisine": "asian",
        "timeAvailable": 30,
        "dietaryRestrictions": "gluten-free"
    }
    """
    try:
        payload = await request.json()
        generation_request = GenerationRequest.model_validate(payload)
        recipe, source = await generate_recipe(generation_request, get_settings())
        return {"recipe": recipe.to_wire(), "source": source}
    except Exception:
        logger.exception("Error in recipe generation")
        return JSONResponse(status_code=500, content={"error": GENERATION_ERROR})


@router.get("/options")
def options():
    return get_form_options()
