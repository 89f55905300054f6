from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class GenerationRequest(_WireModel):
    ingredients: List[str]
    equipment: List[str] = []
    cuisine: str
    time_available: int = Field(alias="timeAvailable")
    dietary_restrictions: Optional[str] = Field(default=None, alias="dietaryRestrictions")


class RecipeIngredient(_WireModel):
    name: str = Field(description="Ingredient name")
    amount: str = Field(description="Amount needed (e.g., 2 cups, 1 lb)")
    notes: Optional[str] = Field(default=None, description="Optional preparation notes")


class InstructionStep(_WireModel):
    step: int = Field(description="Step number")
    instruction: str = Field(description="Detailed instruction for this step")
    time: Optional[int] = Field(default=None, description="Time for this step in minutes if applicable")


class Recipe(_WireModel):
    name: str = Field(description="Creative and appetizing recipe name")
    description: str = Field(description="Brief, enticing description of the dish")
    prep_time: int = Field(alias="prepTime", description="Preparation time in minutes")
    cook_time: int = Field(alias="cookTime", description="Cooking time in minutes")
    total_time: int = Field(alias="totalTime", description="Total time in minutes")
    servings: int = Field(description="Number of servings")
    difficulty: Literal["Easy", "Medium", "Hard"] = Field(description="Difficulty level")
    ingredients: List[RecipeIngredient] = Field(description="List of ingredients with amounts")
    equipment: List[str] = Field(description="Kitchen equipment needed from the available list")
    instructions: List[InstructionStep] = Field(description="Step-by-step cooking instructions")
    tips: List[str] = Field(description="Helpful cooking tips and variations")
    nutrition_highlights: List[str] = Field(
        alias="nutritionHighlights", description="Key nutritional benefits or highlights"
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
