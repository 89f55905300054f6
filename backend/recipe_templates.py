# Fixed tables behind the templated recipe generator and the form's option lists
# Cuisine tags map to a default recipe name and description

DEFAULT_CUISINE = 'american'

CUISINE_TEMPLATES = {
    'italian': {
        'name': 'Rustic Italian Pasta',
        'description': 'A hearty pasta dish with fresh ingredients and authentic Italian flavors',
    },
    'mexican': {
        'name': 'Zesty Mexican Bowl',
        'description': 'A vibrant and flavorful Mexican-inspired dish with fresh ingredients',
    },
    'asian': {
        'name': 'Asian Fusion Stir-Fry',
        'description': 'A quick and delicious stir-fry with Asian-inspired flavors',
    },
    'american': {
        'name': 'Classic American Comfort Food',
        'description': 'A satisfying American-style dish perfect for any occasion',
    },
    'mediterranean': {
        'name': 'Mediterranean Delight',
        'description': 'A healthy and flavorful Mediterranean dish with fresh ingredients',
    },
    'indian': {
        'name': 'Aromatic Indian Curry',
        'description': 'A fragrant and spicy Indian dish with warming spices',
    },
    'french': {
        'name': 'French Bistro Classic',
        'description': 'An elegant French dish with sophisticated flavors',
    },
    'thai': {
        'name': 'Thai Street Food Special',
        'description': 'A bold and flavorful Thai dish with authentic ingredients',
    },
    'japanese': {
        'name': 'Japanese Home Cooking',
        'description': 'A simple yet refined Japanese dish with clean flavors',
    },
    'comfort-food': {
        'name': 'Ultimate Comfort Food',
        'description': 'A warming and satisfying comfort food dish',
    },
}

# Display labels for the cuisine select, in menu order
CUISINE_LABELS = {
    'italian': 'Italian',
    'mexican': 'Mexican',
    'asian': 'Asian',
    'american': 'American',
    'mediterranean': 'Mediterranean',
    'indian': 'Indian',
    'french': 'French',
    'thai': 'Thai',
    'japanese': 'Japanese',
    'comfort-food': 'Comfort Food',
}

# Minutes -> label for the time select
TIME_OPTIONS = {
    15: '15 minutes (Quick & Easy)',
    30: '30 minutes (Fast)',
    45: '45 minutes (Moderate)',
    60: '1 hour (Standard)',
    90: '1.5 hours (Elaborate)',
    120: '2+ hours (Slow Cook)',
}

EQUIPMENT_OPTIONS = [
    'Stovetop', 'Oven', 'Microwave', 'Air Fryer', 'Slow Cooker', 'Pressure Cooker',
    'Grill', 'Blender', 'Food Processor', 'Stand Mixer', 'Hand Mixer', 'Toaster',
]

DEFAULT_EQUIPMENT = ['Stovetop', 'Pan', 'Knife']
MAX_EQUIPMENT = 3

# Amount by ingredient position; everything past the list gets FALLBACK_AMOUNT
INGREDIENT_AMOUNTS = ['1 lb', '2 cups', '3 cloves', '1 cup']
FALLBACK_AMOUNT = '1/2 cup'
MAX_INGREDIENTS = 8
MAIN_INGREDIENT_NOTE = 'main ingredient'

# Appended when the user supplied fewer than MIN_USER_INGREDIENTS
MIN_USER_INGREDIENTS = 4
PANTRY_STAPLES = [
    ('olive oil', '2 tbsp'),
    ('salt', 'to taste'),
    ('black pepper', 'to taste'),
]

DEFAULT_SERVINGS = 4

TIPS = [
    'Taste and adjust seasoning throughout the cooking process',
    "Don't overcrowd the pan - cook in batches if necessary",
    'Fresh ingredients make a significant difference in flavor',
    'This {cuisine} dish pairs well with rice, bread, or a simple salad',
]

NUTRITION_HIGHLIGHTS = [
    'Rich in vitamins and minerals',
    'Good source of protein',
    'Contains healthy fats',
    'Balanced macronutrients',
]


def get_cuisine_template(cuisine):
    """Return the template for a cuisine tag, falling back to the american entry."""
    return CUISINE_TEMPLATES.get(cuisine, CUISINE_TEMPLATES[DEFAULT_CUISINE])


def get_form_options():
    """Option lists the form is built from."""
    return {
        "cuisines": [{"value": tag, "label": label} for tag, label in CUISINE_LABELS.items()],
        "times": [{"value": minutes, "label": label} for minutes, label in TIME_OPTIONS.items()],
        "equipment": list(EQUIPMENT_OPTIONS),
    }
