import argparse
from pathlib import Path

from dotenv import load_dotenv

from form_controller import DEFAULT_BASE_URL, RecipeForm, render_recipe
from recipe_templates import CUISINE_LABELS, EQUIPMENT_OPTIONS, TIME_OPTIONS


def build_form(args, session=None) -> RecipeForm:
    form = RecipeForm(base_url=args.url, session=session, on_alert=lambda message: print(message))
    for ingredient in args.ingredient:
        form.add_ingredient(ingredient)
    for item in args.equipment:
        form.toggle_equipment(item)
    if args.cuisine:
        form.set_cuisine(args.cuisine)
    if args.time:
        form.set_time_available(args.time)
    form.set_dietary_restrictions(args.dietary)
    return form


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Generate a recipe from the ingredients and equipment you have.")
    ap.add_argument("--ingredient", "-i", action="append", default=[], help="Available ingredient (repeatable)")
    ap.add_argument("--equipment", "-e", action="append", default=[], choices=EQUIPMENT_OPTIONS,
                    help="Available equipment (repeatable)")
    ap.add_argument("--cuisine", "-c", choices=list(CUISINE_LABELS), help="Cuisine type")
    ap.add_argument("--time", "-t", type=int, choices=list(TIME_OPTIONS), help="Time available in minutes")
    ap.add_argument("--dietary", default="", help="Dietary restrictions, e.g. vegetarian, gluten-free")
    ap.add_argument("--url", default=DEFAULT_BASE_URL, help="Recipe Generator API base URL")
    ap.add_argument("--out", help="Write the recipe as Markdown to this file")
    return ap.parse_args(argv)


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)
    form = build_form(args)

    recipe = form.generate()
    if recipe is None:
        raise SystemExit(1)

    md = render_recipe(recipe)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(md)
        print("Markdown:", out_path)
    else:
        print(md)
    print(f"Source: {form.recipe_source}")


if __name__ == "__main__":
    main()
