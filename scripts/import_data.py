import json
from pathlib import Path

from recipebox import crud, schemas
from recipebox.db import SessionLocal, init_db
from recipebox.normalize import split_ingredients


def main():
    init_db()
    p = Path(__file__).resolve().parents[1] / 'data' / 'recipes.json'
    if not p.exists():
        print('data/recipes.json not found')
        return
    data = json.loads(p.read_text(encoding='utf-8'))
    db = SessionLocal()
    existing = {r.name for r in crud.get_recipes(db)}
    added = 0
    for r in data:
        name = r.get('name')
        if not name or name in existing:
            continue
        ingredients = r.get('ingredients', [])
        if isinstance(ingredients, str):
            ingredients = split_ingredients(ingredients)
        recipe = schemas.RecipeCreate(
            name=name,
            ingredients=ingredients,
            steps=r.get('steps'),
            image=r.get('image'),
        )
        crud.create_recipe(db, recipe)
        existing.add(name)
        added += 1
    db.close()
    print(f'Imported {added} recipes')


if __name__ == '__main__':
    main()
