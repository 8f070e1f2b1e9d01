CREATE_RECIPE_PROMPT = """
I want to create a recipe using the following ingredients: {ingredients}.
The cuisine type I prefer is {cuisine}.
Please consider the following dietary restrictions: {dietary_restrictions}.
Please provide me with a detailed recipe including title, list of ingredients, and cooking instructions.
""".strip()


class CreateRecipePrompt:
    def __init__(
        self,
        ingredients: str,
        *,
        cuisine: str = "any",
        dietary_restrictions: str = "",
        template: str | None = None,
    ) -> None:
        self.ingredients = ingredients
        self.cuisine = cuisine
        self.dietary_restrictions = dietary_restrictions
        self.template = CREATE_RECIPE_PROMPT if template is None else template

    def __str__(self) -> str:
        return self.template.format(
            ingredients=self.ingredients,
            cuisine=self.cuisine,
            dietary_restrictions=self.dietary_restrictions or "none",
        )
