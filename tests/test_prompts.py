import pytest

from askai.domain.prompts import CreateRecipePrompt


def test_recipe_prompt_defaults() -> None:
    got = str(CreateRecipePrompt("chicken, rice"))
    assert got == (
        "I want to create a recipe using the following ingredients: chicken, rice.\n"
        "The cuisine type I prefer is any.\n"
        "Please consider the following dietary restrictions: none.\n"
        "Please provide me with a detailed recipe including title, list of "
        "ingredients, and cooking instructions."
    )


@pytest.mark.parametrize(
    "restrictions,expected",
    (
        ("", "none"),
        ("gluten free", "gluten free"),
    ),
)
def test_recipe_prompt_restrictions(restrictions: str, expected: str) -> None:
    got = str(CreateRecipePrompt("beans", dietary_restrictions=restrictions))
    assert f"dietary restrictions: {expected}." in got


def test_recipe_prompt_custom_template() -> None:
    prompt = CreateRecipePrompt(
        "beans",
        cuisine="mexican",
        template="{cuisine} {ingredients} {dietary_restrictions}",
    )
    assert str(prompt) == "mexican beans none"
