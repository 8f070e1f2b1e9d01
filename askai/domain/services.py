import logging

from askai.domain.models import ChatOptions, ImageGenerator, ImageOptions, TextGenerator
from askai.domain.prompts import CreateRecipePrompt


logger = logging.getLogger(__name__)


async def ask(prompt: str, *, llm: TextGenerator, options: ChatOptions) -> str:
    logger.info("ask: %d chars, model=%s", len(prompt), options.model)
    return await llm.generate_text(prompt, options)


async def ask_with_options(
    prompt: str,
    *,
    llm: TextGenerator,
    options: ChatOptions,
) -> str:
    """Same call path as `ask`; the caller passes the alternate profile."""
    logger.info(
        "ask with options: %d chars, model=%s, temperature=%s",
        len(prompt),
        options.model,
        options.temperature,
    )
    return await llm.generate_text(prompt, options)


async def generate_images(
    prompt: str,
    *,
    images: ImageGenerator,
    model: str,
    n: int = 1,
    width: int = 1024,
    height: int = 1024,
) -> list[str]:
    options = ImageOptions(model=model, n=n, width=width, height=height)
    logger.info("generate images: n=%d size=%s model=%s", n, options.size, model)
    return await images.generate_images(prompt, options)


async def create_recipe(
    ingredients: str,
    *,
    llm: TextGenerator,
    options: ChatOptions,
    cuisine: str = "any",
    dietary_restrictions: str = "",
) -> str:
    prompt = CreateRecipePrompt(
        ingredients,
        cuisine=cuisine,
        dietary_restrictions=dietary_restrictions,
    )
    logger.info("create recipe: cuisine=%s", cuisine)
    return await ask(str(prompt), llm=llm, options=options)
