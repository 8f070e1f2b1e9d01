"""OpenAI backed providers.

The SDK client is built lazily, once per process, from `Config`. Retries are
switched off and every call is bounded by `Config.request_timeout`.
"""
import functools
import logging

import openai

from askai.config import Config, get_config
from askai.domain.errors import UpstreamFailure
from askai.domain.models import ChatOptions, ChatProfiles, ImageOptions, Providers


logger = logging.getLogger(__name__)


def openai_client_factory(config: Config | None = None) -> openai.AsyncClient:
    config = get_config() if config is None else config
    return openai.AsyncClient(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        timeout=config.request_timeout,
        max_retries=0,
    )


class OpenAIChat:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        default_model: str = "gpt-4o-mini",
    ) -> None:
        self.openai_client = (
            openai_client_factory() if openai_client is None else openai_client
        )
        self.default_model = default_model

    async def generate_text(self, prompt: str, options: ChatOptions) -> str:
        kwargs = options.to_dict()
        kwargs.setdefault("model", self.default_model)
        logger.debug("chat completion model=%s", kwargs["model"])
        try:
            resp = await self.openai_client.chat.completions.create(
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except openai.OpenAIError as e:
            raise UpstreamFailure(f"Text generation failed: {e}") from e

        if not resp.choices:
            raise UpstreamFailure("Text generation returned no choices.")
        return resp.choices[0].message.content or ""


class OpenAIImages:
    def __init__(self, openai_client: openai.AsyncClient | None = None) -> None:
        self.openai_client = (
            openai_client_factory() if openai_client is None else openai_client
        )

    async def generate_images(self, prompt: str, options: ImageOptions) -> list[str]:
        logger.debug("image generation model=%s size=%s", options.model, options.size)
        try:
            resp = await self.openai_client.images.generate(
                prompt=prompt,
                model=options.model,
                n=options.n,
                size=options.size,
                response_format="url",
            )
        except openai.OpenAIError as e:
            raise UpstreamFailure(f"Image generation failed: {e}") from e

        urls: list[str] = []
        for i, image in enumerate(resp.data or []):
            if not image.url:
                raise UpstreamFailure(f"Image result {i} has no url.")
            urls.append(image.url)
        return urls


@functools.cache
def default_providers() -> Providers:
    config = get_config()
    client = openai_client_factory(config)
    return Providers(
        text=OpenAIChat(client, default_model=config.chat_model),
        images=OpenAIImages(client),
        profiles=ChatProfiles.from_config(config),
        image_model=config.image_model,
    )
