import dataclasses
from typing import Any, Protocol, Self

from askai.config import Config


@dataclasses.dataclass(frozen=True)
class ChatOptions:
    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Only the options that were set, so the provider defaults apply."""
        return {k: v for k, v in dataclasses.asdict(self).items() if v is not None}


@dataclasses.dataclass(frozen=True)
class ImageOptions:
    model: str
    n: int = 1
    width: int = 1024
    height: int = 1024

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"


@dataclasses.dataclass(frozen=True)
class ChatProfiles:
    default: ChatOptions
    options: ChatOptions

    @classmethod
    def from_config(cls, config: Config) -> Self:
        return cls(
            default=ChatOptions(model=config.chat_model),
            options=ChatOptions(
                model=config.options_chat_model,
                temperature=config.options_temperature,
                max_tokens=config.options_max_tokens,
            ),
        )


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str, options: ChatOptions) -> str:
        ...


class ImageGenerator(Protocol):
    async def generate_images(self, prompt: str, options: ImageOptions) -> list[str]:
        ...


@dataclasses.dataclass(frozen=True)
class Providers:
    """Everything a request needs, built once per process."""

    text: TextGenerator
    images: ImageGenerator
    profiles: ChatProfiles
    image_model: str
