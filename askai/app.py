import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from askai import __version__
from askai.config import Config, Env, get_config
from askai.domain import services
from askai.domain.aopenai import default_providers
from askai.domain.errors import (
    AskAIError,
    ClientError,
    InvalidParameter,
    MissingParameter,
    UpstreamFailure,
)
from askai.domain.models import Providers
from askai.log import setup_logging


logger = logging.getLogger(__name__)


def aTextResponse(route: Callable[..., Awaitable[str]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> PlainTextResponse:
        return PlainTextResponse(await route(*args, **kwargs))

    return wrapper


def required_param(request: Request, name: str) -> str:
    value = request.query_params.get(name)
    if value is None or not value.strip():
        raise MissingParameter(name)
    return value


def optional_param(request: Request, name: str, default: str) -> str:
    value = request.query_params.get(name)
    if value is None or value == "":
        return default
    return value


def int_param(request: Request, name: str, default: int) -> int:
    value = request.query_params.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidParameter(name, value) from None


def get_providers(request: Request) -> Providers:
    return request.app.state.providers


@aTextResponse
async def ask_ai(request: Request) -> str:
    prompt = required_param(request, "prompt")
    providers = get_providers(request)
    return await services.ask(
        prompt,
        llm=providers.text,
        options=providers.profiles.default,
    )


@aTextResponse
async def ask_ai_options(request: Request) -> str:
    prompt = required_param(request, "prompt")
    providers = get_providers(request)
    return await services.ask_with_options(
        prompt,
        llm=providers.text,
        options=providers.profiles.options,
    )


async def generate_images(request: Request) -> JSONResponse:
    prompt = required_param(request, "prompt")
    n = int_param(request, "n", 1)
    width = int_param(request, "width", 1024)
    height = int_param(request, "height", 1024)
    providers = get_providers(request)
    urls = await services.generate_images(
        prompt,
        images=providers.images,
        model=providers.image_model,
        n=n,
        width=width,
        height=height,
    )
    return JSONResponse(urls)


@aTextResponse
async def recipe_creator(request: Request) -> str:
    ingredients = required_param(request, "ingredients")
    providers = get_providers(request)
    return await services.create_recipe(
        ingredients,
        llm=providers.text,
        options=providers.profiles.default,
        cuisine=optional_param(request, "cuisine", "any"),
        dietary_restrictions=optional_param(request, "dietaryRestrictions", ""),
    )


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": __version__})


def error_response(exc: AskAIError, status_code: int) -> JSONResponse:
    return JSONResponse(
        {"error": type(exc).__name__, "detail": str(exc)},
        status_code=status_code,
    )


async def client_error(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, ClientError)
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return error_response(exc, 400)


async def upstream_failure(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, UpstreamFailure)
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return error_response(exc, 502)


ROUTES = [
    Route("/ask-ai", ask_ai, methods=["GET"]),
    Route("/ask-ai-options", ask_ai_options, methods=["GET"]),
    Route("/generate-images", generate_images, methods=["GET"]),
    Route("/recipe-creator", recipe_creator, methods=["GET"]),
    Route("/health", health, methods=["GET"]),
]


def create_app(
    *,
    providers: Providers | None = None,
    config: Config | None = None,
) -> Starlette:
    config = get_config() if config is None else config

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        setup_logging(config.log_level)
        if app.state.providers is None:
            app.state.providers = default_providers()
        logger.info("askai %s ready (env=%s)", __version__, config.env.value)
        yield

    app = Starlette(
        debug=config.env == Env.local,
        routes=ROUTES,
        exception_handlers={
            ClientError: client_error,
            UpstreamFailure: upstream_failure,
        },
        lifespan=lifespan,
    )
    app.state.providers = providers
    return app


app = create_app()


def main() -> None:
    import uvicorn

    config = get_config()
    setup_logging(config.log_level)
    uvicorn.run(
        "askai.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
