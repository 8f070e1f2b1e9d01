import pytest
from starlette.testclient import TestClient

from askai.app import create_app
from askai.config import Config, Env
from askai.domain.models import ChatProfiles, Providers

from fakes import FakeImages, FakeText


@pytest.fixture
def config() -> Config:
    return Config(env=Env.prod)


@pytest.fixture
def fake_text() -> FakeText:
    return FakeText()


@pytest.fixture
def fake_images() -> FakeImages:
    return FakeImages()


@pytest.fixture
def providers(config: Config, fake_text: FakeText, fake_images: FakeImages) -> Providers:
    return Providers(
        text=fake_text,
        images=fake_images,
        profiles=ChatProfiles.from_config(config),
        image_model=config.image_model,
    )


@pytest.fixture
def client(providers: Providers, config: Config) -> TestClient:
    return TestClient(create_app(providers=providers, config=config))
