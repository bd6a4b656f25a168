import logging

import pytest

from jsonmapper.core.models.config import MapperConfig
from jsonmapper.infra.pydantic_mapper import ObjectMapper


@pytest.fixture
def mapper():
    return ObjectMapper()


@pytest.fixture
def strict_mapper():
    return ObjectMapper(MapperConfig(strict=True))


@pytest.fixture
def facade_logs(caplog):
    caplog.set_level(logging.WARNING, logger="jsonmapper.json_utils")
    return caplog
