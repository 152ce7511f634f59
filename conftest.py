# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: изолированная конфигурация и пара точек.
"""

import pytest

from pixelspace.model import Point
from pixelspace.utils.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Каждый тест работает в своём каталоге с чистым Config."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path
    Config.reset()


@pytest.fixture
def point() -> Point:
    return Point(1.0, 2.0, 3.0, index=7)


@pytest.fixture
def other_point() -> Point:
    return Point(-4.0, 0.5, 2.0, index=11)
