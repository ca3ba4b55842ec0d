"""Fixtures compartilhadas dos testes."""

import pytest

from padroes.factory import VehicleFactory, reset_default_factory


@pytest.fixture(autouse=True)
def clean_default_factory(monkeypatch):
    """Garante uma factory padrão nova em cada teste."""
    monkeypatch.delenv("PADROES_DEFAULT_DISCRIMINANTS", raising=False)
    reset_default_factory()
    yield
    reset_default_factory()


@pytest.fixture
def factory():
    return VehicleFactory()
