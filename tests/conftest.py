"""Configuração do pytest para o square_ox."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports sem instalação
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from square_ox.client import SquareClient  # noqa: E402
from square_ox.config.settings import get_square_settings  # noqa: E402


@pytest.fixture
def client() -> SquareClient:
    """Cliente em sandbox com token fictício."""
    return SquareClient("sandbox-token")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_square_settings.cache_clear()
    yield
    get_square_settings.cache_clear()
