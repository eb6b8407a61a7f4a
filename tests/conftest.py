"""Configuração do pytest para o projeto line-preset-bot."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_gcs_settings,
    get_line_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por lru_cache; cada teste lê o ambiente de novo."""
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_gcs_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_line_settings.cache_clear()
    get_gcs_settings.cache_clear()
