import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def memory_only_settings():
    """Settings whose backend chain is a single in-memory backend."""
    return Settings(i18n=I18nSettings(I18N_BACKENDS=["memory"]))


@pytest.fixture
def chain_settings():
    """Settings for a database -> memory chain in strict mode."""
    return Settings(
        i18n=I18nSettings(
            I18N_BACKENDS=["database", "memory"],
            I18N_RAISE_ON_MISSING=True,
        )
    )
