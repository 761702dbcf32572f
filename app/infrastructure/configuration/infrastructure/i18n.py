"""Translation (i18n) infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation backend chain configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a caller does not pass one (default: en)
        I18N_TRANSLATIONS_DIR: Directory of YAML translation files
            (default: auto-discover app/locales)
        I18N_BACKENDS: JSON list of backend names in chain order
            (default: ["database", "memory"])
        I18N_RAISE_ON_MISSING: Raise instead of returning the
            "translation missing" placeholder (default: false)
        I18N_DYNAMODB_TABLE: DynamoDB table holding translation rows
            (default: i18n_translations)

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.i18n.I18N_RAISE_ON_MISSING:
            # Strict lookups...
        ```
    """

    I18N_DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    I18N_TRANSLATIONS_DIR: str | None = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    I18N_BACKENDS: list[str] = Field(
        default=["database", "memory"], alias="I18N_BACKENDS"
    )
    I18N_RAISE_ON_MISSING: bool = Field(default=False, alias="I18N_RAISE_ON_MISSING")
    I18N_DYNAMODB_TABLE: str = Field(
        default="i18n_translations", alias="I18N_DYNAMODB_TABLE"
    )

    @field_validator("I18N_BACKENDS")
    @classmethod
    def validate_backends(cls, value: list[str]) -> list[str]:
        """Normalize backend names and reject an empty chain."""
        names = [name.strip().lower() for name in value if name and name.strip()]
        if not names:
            raise ValueError("I18N_BACKENDS must name at least one backend")
        return names
