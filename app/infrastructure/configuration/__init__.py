"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation backend chain settings class
    AwsSettings: AWS integration settings class

Example:
    ```python
    from infrastructure.configuration import settings

    default_locale = settings.i18n.I18N_DEFAULT_LOCALE
    aws_region = settings.aws.AWS_REGION
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.integrations.aws import AwsSettings

__all__ = ["Settings", "settings", "I18nSettings", "AwsSettings"]
