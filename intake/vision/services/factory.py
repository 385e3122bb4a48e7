from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .provider import BaseVisionProvider


@lru_cache(maxsize=1)
def get_vision_provider() -> BaseVisionProvider:
    """
    Provider vision unique par process (client HTTP construit une seule fois),
    injecté ensuite dans les services. cache_clear() si les settings changent.
    """
    name = settings.VISION_PROVIDER
    if name == "azure":
        if not settings.VISION_ENDPOINT or not settings.VISION_KEY:
            raise ImproperlyConfigured("VISION_ENDPOINT and VISION_KEY are required for the azure provider")
        from .provider_azure import AzureVisionProvider
        return AzureVisionProvider(
            endpoint=settings.VISION_ENDPOINT,
            key=settings.VISION_KEY,
            timeout_s=settings.VISION_TIMEOUT_S,
            ocr_language=settings.VISION_OCR_LANGUAGE,
        )
    if name == "mock":
        from .provider_mock import MockVisionProvider
        return MockVisionProvider()
    raise ImproperlyConfigured(f"Unknown VISION_PROVIDER: {name!r}")
