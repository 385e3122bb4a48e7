from .extract_urls import urlpatterns
