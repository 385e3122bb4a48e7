from .face_urls import urlpatterns
