from django.urls import include, path

urlpatterns = [
    path("", include("intake.extraction.urls")),
    path("", include("intake.face.urls")),
]
