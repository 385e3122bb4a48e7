from django.urls import path

from intake.extraction.views.extract import ExtractUserDataView

urlpatterns = [ path("extract-user-data", ExtractUserDataView.as_view(), name="intake-extract-user-data") ]
