from django.urls import path

from intake.face.views.validate import ValidatePhotoView

urlpatterns = [ path("validate-photo", ValidatePhotoView.as_view(), name="intake-validate-photo") ]
