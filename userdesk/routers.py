from rest_framework.routers import DefaultRouter

router = DefaultRouter()

# Fiches User (CRUD + extractuserdata)
from users.views.user import UserViewSet
router.register(r"users", UserViewSet, basename="users")
