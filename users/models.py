from django.db import models


class User(models.Model):
    """
    Fiche profil.
    - photo: URL du blob (la photo elle-même vit dans le storage, jamais en base)
    """
    first_name = models.CharField(max_length=200)
    last_name = models.CharField(max_length=200)
    photo = models.CharField(max_length=255, blank=True, null=True)
    description = models.CharField(max_length=500, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
