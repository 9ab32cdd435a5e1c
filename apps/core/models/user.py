from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL) = Profile
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델 (프로필 겸용)
    - AUTH_USER_MODEL = core.User
    - college 는 가시성 판정의 affiliation. 자료 생성 시 Resource.college 로 복사된다.
    """

    name = models.CharField(max_length=100)
    college = models.CharField(max_length=200, db_index=True)
    course = models.CharField(max_length=100, blank=True, default="")
    branch = models.CharField(max_length=100, blank=True, default="")
    semester = models.CharField(max_length=20, blank=True, default="")
    profile_image_url = models.URLField(max_length=500, blank=True, null=True)

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username
