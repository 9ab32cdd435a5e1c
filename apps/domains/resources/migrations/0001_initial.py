# PATH: apps/domains/resources/migrations/0001_initial.py

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Resource",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("subject", models.CharField(max_length=255)),
                ("semester", models.CharField(max_length=20)),
                ("course", models.CharField(max_length=100)),
                ("branch", models.CharField(default="General", max_length=100)),
                ("resource_type", models.CharField(max_length=50)),
                ("year", models.CharField(max_length=10)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "privacy",
                    models.CharField(
                        choices=[("public", "Public"), ("private", "Private")],
                        max_length=10,
                    ),
                ),
                ("file_url", models.CharField(blank=True, max_length=500, null=True)),
                ("drive_link", models.URLField(blank=True, max_length=500, null=True)),
                ("college", models.CharField(max_length=200)),
                ("average_rating", models.DecimalField(decimal_places=1, default=0, max_digits=3)),
                ("total_ratings", models.PositiveIntegerField(default=0)),
                ("is_exam_important", models.BooleanField(default=False)),
                (
                    "uploader",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="resources",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["course", "branch", "semester"], name="resource_course_branch_sem_idx"),
                    models.Index(fields=["privacy"], name="resource_privacy_idx"),
                ],
            },
        ),
    ]
