import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Case",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("case_id", models.CharField(max_length=20, unique=True, verbose_name="Case ID")),
                ("type", models.CharField(db_index=True, max_length=191, verbose_name="Case Type")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("location", models.CharField(max_length=255, verbose_name="Location")),
                ("reporter", models.CharField(blank=True, default="", max_length=191, verbose_name="Reporter")),
                (
                    "status",
                    models.CharField(
                        choices=[("open", "Open"), ("investigation", "Under Investigation"), ("resolved", "Resolved")],
                        db_index=True,
                        default="open",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                (
                    "priority",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        db_index=True,
                        default="medium",
                        max_length=20,
                        verbose_name="Priority",
                    ),
                ),
                ("reported", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Reported At")),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="created_cases",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created By",
                    ),
                ),
                (
                    "officer",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="assigned_cases",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Assigned Officer",
                    ),
                ),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "ordering": ["-reported"],
            },
        ),
    ]
