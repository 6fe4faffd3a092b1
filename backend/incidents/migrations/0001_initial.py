import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Incident",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("type", models.CharField(max_length=191, verbose_name="Incident Type")),
                ("description", models.TextField(verbose_name="Description")),
                ("address", models.CharField(max_length=255, verbose_name="Address")),
                (
                    "coordinates",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Free-form 'lat,lng' pair.",
                        max_length=191,
                        verbose_name="Coordinates",
                    ),
                ),
                ("reporter", models.CharField(blank=True, default="", max_length=191, verbose_name="Reporter")),
                (
                    "priority",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        db_index=True,
                        default="low",
                        max_length=20,
                        verbose_name="Priority",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("responding", "Responding"), ("resolved", "Resolved")],
                        db_index=True,
                        default="active",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("timestamp", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Timestamp")),
                (
                    "case",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="incidents",
                        to="cases.case",
                        verbose_name="Case",
                    ),
                ),
            ],
            options={
                "verbose_name": "Incident",
                "verbose_name_plural": "Incidents",
                "ordering": ["-timestamp"],
            },
        ),
    ]
