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
            name="SequenceCounter",
            fields=[
                ("name", models.CharField(max_length=50, primary_key=True, serialize=False)),
                ("value", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Sequence Counter",
                "verbose_name_plural": "Sequence Counters",
            },
        ),
        migrations.CreateModel(
            name="ActivityLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("message", models.TextField(blank=True, default="", verbose_name="Message")),
                ("action", models.CharField(blank=True, default="", max_length=255, verbose_name="Action")),
                ("metadata", models.JSONField(blank=True, null=True, verbose_name="Metadata")),
                ("timestamp", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Timestamp")),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="activity_logs",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Actor",
                    ),
                ),
            ],
            options={
                "verbose_name": "Activity Log Entry",
                "verbose_name_plural": "Activity Log",
                "ordering": ["-timestamp", "-id"],
            },
        ),
    ]
