from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Officer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("badge", models.PositiveIntegerField(unique=True, verbose_name="Badge Number")),
                ("first_name", models.CharField(max_length=191, verbose_name="First Name")),
                ("last_name", models.CharField(max_length=191, verbose_name="Last Name")),
                ("rank", models.CharField(max_length=191, verbose_name="Rank")),
                ("unit", models.CharField(max_length=191, verbose_name="Unit")),
                ("department", models.CharField(default="General", max_length=191, verbose_name="Department")),
                ("email", models.EmailField(blank=True, max_length=191, null=True, unique=True, verbose_name="Email Address")),
                ("phone", models.CharField(blank=True, default="", max_length=191, verbose_name="Phone")),
                (
                    "status",
                    models.CharField(
                        choices=[("available", "Available"), ("on_call", "On Call"), ("off_duty", "Off Duty")],
                        db_index=True,
                        default="available",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("active_cases", models.PositiveIntegerField(default=0, verbose_name="Active Cases")),
                ("total_cases", models.PositiveIntegerField(default=0, verbose_name="Total Cases")),
                ("hired_at", models.DateTimeField(blank=True, null=True, verbose_name="Hired At")),
            ],
            options={
                "verbose_name": "Officer",
                "verbose_name_plural": "Officers",
                "ordering": ["badge"],
            },
        ),
    ]
