import apps.shipments.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Shipment",
            fields=[
                ("id",            models.CharField(default=apps.shipments.models.generate_internal_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ("tracking_code", models.CharField(db_index=True, editable=False, max_length=20, unique=True)),
                ("status", models.CharField(
                    choices=[
                        ("processing",       "Processing"),
                        ("picked-up",        "Picked Up"),
                        ("in-transit",       "In Transit"),
                        ("out-for-delivery", "Out for Delivery"),
                        ("delivered",        "Delivered"),
                        ("failed-delivery",  "Failed Delivery"),
                        ("returned",         "Returned"),
                        ("cancelled",        "Cancelled"),
                    ],
                    default="processing",
                    max_length=20,
                )),
                ("customer_name",    models.CharField(max_length=120)),
                ("customer_email",   models.EmailField(max_length=254)),
                ("customer_phone",   models.CharField(max_length=40)),
                ("customer_address", models.CharField(max_length=255)),
                ("origin",           models.CharField(max_length=120)),
                ("destination",      models.CharField(max_length=120)),
                ("weight",           models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0.01)])),
                ("dimensions",       models.JSONField(blank=True, null=True)),
                ("service_type",     models.CharField(max_length=80)),
                ("description",      models.CharField(max_length=255)),
                ("declared_value",   models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ("estimated_delivery", models.DateTimeField()),
                ("actual_delivery",    models.DateTimeField(blank=True, null=True)),
                ("created_at",         models.DateTimeField(auto_now_add=True)),
                ("updated_at",         models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"],         name="shipment_status_idx"),
                    models.Index(fields=["created_at"],     name="shipment_created_idx"),
                    models.Index(fields=["customer_email"], name="shipment_email_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TrackingEvent",
            fields=[
                ("id",          models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status",      models.CharField(max_length=60)),
                ("description", models.CharField(max_length=255)),
                ("location",    models.CharField(max_length=120)),
                ("timestamp",   models.DateTimeField(default=django.utils.timezone.now)),
                ("completed",   models.BooleanField(default=False)),
                ("shipment", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="events",
                    to="shipments.shipment",
                )),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="DeletionRecord",
            fields=[
                ("id",            models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tracking_code", models.CharField(db_index=True, max_length=20)),
                ("customer_name", models.CharField(max_length=120)),
                ("status",        models.CharField(max_length=20)),
                ("origin",        models.CharField(max_length=120)),
                ("destination",   models.CharField(max_length=120)),
                ("reason",        models.TextField()),
                ("deleted_at",    models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={"ordering": ["-deleted_at"]},
        ),
    ]
