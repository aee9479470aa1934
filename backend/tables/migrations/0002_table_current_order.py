import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("tables", "0001_initial"),
        ("orders", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="table",
            name="current_order",
            field=models.OneToOneField(
                blank=True,
                help_text="The order currently holding this table.",
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="occupied_table",
                to="orders.order",
            ),
        ),
    ]
