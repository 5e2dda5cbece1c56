from django.db import migrations

import library.models


class Migration(migrations.Migration):

    dependencies = [
        ("library", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="track",
            name="file_size_bytes",
            field=library.models.UnsignedBigIntegerField(),
        ),
    ]
