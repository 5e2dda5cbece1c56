import django.core.validators
from django.db import migrations, models

import library.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Favorite",
            fields=[
                ("id", models.CharField(default=library.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("user_id", models.CharField(db_index=True, max_length=255)),
                ("track_id", models.CharField(db_index=True, max_length=64)),
                ("date_added", models.PositiveBigIntegerField(default=library.models.current_timestamp)),
            ],
            options={
                "ordering": ["date_added", "id"],
            },
        ),
        migrations.CreateModel(
            name="Playlist",
            fields=[
                ("id", models.CharField(default=library.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("owner_id", models.CharField(db_index=True, max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("date_created", models.PositiveBigIntegerField(default=library.models.current_timestamp)),
                ("is_public", models.BooleanField(default=False)),
            ],
        ),
        migrations.CreateModel(
            name="PlaylistEntry",
            fields=[
                ("id", models.CharField(default=library.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("playlist_id", models.CharField(db_index=True, max_length=64)),
                ("track_id", models.CharField(db_index=True, max_length=64)),
                ("position", models.PositiveIntegerField()),
                ("date_added", models.PositiveBigIntegerField(default=library.models.current_timestamp)),
            ],
            options={
                "verbose_name_plural": "playlist entries",
                "ordering": ["playlist_id", "position"],
            },
        ),
        migrations.CreateModel(
            name="Track",
            fields=[
                ("id", models.CharField(default=library.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("artist", models.CharField(max_length=255)),
                ("album", models.CharField(max_length=255)),
                ("genre", models.CharField(blank=True, max_length=100, null=True)),
                ("year", models.PositiveIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(65535)])),
                ("duration_seconds", models.PositiveIntegerField()),
                ("file_path", models.CharField(max_length=1024)),
                ("file_size_bytes", models.PositiveBigIntegerField()),
                ("date_added", models.PositiveBigIntegerField(default=library.models.current_timestamp)),
            ],
            options={
                "ordering": ["date_added", "id"],
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150)),
                ("date_joined", models.PositiveBigIntegerField(default=library.models.current_timestamp)),
            ],
        ),
        migrations.AddConstraint(
            model_name="favorite",
            constraint=models.UniqueConstraint(fields=("user_id", "track_id"), name="unique_user_favorite"),
        ),
        migrations.AddConstraint(
            model_name="playlistentry",
            constraint=models.UniqueConstraint(fields=("playlist_id", "position"), name="unique_playlist_position"),
        ),
    ]
