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
            name="News",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("content", models.TextField(verbose_name="Content")),
                ("summary", models.TextField(verbose_name="Summary")),
                ("category", models.CharField(db_index=True, max_length=50, verbose_name="Category")),
                ("image_url", models.URLField(blank=True, max_length=500, verbose_name="Image URL")),
                ("is_published", models.BooleanField(default=True, verbose_name="Published")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "author",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="news_articles",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "News article",
                "verbose_name_plural": "News",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
