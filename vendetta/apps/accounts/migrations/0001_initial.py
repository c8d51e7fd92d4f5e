from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SocialAccount",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "platform",
                    models.SmallIntegerField(
                        choices=[
                            (0, "Telegram"),
                            (1, "Instagram"),
                            (2, "TikTok"),
                            (3, "YouTube"),
                            (99, "Other"),
                        ],
                        db_index=True,
                    ),
                ),
                ("handle", models.CharField(max_length=128)),
                (
                    "external_id",
                    models.CharField(blank=True, max_length=128, null=True),
                ),
                ("rating", models.FloatField(default=1000.0)),
                ("reviews_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(
                        fields=("platform", "handle"),
                        name="uniq_account_platform_handle",
                    )
                ],
            },
        ),
    ]
