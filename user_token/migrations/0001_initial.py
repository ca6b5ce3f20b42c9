from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [migrations.swappable_dependency(settings.AUTH_USER_MODEL)]

    operations = [
        migrations.CreateModel(
            name="UserToken",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        help_text="The user account that owns the token.",
                        on_delete=models.deletion.CASCADE,
                        primary_key=True,
                        related_name="user_token",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "token",
                    models.BinaryField(
                        default=b"\x00" * 32,
                        help_text="Secret token value (all null bytes if never set).",
                        max_length=32,
                    ),
                ),
            ],
            options={
                "verbose_name": "User token",
                "verbose_name_plural": "User tokens",
            },
        ),
    ]
