import logging

from django.conf import settings
from django.db import migrations

logger = logging.getLogger(__name__)

NULL_TOKEN = b"\x00" * 32


def forwards(apps, schema_editor):
    app_label, model_name = settings.AUTH_USER_MODEL.split(".")
    User = apps.get_model(app_label, model_name)
    UserToken = apps.get_model("user_token", "UserToken")
    users = User.objects.filter(user_token__isnull=True)
    logger.info("Creating null user tokens for %s existing users", users.count())
    UserToken.objects.bulk_create(
        [UserToken(user_id=pk, token=NULL_TOKEN) for pk in users.values_list("pk", flat=True)],
        batch_size=1000,
    )


class Migration(migrations.Migration):

    dependencies = [
        ("user_token", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.RunPython(forwards, migrations.RunPython.noop),
    ]
