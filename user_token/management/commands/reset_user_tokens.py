"""
Reset the user token of all users.

Useful if you believe that your user table was accidentally leaked to
an external source. Regenerating a user's token invalidates anything
validated against the old one, so this may log some users out.

Run with --nulls to only issue tokens to users that have never had one.

"""
from argparse import ArgumentParser
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from user_token.commands import BatchTokenResetter, RunConfiguration
from user_token.replication import get_replication_waiter
from user_token.repository import DjangoUserTokenRepository
from user_token.settings import BATCH_SIZE, COUNTDOWN


class Command(BaseCommand):

    help = (
        "Reset the user_token of all users. Note that this may log some of them out."
    )

    def add_arguments(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--nowarn",
            action="store_true",
            help="Hides the 5 seconds warning",
        )
        parser.add_argument(
            "--nulls",
            action="store_true",
            dest="nulls_only",
            help="Only reset tokens that are currently null (string of \\x00's)",
        )
        parser.add_argument(
            "--batch-size",
            type=int,
            default=BATCH_SIZE,
            help="The number of user ids to walk between replication waits",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        try:
            config = RunConfiguration(
                batch_size=options["batch_size"],
                nowarn=options["nowarn"],
                nulls_only=options["nulls_only"],
            )
        except ValueError as ex:
            raise CommandError(str(ex)) from ex
        resetter = BatchTokenResetter(
            repository=DjangoUserTokenRepository(),
            waiter=get_replication_waiter(),
            stdout=self.stdout,
            countdown_seconds=COUNTDOWN,
        )
        count = resetter.run(config)
        self.stdout.write(f"Reset {count} user token(s).")
