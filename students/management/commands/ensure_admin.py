from django.core.management.base import BaseCommand, CommandError

from students.exceptions import StorageError, storage_errors
from students.services import credentials


class Command(BaseCommand):
    help = "Create an admin or reset its password (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("password")

    def handle(self, *args, **opts):
        email = opts["email"].strip()
        password = opts["password"]
        if not email or not password:
            raise CommandError("email and password are required")

        password_hash = credentials.hash_password(password)
        try:
            admin = credentials.find_by_email("admin", email)
            if admin is None:
                admin = credentials.create_admin(email=email, password_hash=password_hash)
                self.stdout.write(self.style.SUCCESS(f"created: {admin.email} (id={admin.id})"))
                return
            admin.password_hash = password_hash
            with storage_errors():
                admin.save(update_fields=["password_hash", "updated_at"])
        except StorageError as exc:
            raise CommandError(f"could not ensure admin {email}: {exc}") from exc
        self.stdout.write(self.style.SUCCESS(f"reset: {admin.email} (id={admin.id})"))
