#!/usr/bin/env python
"""
Entry point for the admissions Django project.  It sets the default
settings module to ``admissions.settings`` and then delegates to
Django's management command line utility.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'admissions.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    argv = list(sys.argv)
    # ``runserver`` without an address listens on the configured port
    if len(argv) == 2 and argv[1] == 'runserver':
        from django.conf import settings
        argv.append(f"127.0.0.1:{settings.CONFIG.port}")
    execute_from_command_line(argv)


if __name__ == '__main__':
    main()
