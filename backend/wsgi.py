"""WSGI entry point: ``gunicorn -c gunicorn.conf.py`` or ``flask --app wsgi run``."""

from ideadrop import create_app

app = create_app()
