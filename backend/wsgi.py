"""WSGI entry point: ``gunicorn -c gunicorn.conf.py wsgi:app``."""

from user_middle import create_app

app = create_app()
