"""WSGI entrypoint for hosting the rupeewise API behind Passenger or gunicorn."""

from rupeewise.backend.app import create_app

# Passenger looks up a module-level callable named ``application``.
application = create_app()
