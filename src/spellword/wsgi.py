"""WSGI entrypoint for serving the spellword API."""

from spellword.app import create_app

# WSGI servers look for a module-level variable named ``application``.
application = create_app()
