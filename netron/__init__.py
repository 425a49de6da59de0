"""Record ids, themes, chat state, HTML pages and a WSGI server for a small chat app."""

__version__ = "0.1.0"