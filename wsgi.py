"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 -b 0.0.0.0:$PORT wsgi:app
"""

from luckydraw import create_app

app = create_app()
