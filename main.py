"""Development/PaaS entrypoint.

Platforms that look for an `app` object in `main.py` pick it up here; run
directly it serves on $PORT (default 5015).
"""

from luckydraw import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(app.config["PORT"]), debug=False)
