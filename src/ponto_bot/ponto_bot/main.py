from __future__ import annotations

from . import create_app

app = create_app()


def main() -> None:
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
