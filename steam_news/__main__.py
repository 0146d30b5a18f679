"""Package command‑line entrypoint.

Enables running the application with:

    python -m steam_news

or, once installed (via the console‑script declared in *pyproject.toml*), simply:

    steam-news
"""

from __future__ import annotations

from .main import main


def _run() -> None:  # pragma: no cover – thin wrapper
    """Invoke :pyfunc:`steam_news.main.main`."""

    main()


if __name__ == "__main__":  # pragma: no cover
    _run()
