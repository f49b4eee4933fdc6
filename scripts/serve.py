# scripts/serve.py
"""
Run the API with uvicorn using the environment settings.

Usage example:
    PORT=8080 DB_HOST=localhost ... python -m scripts.serve
"""

import uvicorn

from app.config import get_settings


def main():
    # Fails here, before binding the port, when the environment is incomplete
    settings = get_settings()

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=settings.port,
        timeout_keep_alive=settings.idle_connection_timeout,
        log_config=None,
    )


if __name__ == "__main__":
    main()
