"""
Main entry point for the Azure OpenAI chat service.
"""
import logging
import os
from typing import Optional

from config.env import load_env_file, ServerSettings


def main(env_path: Optional[str] = None) -> None:
    """Load the local .env, then start the Flask server."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # api.server reads FRONTEND_ORIGIN at import, so the .env goes in first
    load_env_file(env_path)

    from api.server import app

    settings = ServerSettings.from_env()
    logging.getLogger("chatdemo").info(
        f"Starting chat service on {settings.host}:{settings.port} (debug={settings.debug})"
    )
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
