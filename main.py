"""Top-level ASGI entrypoint (``uvicorn main:app``)."""

from attraction_webhook.api_factory import create_app
from attraction_webhook.core.config import config

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
