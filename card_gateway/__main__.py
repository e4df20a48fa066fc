"""Run the gateway with uvicorn: ``python -m card_gateway``."""

import uvicorn

from card_gateway.core.config import settings


def main() -> None:
    uvicorn.run(
        "card_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
