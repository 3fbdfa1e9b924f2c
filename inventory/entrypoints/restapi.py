import sys

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse
from loguru import logger

from inventory.config import Config, get_config

app = FastAPI()


@app.get("/", response_class=PlainTextResponse)
async def root(config: Config = Depends(get_config)) -> str:
    return config.GREETING


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main() -> None:
    config = get_config()
    configure_logging(config.LOG_LEVEL)
    logger.info(f"Listening on {config.HOST}:{config.PORT}...")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
