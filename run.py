import uvicorn

from src.infrastructure.fastapi.app import app, logger, settings


def main() -> int:
    logger.info("Starting health report server")
    logger.info("Config server: host=%s port=%s", settings.server_host, settings.server_port)

    config = uvicorn.Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Interrupt received. Shutting down...")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
