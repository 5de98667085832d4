import uvicorn

from cabinet_app.app import CONFIG


def main() -> None:
    uvicorn.run(
        "cabinet_app.app:app",
        host=CONFIG.host,
        port=CONFIG.port,
        log_level=CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    main()
