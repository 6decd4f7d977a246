import uvicorn

from .config import Config


def main():
    config = Config()
    uvicorn.run(
        "recipebox.app:app",
        host=config.host,
        port=config.port,
        reload=config.env.value == "local",
    )


if __name__ == "__main__":
    main()
