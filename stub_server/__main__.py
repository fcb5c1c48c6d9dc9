# python -m stub_server
import uvicorn

from marketplace.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("stub_server.main:app", host=settings.stub_host, port=settings.stub_port, log_level="info")


if __name__ == "__main__":
    main()
