"""Backend entrypoint. Starts uvicorn with the port taken from the environment."""
import os

import uvicorn

from cashbook.main import create_app


def main() -> None:
    port = int(os.environ.get("CASHBOOK_PORT", "8001"))
    host = os.environ.get("CASHBOOK_HOST", "127.0.0.1")
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
