import uvicorn

from remix_web.app import CONFIG
from remix_web.config import Env


def main() -> None:
    uvicorn.run(
        "remix_web.app:app",
        host=CONFIG.host,
        port=CONFIG.port,
        reload=CONFIG.env == Env.local,
    )


if __name__ == "__main__":
    main()
