from __future__ import annotations

import uvicorn

from api.server import create_app
from config import get_config


def main() -> None:
    cfg = get_config()
    uvicorn.run(create_app(cfg), host="0.0.0.0", port=cfg.api_port, reload=False, log_level="info")


if __name__ == "__main__":
    main()
