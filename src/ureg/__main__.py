"""User registry entrypoint.

Run with:
  python -m ureg
"""

import logging

import uvicorn

from ureg.config import Settings


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("ureg.app:create_app", factory=True, host=settings.host, port=settings.port, reload=settings.reload)

if __name__ == "__main__":
    main()
