# inject_kernel/__main__.py
"""Run the example server: `python -m inject_kernel`."""
from __future__ import annotations

import uvicorn

from inject_kernel.config.base_settings import AppSettings
from inject_kernel.web.api import configure_logging, create_app, deps


def main() -> None:
    settings = AppSettings()
    configure_logging(settings)
    registry = deps(settings)  # fails fast on duplicate dependency types
    app = create_app(registry, title=settings.app_name)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
