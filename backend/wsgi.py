import os

from newsdesk import create_app
from newsdesk.config import DevConfig, ProdConfig


def _running_in_production() -> bool:
    return any(
        os.getenv(k, "").strip().lower() == "production"
        for k in (
            "APP_ENV",
            "FLASK_ENV",
        )
    )


config = ProdConfig if _running_in_production() else DevConfig
app = create_app(config)

if __name__ == "__main__":
    app.run()
