import os

from bikespace_dashboard.ui.dashboard import create_dash_app
from bikespace_dashboard.logging_config import configure_logging

configure_logging()

app = create_dash_app(os.getenv("BIKESPACE_CONFIG_ROOT", "config"))
server = app.server


if __name__ == "__main__":
    port = int(os.getenv("PORT", "8050"))
    debug = os.getenv("DEBUG", "0") == "1"

    app.run(host="0.0.0.0", port=port, debug=debug)
