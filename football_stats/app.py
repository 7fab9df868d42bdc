from flask import Flask

from .config import setup_logger
from .routes.stats_api import bp as stats_api_bp

app = Flask(__name__)
app.json.sort_keys = False

logger = setup_logger(__name__)

app.register_blueprint(stats_api_bp)
logger.info("stats_routes_registered blueprint=%s", stats_api_bp.name)


if __name__ == "__main__":
    import os

    port = int(os.environ.get("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False)
