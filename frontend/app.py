"""
Flask application for the Community Board UI.

Three CRUD views backed by the community REST API:
- /hiring  job postings
- /alerts  local alerts
- /events  community events

plus a rotating carousel on the home page.

Stack: Flask + HTMX + Tailwind CSS (CDN)
"""

import logging
import os
import sys
from datetime import datetime

import requests
from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request

# Load environment variables
load_dotenv()

# Project root on the path for `version` and `src.*`
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
try:
    from version import __version__
    APP_VERSION = __version__
except ImportError:
    APP_VERSION = "dev"

from src.board.carousel import SLIDES, CarouselState, Direction, advance, visible_slides
from src.board.resources import RESOURCES
from src.common.config import Config
from frontend.resource_views import create_resource_blueprint

app = Flask(__name__)

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

Config.validate()

for _schema in RESOURCES:
    app.register_blueprint(create_resource_blueprint(_schema))

# Session configuration
flask_secret_key = Config.FLASK_SECRET_KEY

if not flask_secret_key:
    if os.getenv("VERCEL") == "1":
        raise RuntimeError(
            "CRITICAL: FLASK_SECRET_KEY not set in Vercel environment variables. "
            "Set FLASK_SECRET_KEY in Vercel dashboard: Settings → Environment Variables"
        )
    logger.warning("FLASK_SECRET_KEY not set. Generating random key (sessions will not persist between restarts)")
    flask_secret_key = os.urandom(24).hex()

app.secret_key = flask_secret_key
app.config["SESSION_COOKIE_HTTPONLY"] = True

# Navigation shell: path -> label, in display order
NAV_LINKS = [
    ("/", "Home"),
    ("/hiring", "Hiring"),
    ("/alerts", "Local Alerts"),
    ("/events", "Events"),
]


@app.context_processor
def inject_shell():
    """Inject version info and the nav links into all templates."""
    return {
        "version": APP_VERSION,
        "nav_links": NAV_LINKS,
        "current_path": request.path,
    }


@app.template_filter("display_date")
def display_date(value) -> str:
    """Render a record date like 'Jan 01, 2025'; empty for missing dates."""
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime("%b %d, %Y")


def _carousel_context(state: CarouselState, width):
    return {
        "carousel": state,
        "cards": visible_slides(state, width),
        "interval_ms": Config.CAROUSEL_INTERVAL_MS,
    }


@app.route("/")
def index():
    """Render the home page with the carousel at its first slide."""
    return render_template("index.html", **_carousel_context(CarouselState(), None))


@app.route("/carousel", methods=["GET"])
def carousel_partial():
    """
    HTMX partial: the carousel after one transition.

    Query Params:
        index: Index currently shown (out-of-range values wrap)
        direction: next | prev (omitted = re-render in place)
        width: Viewport width in px, decides how many cards are visible
    """
    count = len(SLIDES)
    index = request.args.get("index", 0, type=int) % count
    width = request.args.get("width", None, type=int)
    state = CarouselState(index=index, count=count)

    direction = request.args.get("direction")
    if direction:
        try:
            state = advance(state, Direction(direction))
        except ValueError:
            return jsonify({"error": f"Invalid direction: {direction}"}), 400

    return render_template("partials/carousel.html", **_carousel_context(state, width))


@app.route("/health", methods=["GET"])
def public_health_check():
    """
    Public health endpoint for external monitoring.

    Reports whether the community API answers its job list endpoint.
    """
    try:
        response = requests.get(
            f"{Config.COMMUNITY_API_URL}/hire", timeout=Config.HEALTH_CHECK_TIMEOUT
        )
        api_status = "healthy" if response.status_code == 200 else "unhealthy"
    except requests.exceptions.RequestException:
        api_status = "unreachable"

    return jsonify({
        "status": "healthy" if api_status == "healthy" else "degraded",
        "version": APP_VERSION,
        "services": {
            "community_api": api_status,
        },
    })


@app.errorhandler(404)
def not_found(error):
    return render_template("error.html", error="Page not found"), 404


# ============================================================================
# Application Entry Point
# ============================================================================

if __name__ == "__main__":
    port = int(os.getenv("FLASK_PORT", 5000))
    debug = os.getenv("FLASK_DEBUG", "true").lower() == "true"

    print(f"Starting Community Board UI on http://localhost:{port}")
    print(Config.summary())

    app.run(host="0.0.0.0", port=port, debug=debug)
