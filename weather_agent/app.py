# app.py
import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from .adapters import to_http_response
from .chat import handle_events
from .config import Settings, load_settings
from .logger import configure_logging
from .models import WeatherReport
from .pipeline import WeatherPipeline, build_pipeline
from .services.line import LineClient, verify_signature

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def render_report(city: str, activity: Optional[str] = None):
    def _render(report: WeatherReport):
        body = {"city": city, **report.to_dict(), "timestamp": _timestamp()}
        if activity:
            body["activity"] = activity
        return body
    return _render


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[WeatherPipeline] = None,
    line: Optional[LineClient] = None,
) -> Flask:
    settings = settings or load_settings()
    pipeline = pipeline or build_pipeline(settings)
    if line is None and settings.line_channel_access_token:
        line = LineClient(settings.line_channel_access_token, timeout=settings.http_timeout)

    app = Flask(__name__)
    CORS(app)

    @app.route("/", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "message": "Weather Agent API"})

    @app.route("/api/weather", methods=["GET"])
    def weather():
        """Query params: city"""
        city = request.args.get("city")
        logger.info("Weather request: city=%r", city)
        result = asyncio.run(pipeline.report(city))
        body, status = to_http_response(result, render_report(city))
        return jsonify(body), status

    @app.route("/api/weather/suggest", methods=["POST"])
    def suggest():
        """Body: {"city": "...", "activity": "..."}"""
        data = request.get_json(silent=True) or {}
        city = data.get("city")
        activity = data.get("activity") or None
        logger.info("Suggestion request: city=%r activity=%r", city, activity)
        result = asyncio.run(pipeline.report(city, activity))
        body, status = to_http_response(result, render_report(city, activity))
        return jsonify(body), status

    @app.route("/api/weather/forecast", methods=["GET"])
    def forecast():
        """Today's range and precipitation chance plus activity plan. Query params: city"""
        city = request.args.get("city")
        logger.info("Forecast request: city=%r", city)
        result = asyncio.run(pipeline.plan(city))
        body, status = to_http_response(result, render_report(city))
        return jsonify(body), status

    @app.route("/api/line/webhook", methods=["GET"])
    def line_webhook_health():
        return jsonify({"status": "ok", "secretExists": bool(settings.line_channel_secret)})

    @app.route("/api/line/webhook", methods=["POST"])
    def line_webhook():
        secret = settings.line_channel_secret
        if not secret:
            logger.error("LINE_CHANNEL_SECRET not set; refusing webhook")
            return jsonify({"error": "LINE channel is not configured"}), 503

        body = request.get_data()
        if not verify_signature(body, request.headers.get("X-Line-Signature", ""), secret):
            logger.warning("Invalid LINE signature")
            return jsonify({"error": "Invalid signature"}), 401

        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Invalid JSON body"}), 400

        events = payload.get("events") or []
        if events:
            logger.info("LINE webhook: %d event(s)", len(events))
            asyncio.run(handle_events(events, pipeline, line))
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Weather Agent on port %d", settings.port)
    create_app(settings).run(host="0.0.0.0", port=settings.port, use_reloader=False)
