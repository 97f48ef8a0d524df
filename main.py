from flask import Flask, request, jsonify
from flask_cors import CORS
from fee_engine import FeeEngineError, FeeProcessor, load_schedule_file
from fee_engine.config import Settings
import logging

settings = Settings.from_env()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(processor: FeeProcessor | None = None) -> Flask:
    """Build the Flask app around a processor (the default one loads the configured schedule)."""
    app = Flask(__name__)

    # Enable CORS for all routes
    CORS(app)

    if processor is None:
        processor = FeeProcessor(load_schedule_file(settings.schedule_path))

    def _run(label, compute):
        try:
            input_data = request.get_json(force=True, silent=True)

            if input_data is None:
                return jsonify({
                    "error": "No input data provided",
                    "status": "failed"
                }), 400

            logger.info(f"Processing {label} request")

            result = compute(input_data)

            logger.info(f"{label.capitalize()} request processed successfully")

            return jsonify(result), 200

        except FeeEngineError as e:
            # Validation errors from engine
            logger.error(f"Validation error: {str(e)}")
            return jsonify({
                "error": str(e),
                "status": "validation_failed"
            }), 400

        except Exception as e:
            # Unexpected errors
            logger.error(f"Processing error: {str(e)}", exc_info=True)
            return jsonify({
                "error": "An unexpected error occurred during processing",
                "status": "failed"
            }), 500

    @app.route("/", methods=["GET"])
    def index():
        return "ok"

    @app.route("/api", methods=["GET"])
    def api_info():
        """API information endpoint"""
        return jsonify({
            "status": "ok",
            "message": "Fee Distribution API",
            "version": "1.0",
            "endpoints": {
                "prices": "/prices [POST]",
                "distributions": "/distributions [POST]",
                "health": "/health [GET]"
            }
        }), 200

    @app.route("/health", methods=["GET"])
    def health():
        """Health check for monitoring"""
        return jsonify({"status": "healthy"}), 200

    @app.route("/prices", methods=["POST"])
    def prices():
        """Fees per order item and per order"""
        return _run("prices", processor.compute_fees_from_dict)

    @app.route("/distributions", methods=["POST"])
    def distributions():
        """Fund distributions per order and for the whole batch"""
        return _run("distributions", processor.compute_distributions_from_dict)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.port, debug=False)
