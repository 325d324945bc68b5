"""
WSGI entry point for production.
"""
import sys
import logging

# Configure logging to stdout (the container runtime captures this)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

try:
    from app import create_app
    app = create_app()
except Exception as e:
    logger.error("=" * 60)
    logger.error("FATAL ERROR: Failed to create application")
    logger.error("=" * 60)
    logger.error(f"Error: {e}", exc_info=True)
    logger.error("=" * 60)
    # Re-raise so Gunicorn sees the error
    raise


if __name__ == "__main__":
    PORT = app.config['PORT']
    DEBUG = app.config['DEBUG']
    logger.info(f"Server running on port {PORT}")
    app.run(host="0.0.0.0", port=PORT, debug=DEBUG)
