"""
Heroes Backend - Azure Functions Application

A Python-based Azure Functions backend serving CRUD operations for heroes.
Each hero is stored as one JSON blob in the "heroes" container of an Azure
Storage account.
"""

import azure.functions as func
import datetime
import logging

from shared.config import get_environment
from shared.responses import success_response
from heroes.routes import register_hero_routes

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the main Function App instance
app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

# =============================================================================
# Health Check Endpoint
# =============================================================================

@app.route(route="health", methods=["GET"])
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint to verify the Azure Function is running."""
    logger.info("Health check endpoint called.")

    health_status = {
        "status": "healthy",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "service": "Heroes Backend",
        "version": "1.0.0",
        "environment": get_environment()
    }

    return success_response(health_status)

# =============================================================================
# Heroes Endpoints
# =============================================================================

register_hero_routes(app)
