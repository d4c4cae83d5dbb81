"""
HTTP route handlers for hero endpoints.

By default failures keep the status codes existing clients rely on: create
failures answer 200 with a plain-text body, lookup and storage failures
answer 418. Setting HEROES_STRICT_STATUS_CODES switches to conventional
codes (400/404/409/500/503).
"""

import logging
import azure.functions as func
from shared.config import use_strict_status_codes
from shared.errors import (
    BlobExistsError, DuplicateNameError, NotFoundError, SerializationError, StorageError
)
from shared.responses import (
    success_response, error_response, preflight_response, I_AM_A_TEAPOT
)
from .models import Hero
from .service import HeroService

logger = logging.getLogger(__name__)

ALLOW_HEADERS = {"Access-Control-Allow-Headers": "Content-Type"}


def describe_error(e: Exception) -> str:
    """Render an exception as "<ErrorType>: <message>" for plain-text bodies."""
    return f"{type(e).__name__}: {str(e)}"


def strict_status(e: Exception) -> int:
    """Conventional HTTP status for an error raised while serving a hero request."""
    if isinstance(e, NotFoundError):
        return 404
    if isinstance(e, (DuplicateNameError, BlobExistsError)):
        return 409
    if isinstance(e, StorageError):
        return 503
    return 500


def parse_hero_id(raw) -> int:
    """
    Parse a hero id from a route or query parameter.

    Raises:
        ValueError: If the value is missing or not an integer
    """
    if raw is None or not str(raw).strip():
        raise ValueError("Hero id is required")
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValueError(f"Hero id must be an integer, got '{raw}'")


def register_hero_routes(app: func.FunctionApp):
    """Register all hero-related routes with the function app."""

    @app.function_name(name="getAllHeroes")
    @app.route(route="heroes", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
    def get_all_heroes(req: func.HttpRequest) -> func.HttpResponse:
        """
        GET /api/heroes
        List every stored hero.
        """
        logger.info("Processing getAllHeroes function.")
        try:
            service = HeroService()
            heroes = service.list_heroes()

            return success_response(heroes)

        except Exception as e:
            logger.error(f"Error listing heroes: {str(e)}")
            status = strict_status(e) if use_strict_status_codes() else I_AM_A_TEAPOT
            return error_response(describe_error(e), status)

    @app.function_name(name="getHeroById")
    @app.route(route="heroes/{id}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
    def get_hero_by_id(req: func.HttpRequest) -> func.HttpResponse:
        """
        GET /api/heroes/{id}
        Get a single hero by id.
        """
        raw_id = req.route_params.get("id")
        logger.info(f"Processing getHeroById {raw_id} function.")
        try:
            hero_id = parse_hero_id(raw_id)
        except ValueError as e:
            return error_response(str(e), 400)

        try:
            service = HeroService()
            hero = service.get_hero(hero_id)

            return success_response(hero)

        except Exception as e:
            logger.error(f"Error getting hero {hero_id}: {str(e)}")
            status = strict_status(e) if use_strict_status_codes() else I_AM_A_TEAPOT
            return error_response(describe_error(e), status)

    @app.function_name(name="updateHero")
    @app.route(route="heroes", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
    def update_hero(req: func.HttpRequest) -> func.HttpResponse:
        """
        PUT /api/heroes
        Replace a stored hero, matched by the id in the body.
        """
        logger.info("Processing updateHero function.")
        try:
            updated_hero = Hero.from_json(req.get_body())
        except SerializationError as e:
            logger.error(f"Invalid hero body: {str(e)}")
            return error_response(describe_error(e), 400)

        try:
            service = HeroService()
            updated = service.update_hero(updated_hero)

            return success_response({"updated": updated, "id": updated_hero.id})

        except Exception as e:
            logger.error(f"Error updating hero {updated_hero.id}: {str(e)}")
            status = strict_status(e) if use_strict_status_codes() else I_AM_A_TEAPOT
            return error_response(describe_error(e), status)

    @app.function_name(name="createHero")
    @app.route(route="heroes", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
    def create_hero(req: func.HttpRequest) -> func.HttpResponse:
        """
        POST /api/heroes[?id=<int>]
        Create a hero; the optional `id` query parameter overrides the body id.
        """
        logger.info("Processing createHero function.")
        strict = use_strict_status_codes()
        try:
            new_hero = Hero.from_json(req.get_body())
            raw_id = req.params.get("id")
            id_override = parse_hero_id(raw_id) if raw_id is not None else None
        except (SerializationError, ValueError) as e:
            logger.error(f"Invalid create hero request: {str(e)}")
            return error_response(describe_error(e), 400 if strict else 200)

        try:
            service = HeroService()
            added_hero = service.create_hero(new_hero, id_override)

            return success_response(added_hero)

        except DuplicateNameError as e:
            logger.error(f"There was a create hero error: {str(e)}")
            return error_response(describe_error(e), 409 if strict else 200)
        except StorageError as e:
            logger.error(f"Blob storage error: {str(e)}")
            return error_response(describe_error(e), strict_status(e) if strict else 200)
        except Exception as e:
            logger.error(f"There was a create hero error: {str(e)}")
            return error_response(describe_error(e), 500 if strict else 200)

    @app.function_name(name="deleteHero")
    @app.route(route="heroes/{id}", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
    def delete_hero(req: func.HttpRequest) -> func.HttpResponse:
        """
        DELETE /api/heroes/{id}
        Delete a hero; answers 404 with "deleted": false when it is absent.
        """
        logger.info("Processing deleteHero function.")
        try:
            hero_id = parse_hero_id(req.route_params.get("id"))
        except ValueError as e:
            return error_response(str(e), 400, headers=ALLOW_HEADERS)

        try:
            service = HeroService()
            deleted = service.delete_hero(hero_id)

            return success_response(
                {"deleted": deleted, "id": hero_id},
                status_code=200 if deleted else 404,
                headers=ALLOW_HEADERS
            )

        except Exception as e:
            logger.error(f"Error deleting hero {hero_id}: {str(e)}")
            status = strict_status(e) if use_strict_status_codes() else I_AM_A_TEAPOT
            return error_response(describe_error(e), status, headers=ALLOW_HEADERS)

    @app.function_name(name="preflightDefault")
    @app.route(route="heroes", methods=["OPTIONS"], auth_level=func.AuthLevel.ANONYMOUS)
    def preflight_default(req: func.HttpRequest) -> func.HttpResponse:
        """OPTIONS /api/heroes - CORS preflight."""
        logger.info("Processing preflightDefault function.")
        return preflight_response()

    @app.function_name(name="preflightWithId")
    @app.route(route="heroes/{id}", methods=["OPTIONS"], auth_level=func.AuthLevel.ANONYMOUS)
    def preflight_with_id(req: func.HttpRequest) -> func.HttpResponse:
        """OPTIONS /api/heroes/{id} - CORS preflight."""
        logger.info("Processing preflightWithId function.")
        return preflight_response()
