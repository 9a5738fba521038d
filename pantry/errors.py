# pantry/errors.py
import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db
from .utils.api import api_error

log = logging.getLogger(__name__)


class PantryError(Exception):
    """Base class for errors surfaced to API callers."""
    status_code = 500

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(PantryError):
    """Missing or malformed required fields."""
    status_code = 400


class NotFoundError(PantryError):
    """The operation targets an identifier that does not exist."""
    status_code = 404


class StorageError(PantryError):
    """The underlying store failed; the session has been rolled back."""
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(PantryError)
    def handle_pantry_error(e):
        data = {"errors": e.errors} if e.errors else None
        r = jsonify(api_error(e.message, data))
        r.status_code = e.status_code
        return r

    # reads are not wrapped by the services
    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(e):
        db.session.rollback()
        log.exception("storage failure")
        return handle_pantry_error(StorageError("Storage failure"))
