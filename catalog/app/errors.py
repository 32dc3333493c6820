class CatalogError(Exception):
    """Base for errors the controller turns into an envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(CatalogError):
    status_code = 400

class NotFoundError(CatalogError):
    status_code = 404

class StoreError(CatalogError):
    status_code = 500
