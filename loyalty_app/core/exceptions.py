"""
Error taxonomy for client operations.

Usage:
    try:
        client = ClientService.get_client(db, client_id)
    except LoyaltyAppError as e:
        if e.code == "CLIENT_NOT_FOUND":
            ...
"""

class LoyaltyAppError(Exception):
    """Base error carrying a machine code and the HTTP status it maps to"""
    status_code = 500
    code = "ERROR"
    default_message = "Erreur serveur"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

class ClientValidationError(LoyaltyAppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Nom et téléphone requis"

class InvalidClientIdError(LoyaltyAppError):
    status_code = 400
    code = "INVALID_CLIENT_ID"
    default_message = "Identifiant client invalide"

class ClientNotFoundError(LoyaltyAppError):
    status_code = 404
    code = "CLIENT_NOT_FOUND"
    default_message = "Client non trouvé"

class StoreError(LoyaltyAppError):
    """Store call failed; message stays generic, the cause goes to the log"""
    status_code = 500
    code = "STORE_ERROR"
