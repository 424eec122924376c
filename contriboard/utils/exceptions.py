class ServiceError(Exception):
    status = 400

    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None, status=None):
        self.code = code
        self.message = message
        self.details = details or {}
        if status is not None:
            self.status = status
        super().__init__(message)


class ConfigurationError(ServiceError):
    """Required settings (database, secrets) are missing."""

    status = 500

    def __init__(self, message="Configuration error", details=None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class DataAccessError(ServiceError):
    """The storage engine rejected or failed a statement."""

    status = 500

    def __init__(self, message="Data access error", details=None):
        super().__init__(code="DATA_ACCESS_ERROR", message=message, details=details)


class ValidationError(ServiceError):
    """Caller input rejected before any storage call."""

    def __init__(self, message="Invalid input", details=None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)
