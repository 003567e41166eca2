"""flightrisk/providers/exceptions.py"""

class ProviderError(Exception):
    """Base exception for all upstream data source errors."""
    pass

class WeatherProviderError(ProviderError):
    """Raised when the weather service fails or returns an unusable payload."""
    pass

class TelemetryError(ProviderError):
    """Raised when route or live position lookups fail."""
    def __init__(self, message: str, status_code: int = None):
        """
        Args:
            status_code: HTTP status of the failing response, if there was one
        """
        self.status_code = status_code
        super().__init__(message)

class ConflictDataError(ProviderError):
    """Raised when the conflict-zone dataset cannot be read."""
    pass
