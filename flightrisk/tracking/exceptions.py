# flightrisk/tracking/exceptions.py

class TrackingError(Exception):
    """Base exception for flight tracking errors."""
    pass

class InvalidCallsignError(TrackingError):
    """Raised when a blank or non-string callsign is given."""
    pass

class NotTrackingError(TrackingError):
    """Raised when a tick is requested before a flight has been acquired."""
    pass
