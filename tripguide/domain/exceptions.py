"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class UnparseableFieldError(DomainError):
    """Raised in strict parsing mode when a free-text field matches no known pattern."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Cannot parse {field}: {text!r}")


class LocationNotFound(DomainError):
    """Raised when a location id is not present in the catalog."""

    def __init__(self, location_id: int):
        self.location_id = location_id
        super().__init__(f"Location not found: {location_id}")


class UnknownLocationType(DomainError):
    """Raised when a filter names a location type that does not exist."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown location type: {value}")


class InvalidTimeOfDay(DomainError):
    """Raised when a 24h clock reading is malformed or out of range."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time of day: {value!r} (expected HH:MM, 00:00-23:59)")
