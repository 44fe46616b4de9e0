class CollectionError(Exception):
    title = "Operation Failed"


class IdentityConflict(CollectionError):
    title = "Duplicate Identity"

    def __init__(self, identity, message=None):
        self.identity = identity
        super().__init__(message or f"Record {identity} already exists")


class IdentityExhausted(IdentityConflict):
    title = "Identity Unavailable"

    def __init__(self, prefix, attempts):
        self.attempts = attempts
        super().__init__(prefix, f"No free {prefix} identity after {attempts} attempts")


class NotFound(CollectionError):
    title = "Record Not Found"

    def __init__(self, identity):
        self.identity = identity
        super().__init__(f"Record {identity} does not exist")


class ValidationFailure(CollectionError):
    title = "Validation Failed"

    def __init__(self, message, field=None):
        self.field = field
        super().__init__(message)


class InvalidFormat(ValidationFailure):
    title = "Invalid Identity"


class ExportFailure(CollectionError):
    title = "Export Failed"


class SeedDataError(CollectionError, ValueError):
    title = "Invalid Seed Data"
