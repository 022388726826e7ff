"""Domain-specific exceptions — framework-independent."""

import errno as errno_module


class ValidationError(Exception):
    """Raised when input is malformed, missing, or outside an allowed set."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id {entity_id} not found.")


class StartupError(Exception):
    """Raised when the server cannot bind its listening socket."""

    def __init__(self, host: str, port: int, reason: str, errno: int | None = None):
        self.host = host
        self.port = port
        self.reason = reason
        self.errno = errno
        super().__init__(f"Cannot listen on {host}:{port}: {reason}")

    @property
    def address_in_use(self) -> bool:
        return self.errno == errno_module.EADDRINUSE
