"""
Exceptions raised by the contract generator.

Only two outcomes cross the public boundary: a composed document, or one of
these errors. Each error carries a ``code`` the calling layer can map to its
transport (``invalid-argument``, ``not-found``, ``internal``).
"""


class ContractError(Exception):
    """Base class for every error surfaced to callers."""

    code = "unknown"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidContractRequest(ContractError):
    """The caller supplied incomplete or unusable inputs."""

    code = "invalid-argument"

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)


class InvalidSignatureError(InvalidContractRequest):
    """The signature payload could not be decoded into an image."""

    def __init__(self, message: str = "Invalid signature image"):
        super().__init__(message)


class PlayerNotFoundError(ContractError):
    """The player the contract belongs to does not exist."""

    code = "not-found"

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__("Player not found")


class ContractGenerationError(ContractError):
    """
    Opaque failure while composing or storing a contract.

    The message is fixed so internal details never reach the caller; the
    underlying exception is kept as ``__cause__`` for logs.
    """

    code = "internal"

    def __init__(self, message: str = "Failed to generate contract."):
        super().__init__(message)


class TemplateParseError(ContractGenerationError):
    """The template bytes are not a readable PDF document."""

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__()
