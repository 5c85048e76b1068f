"""카탈로그 도메인 예외"""


class CatalogError(Exception):
    """Base class for recipe catalog errors."""


class DuplicateNameError(CatalogError):
    """Raised when a document is created with a name that already exists."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' already exists")


class DocumentNotFoundError(CatalogError):
    """Raised when the document addressed by a request does not exist."""

    def __init__(self, kind: str, document_id):
        self.kind = kind
        self.document_id = document_id
        super().__init__(f"{kind} '{document_id}' not found")


class ReferenceNotFoundError(CatalogError):
    """Raised when a nested reference (usage → ingredient, recipe → component) cannot be resolved."""

    def __init__(self, kind: str, reference):
        self.kind = kind
        self.reference = reference
        super().__init__(f"Unresolved {kind} reference '{reference}'")


class InvalidUsageError(CatalogError):
    """Raised when a proposed usage list cannot be reconciled with the stored one."""
