# bookstore/core/domain/exceptions.py

class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def details(self) -> dict | None:
        """Structured context for API consumers (every public attribute but the message)."""
        extra = {k: v for k, v in vars(self).items() if k != "message"}
        return extra or None


# --- Error kinds (mapped to HTTP status codes by the API adapter) ---

class InvalidInputError(DomainError):
    """Malformed input or a violated business rule (400)."""


class NotFoundError(DomainError):
    """The requested record does not exist or is soft-deleted (404)."""


class AuthenticationError(DomainError):
    """Credentials or token were rejected (401)."""


# --- Order Engine ---

class InvalidOrderError(InvalidInputError):
    """Raised when an order request is empty or carries malformed lines."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid order: {reason}")


class BookUnavailableError(InvalidInputError):
    """Raised when an ordered book does not exist or has been removed."""
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found or deleted")


class InsufficientStockError(InvalidInputError):
    """Raised when the requested quantity exceeds the stock at check time."""
    def __init__(self, book_id: str, requested: int, available: int):
        self.book_id = book_id
        self.requested = requested
        self.available = available
        self.shortfall = requested - available
        super().__init__(
            f"Insufficient stock for book {book_id}: "
            f"requested={requested}, available={available}"
        )


class StockConflictError(InvalidInputError):
    """
    Raised when the stock decrement fails at commit time because a
    concurrent order consumed it first. The whole order was rolled back.
    """
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(
            f"Stock for book {book_id} changed while the order was being placed; "
            "nothing was written, please retry"
        )


class TransactionNotFoundError(NotFoundError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__("Transaction not found")


# --- Catalog ---

class GenreNotFoundError(NotFoundError):
    def __init__(self, genre_id: str):
        self.genre_id = genre_id
        super().__init__("Genre not found")


class GenreUnavailableError(InvalidInputError):
    """Raised when a book references a genre that is missing or deleted."""
    def __init__(self, genre_id: str):
        self.genre_id = genre_id
        super().__init__("Genre not found or deleted")


class DuplicateGenreNameError(InvalidInputError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("Genre name already exists")


class BookNotFoundError(NotFoundError):
    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__("Book not found")


class DuplicateBookTitleError(InvalidInputError):
    def __init__(self, title: str):
        self.title = title
        super().__init__("Duplicate title is not allowed")


# --- Auth ---

class EmailAlreadyRegisteredError(InvalidInputError):
    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered")


class InvalidCredentialsError(AuthenticationError):
    def __init__(self):
        super().__init__("Invalid credentials")


class InvalidTokenError(AuthenticationError):
    def __init__(self):
        super().__init__("Invalid or expired token")


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("User not found")
