class ClinicalUsersError(Exception):
    """Base exception for the clinical user service."""

    pass


class DataIntegrityError(ClinicalUsersError):
    """A lookup expected to match at most one row matched several."""

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        attribute: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.attribute = attribute
        self.value = value


class PasswordHashError(ClinicalUsersError):
    """Password hashing failed (algorithm unavailable)."""

    def __init__(self, message: str, algorithm: str | None = None):
        super().__init__(message)
        self.algorithm = algorithm


class FixtureSetupError(ClinicalUsersError):
    """Test data could not be seeded; the cause is chained."""

    pass
