class DDLForgeError(ValueError):
    """Base class for errors raised by the synthesis layer."""


class UnsupportedDialect(DDLForgeError):
    """No strategy is registered for the requested dialect."""

    def __init__(self, dialect: str):
        self.dialect = dialect
        super().__init__(f"Unsupported database type: {dialect}")
