from registrar.core.database.session import Base

__all__ = ["Base"]
