from .syntax_check import verify_sql

__all__ = ["verify_sql"]
