from .uniqueness_guard import UniquenessGuard

__all__ = ["UniquenessGuard"]
