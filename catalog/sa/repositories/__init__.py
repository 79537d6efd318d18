# catalog/sa/repositories/__init__.py
from .work import WorkRepository
from .kinds import KindStore, KIND_TABLES
from .reference import ReferenceResolver

__all__ = ['WorkRepository', 'KindStore', 'KIND_TABLES', 'ReferenceResolver']
