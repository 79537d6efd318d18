from .db import db
from .work import work

__all__ = ['db', 'work']
