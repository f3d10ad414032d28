"""
SQLAlchemy column types that store Locale objects, either as their tag
string or as a JSON dictionary. These need the `db` extra
(`pip install localecodes[db]`).

    class Article(Base):
        __tablename__ = 'article'
        id = Column(Integer, primary_key=True)
        language = Column(LocaleType(35))
        audience = Column(LocaleMapType)

Assigning a string to one of these columns parses it when the row is
flushed, so an invalid tag fails the statement.
"""
from sqlalchemy.types import JSON, String, TypeDecorator

from localecodes import Locale
from localecodes import storage


class LocaleType(TypeDecorator):
    """Stores a Locale as its canonical tag string."""
    impl = String
    cache_ok = True

    @property
    def python_type(self):
        return Locale

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return storage.dump(storage.cast(value))

    def process_result_value(self, value, dialect):
        return storage.load(value)


class LocaleMapType(TypeDecorator):
    """Stores a Locale as a JSON dictionary of its attributes."""
    impl = JSON
    cache_ok = True

    @property
    def python_type(self):
        return Locale

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return storage.dump_map(storage.cast(value))

    def process_result_value(self, value, dialect):
        return storage.load(value)
