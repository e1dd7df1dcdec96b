from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    # модели объявлены через Column с обычными аннотациями
    __allow_unmapped__ = True
