import copy
import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Field related class.

    The field passed at class definition is only a template: each chunk
    instance gets its own copy the first time the attribute is accessed."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            logger.debug("create new field for field named '%s'", self.field.name)
            data[self.field.name] = self.field.create(father=instance)

        return data[self.field.name]

    def __set__(self, instance, value):
        # the field itself is never replaced, only its value
        self.__get__(instance).value = value


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        cls._meta.fields.append(name)
        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []


class MetaChunk(type):

    def __new__(cls, name, bases, attrs):
        '''Collect the fields in order of declaration, the same way Django does
        for the models.'''
        fields = {k: v for k, v in attrs.items() if isinstance(v, FieldBase)}
        new_attrs = {k: v for k, v in attrs.items() if k not in fields}

        new_cls = super().__new__(cls, name, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaChunk)]
        for parent in parents:
            for field_name in parent._meta.fields:
                new_cls._meta.fields.append(field_name)

        for field_name, field in fields.items():
            logger.debug('contribute_to_chunk() for field \'%s\'' % field_name)
            field.contribute_to_chunk(new_cls, field_name)

        return new_cls
