from enum import Enum
import json


class MetadataOperation(str, Enum):
    ADD = 'add'
    REMOVE = 'remove'
    MODIFY = 'modify'

    @property
    def wire_code(self):
        return self.value


class ModifyMetadataOperation:
    """One entry of the ``operations`` parameter of a modify_metadata request."""

    def __init__(self, operation, attribute, value, units=None):
        """
        Args:
            operation: A MetadataOperation, or its wire code.
            attribute: Name of the attribute being operated on.
            value: Value associated with the attribute.
            units: Optional units. None leaves the field out when serialized.
        """
        self.__operation = MetadataOperation(operation)
        self.__attribute = attribute
        self.__value = value
        self.__units = units

    @property
    def operation(self):
        return self.__operation

    @property
    def attribute(self):
        return self.__attribute

    @property
    def value(self):
        return self.__value

    @property
    def units(self):
        return self.__units

    def __eq__(self, other):
        if isinstance(other, ModifyMetadataOperation):
            return self.as_dict() == other.as_dict()
        return NotImplemented

    def __hash__(self):
        return hash((self.operation, self.attribute, self.value, self.units))

    def __repr__(self):
        return '%s(operation=%r, attribute=%r, value=%r, units=%r)' % (
            type(self).__name__, self.operation.wire_code,
            self.attribute, self.value, self.units)

    def as_dict(self):
        result = {
            'operation': self.operation.wire_code,
            'attribute': self.attribute,
            'value': self.value,
        }
        # Empty units are sent, missing units are not
        if self.units is not None:
            result['units'] = self.units
        return result

    def to_json(self):
        return json.dumps(self.as_dict(), separators=(',', ':'))

    @staticmethod
    def from_dict(obj):
        if obj is None:
            return None
        return ModifyMetadataOperation(
            operation=obj['operation'],
            attribute=obj['attribute'],
            value=obj['value'],
            units=obj.get('units'),
        )


def dump_operations(operations):
    return json.dumps([op.as_dict() for op in operations], separators=(',', ':'))
