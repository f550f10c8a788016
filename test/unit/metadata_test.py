import json

import pytest

from irods_http.types.metadata import MetadataOperation, ModifyMetadataOperation, dump_operations


@pytest.mark.parametrize('operation', list(MetadataOperation))
def test_operation_field_is_the_wire_code(operation):
    op = ModifyMetadataOperation(operation, 'color', 'blue')
    assert op.as_dict()['operation'] == operation.wire_code


def test_wire_codes():
    assert MetadataOperation.ADD.wire_code == 'add'
    assert MetadataOperation.REMOVE.wire_code == 'remove'
    assert MetadataOperation.MODIFY.wire_code == 'modify'


def test_operation_accepts_wire_code():
    op = ModifyMetadataOperation('remove', 'color', 'blue')
    assert op.operation is MetadataOperation.REMOVE


def test_unknown_operation_is_rejected():
    with pytest.raises(ValueError):
        ModifyMetadataOperation('delete', 'color', 'blue')


def test_units_omitted():
    op = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42')
    assert op.units is None
    assert op.as_dict() == {'operation': 'add', 'attribute': 'size', 'value': '42'}
    assert 'units' not in json.loads(op.to_json())


def test_empty_units_are_kept():
    op = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42', '')
    assert op.as_dict()['units'] == ''


def test_to_json():
    op = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42', 'MB')
    assert op.to_json() == '{"operation":"add","attribute":"size","value":"42","units":"MB"}'


def test_fields_are_read_only():
    op = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42')
    with pytest.raises(AttributeError):
        op.value = '43'
    with pytest.raises(AttributeError):
        op.units = 'MB'


def test_from_dict():
    op = ModifyMetadataOperation.from_dict({'operation': 'modify', 'attribute': 'size', 'value': '42'})
    assert op == ModifyMetadataOperation(MetadataOperation.MODIFY, 'size', '42')
    assert op.units is None
    assert ModifyMetadataOperation.from_dict(None) is None


def test_equality():
    a = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42', 'MB')
    b = ModifyMetadataOperation('add', 'size', '42', 'MB')
    c = ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42')
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_repr():
    op = ModifyMetadataOperation(MetadataOperation.REMOVE, 'size', '42')
    assert repr(op) == "ModifyMetadataOperation(operation='remove', attribute='size', value='42', units=None)"


def test_dump_operations():
    ops = [
        ModifyMetadataOperation(MetadataOperation.ADD, 'size', '42', 'MB'),
        ModifyMetadataOperation(MetadataOperation.REMOVE, 'color', 'blue'),
    ]
    assert json.loads(dump_operations(ops)) == [
        {'operation': 'add', 'attribute': 'size', 'value': '42', 'units': 'MB'},
        {'operation': 'remove', 'attribute': 'color', 'value': 'blue'},
    ]
