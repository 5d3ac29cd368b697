import json

import pytest

from jsonschema import Draft4Validator as Validator

from pathdiff import Change, ChangeOp, Missing, Path, changeset, Diff


def test_check_schema(json_schema_changeset):
    Validator.check_schema(json_schema_changeset)


def changeset_json(changes):
    # Through a json round trip, as written by `pathdiff diff --out`
    return json.loads(json.dumps([c.to_dict() for c in changes.values()]))


def test_validate_obj_changeset(changeset_validator):
    a = {"foo": [1, 2, 3], "bar": {"ting": 7, "tang": 123}}
    b = {"foo": [1, 3], "bar": {"tang": 126, "hello world": "!"}}
    changeset_validator.validate(changeset_json(changeset(a, b)))


def test_validate_objects_changeset(changeset_validator):
    a = {"foo": [1, 2, 3]}
    b = {"foo": {"0": 1}, "new": [[]]}
    d = Diff(include_objects=True).changeset(a, b)
    changeset_validator.validate(changeset_json(d))


def test_schema_rejects_empty_change(changeset_validator):
    assert not changeset_validator.is_valid([{"path": "$.a"}])
    assert not changeset_validator.is_valid([{"path": "a", "new_value": 1}])
    assert not changeset_validator.is_valid([{"path": "$", "value": 1}])


def test_change_fields():
    c = Change(Path.of('a'), old_value=1, new_value=2)
    assert c.path == Path.of('a')
    assert c.has_old_value and c.has_new_value
    assert c.op == ChangeOp.REPLACE
    assert Change(Path.of('a'), new_value=None).op == ChangeOp.ADD
    assert Change(Path.of('a'), old_value=None).op == ChangeOp.REMOVE


def test_change_absent_values_are_missing():
    c = Change(Path.of('a'), new_value=1)
    assert c.old_value is Missing
    assert not c.has_old_value


def test_change_rejects_unknown_fields():
    with pytest.raises(TypeError):
        Change(Path.of('a'), value=1)


def test_change_immutable():
    c = Change(Path.of('a'), new_value=1)
    with pytest.raises(AttributeError):
        c.new_value = 2


def test_change_reversed():
    c = Change(Path.of('a'), new_value=1)
    assert c.reversed() == Change(Path.of('a'), old_value=1)
    r = Change(Path.of('a'), old_value=1, new_value=2).reversed()
    assert (r.old_value, r.new_value) == (2, 1)


def test_change_to_dict():
    assert Change(Path.of('a', 0), old_value=1).to_dict() == {
        'path': '$.a[0]', 'old_value': 1}
    assert Change(Path.ROOT, old_value=None, new_value=[]).to_dict() == {
        'path': '$', 'old_value': None, 'new_value': []}


def test_change_repr():
    assert repr(Change(Path.of('a'), old_value=1, new_value='b')) == (
        "Change($.a, old_value=1, new_value='b')")
