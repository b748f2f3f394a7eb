import itertools

import pytest

from sparkmatch.db_types import (
    CompatibilityScore,
    DbErrc,
    DbError,
    LoginResult,
    RegisteredUser,
    UpdateFields,
    db_error,
    db_ok,
    db_value,
)


def test_value_is_ok():
    r = 42
    assert db_ok(r)
    assert db_value(r) == 42


def test_error_is_not_ok():
    r = DbError(DbErrc.NOT_FOUND, "user not found")
    assert not db_ok(r)
    assert db_error(r).code is DbErrc.NOT_FOUND
    assert db_error(r).message == "user not found"


def test_none_success_is_ok():
    r = None
    assert db_ok(r)
    assert db_value(r) is None


def test_none_style_error():
    r = DbError(DbErrc.INVALID_INPUT, "no fields")
    assert not db_ok(r)
    assert db_error(r).code is DbErrc.INVALID_INPUT
    assert db_error(r).message == "no fields"


def test_registered_user_roundtrip():
    r = RegisteredUser(99, "bob")
    assert db_ok(r)
    assert db_value(r).id == 99
    assert db_value(r).alias == "bob"


def test_login_result_roundtrip():
    r = LoginResult(7, "carol", "admin")
    assert db_ok(r)
    assert db_value(r).user_id == 7
    assert db_value(r).alias == "carol"
    assert db_value(r).role == "admin"


def test_reassign_value_to_error():
    r = 100
    assert db_ok(r)
    r = DbError(DbErrc.CONFLICT, "duplicate")
    assert not db_ok(r)
    assert db_error(r).code is DbErrc.CONFLICT


def test_reassign_error_to_value():
    r = DbError(DbErrc.INTERNAL_ERROR, "oops")
    assert not db_ok(r)
    r = "recovered"
    assert db_ok(r)
    assert db_value(r) == "recovered"


def test_dberrc_values_all_distinct():
    members = [
        DbErrc.OK,
        DbErrc.NOT_FOUND,
        DbErrc.CONFLICT,
        DbErrc.UNAUTHORIZED,
        DbErrc.INVALID_INPUT,
        DbErrc.INTERNAL_ERROR,
    ]
    codes = [db_error(DbError(code, code.name)).code for code in members]
    assert codes == members
    for a, b in itertools.combinations(codes, 2):
        assert a != b
        assert a.value != b.value


def test_dberror_fields_independent():
    e = DbError(DbErrc.UNAUTHORIZED, "bad password")
    assert e.code is DbErrc.UNAUTHORIZED
    assert e.message == "bad password"
    e.message = "changed"
    assert e.code is DbErrc.UNAUTHORIZED
    assert e.message == "changed"


def test_vector_result_roundtrip():
    r = [CompatibilityScore(1, 2, 85), CompatibilityScore(1, 3, 72)]
    assert db_ok(r)
    assert len(db_value(r)) == 2
    assert db_value(r)[0].score == 85
    assert db_value(r)[1].man_id == 1


def test_db_value_on_error_raises():
    with pytest.raises(ValueError):
        db_value(DbError(DbErrc.NOT_FOUND, "missing"))


def test_db_error_on_value_raises():
    with pytest.raises(ValueError):
        db_error(RegisteredUser(1, "alice"))


def test_update_fields_defaults_leave_everything_unset():
    f = UpdateFields(alias="newname")
    assert f.alias == "newname"
    assert (f.bio, f.age, f.interests) == (None, None, None)