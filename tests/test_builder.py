"""Tests for connparams.builder: ConnectionParametersBuilder."""

import logging

import pytest

from connparams import (
    ConnectionParametersBuilder,
    Configuration,
    ConnectionParameters,
    DatabaseType,
    XAHelper,
)
from connparams.builder import DEFAULT_CREDENTIAL
from connparams.errors import InvalidArgument, MissingConfiguration, UnsupportedOperation
from tests.helpers import make_builder


# construction

def test_no_defaults_without_configuration_raises(empty_config):
    with pytest.raises(MissingConfiguration, match="host or port is not defined"):
        ConnectionParametersBuilder(config=empty_config)


def test_no_defaults_with_partial_configuration_raises():
    with pytest.raises(MissingConfiguration):
        ConnectionParametersBuilder(config=Configuration(host="h"))
    with pytest.raises(MissingConfiguration):
        ConnectionParametersBuilder(config=Configuration(port="1"))


def test_no_defaults_reads_configuration(config):
    builder = ConnectionParametersBuilder(config=config)
    assert builder.server == "confhost"
    assert builder.port == "6000"


def test_defaults_used_without_configuration(empty_config):
    builder = ConnectionParametersBuilder("localhost", "5432", config=empty_config)
    assert builder.server == "localhost"
    assert builder.port == "5432"


def test_defaults_accept_integer_port(empty_config):
    builder = ConnectionParametersBuilder("localhost", 5432, config=empty_config)
    assert builder.port == "5432"


def test_configuration_wins_over_defaults(config):
    builder = ConnectionParametersBuilder("localhost", "5432", config=config)
    assert builder.server == "confhost"
    assert builder.port == "6000"


def test_default_config_comes_from_environment(monkeypatch):
    with pytest.raises(MissingConfiguration):
        ConnectionParametersBuilder()
    monkeypatch.setenv("host", "envhost")
    monkeypatch.setenv("port", "9999")
    monkeypatch.setenv("dbtype", "sybase")
    params = ConnectionParametersBuilder().database("inv").build()
    assert params.url == "jdbc:sybase:Tds:envhost:9999/inv"


def test_field_defaults_from_configuration(config):
    params = ConnectionParametersBuilder(config=config).database_type("mssql").build()
    assert params.database == "confdb"
    assert params.user == "confuser"
    assert params.password == "confpass"
    assert params.url == "jdbc:sqlserver://confhost:6000;databaseName=confdb;user=confuser;password=confpass"


def test_field_defaults_without_configuration(empty_config):
    params = ConnectionParametersBuilder("h", "1", config=empty_config).type("db2").build()
    assert params.database == DEFAULT_CREDENTIAL
    assert params.user == DEFAULT_CREDENTIAL
    assert params.password == DEFAULT_CREDENTIAL


def test_dbtype_from_configuration():
    builder = ConnectionParametersBuilder(config=Configuration(host="h", port="1", dbtype="ORACLE"))
    assert builder.database("orcl").build().url == "jdbc:oracle:thin:@h:1:orcl"


def test_bad_dbtype_in_configuration_fails_at_build():
    builder = ConnectionParametersBuilder(config=Configuration(host="h", port="1", dbtype="access"))
    with pytest.raises(UnsupportedOperation, match="Unsupported database type: access"):
        builder.build()


def test_bad_dbtype_in_environment_does_not_break_defaults_constructor(monkeypatch):
    monkeypatch.setenv("dbtype", "informix")
    builder = ConnectionParametersBuilder("localhost", "5432")
    assert builder.server == "localhost"
    with pytest.raises(UnsupportedOperation):
        builder.build()


def test_setter_overrides_bad_dbtype_in_configuration():
    builder = ConnectionParametersBuilder(config=Configuration(host="h", port="1", dbtype="access"))
    assert builder.type("db2").database("d").build().url == "jdbc:db2://h:1/d"


def test_setter_overrides_dbtype_in_configuration():
    builder = ConnectionParametersBuilder(config=Configuration(host="h", port="1", dbtype="oracle"))
    assert builder.database_type("mysql").build().database_type is DatabaseType.MYSQL


# setters

def test_setters_are_chainable():
    builder = make_builder()
    assert builder.user("u") is builder
    assert builder.password("p") is builder
    assert builder.database("d") is builder
    assert builder.database_type(DatabaseType.MYSQL) is builder
    assert builder.type("mysql") is builder


def test_setters_override_configuration(config):
    params = (
        ConnectionParametersBuilder(config=config)
        .database("hr")
        .user("admin")
        .password("secret")
        .database_type(DatabaseType.MSSQL)
        .build()
    )
    assert params.url == "jdbc:sqlserver://confhost:6000;databaseName=hr;user=admin;password=secret"


@pytest.mark.parametrize("name", ["mysql", "MYSQL", "MySQL"])
def test_type_names_are_case_insensitive(name):
    assert make_builder().database_type(name).build().database_type is DatabaseType.MYSQL
    assert make_builder().type(name).build().database_type is DatabaseType.MYSQL


def test_unknown_type_name_raises():
    with pytest.raises(InvalidArgument, match="Unknown database type"):
        make_builder().database_type("informix")
    with pytest.raises(InvalidArgument, match="Unknown database type"):
        make_builder().type("postgres")


def test_non_type_value_raises():
    with pytest.raises(InvalidArgument, match="Not a database type"):
        make_builder().database_type(3)


# build

@pytest.mark.parametrize("database_type, url, xa_helper", [
    (DatabaseType.POSTGRESQL, "jdbc:postgresql://db1:5432/sales", XAHelper.MSSQL),
    (DatabaseType.POSTGRESPLUS, "jdbc:edb://db1:5432/sales", XAHelper.POSTGRESPLUS),
    (DatabaseType.MSSQL, "jdbc:sqlserver://db1:5432;databaseName=sales;user=admin;password=secret", XAHelper.MSSQL),
    (DatabaseType.ORACLE, "jdbc:oracle:thin:@db1:5432:sales", XAHelper.ORACLE),
    (DatabaseType.SYBASE, "jdbc:sybase:Tds:db1:5432/sales", XAHelper.SYBASE),
    (DatabaseType.DB2, "jdbc:db2://db1:5432/sales", XAHelper.DB2),
    (DatabaseType.MARIADB, "jdbc:mariadb://db1:5432/sales", XAHelper.MARIADB),
    (DatabaseType.MYSQL, "jdbc:mysql://db1:5432/sales", XAHelper.MYSQL),
])
def test_build_every_vendor(database_type, url, xa_helper):
    params = make_builder().database_type(database_type).build()
    assert isinstance(params, ConnectionParameters)
    assert params.url == url
    assert params.xa_helper is xa_helper
    assert params.database_type is database_type
    assert params.server == "db1"
    assert params.port == "5432"
    assert params.database == "sales"
    assert params.user == "admin"
    assert params.password == "secret"


def test_build_postgresql_example():
    params = make_builder("db1", "5432", "sales").database_type(DatabaseType.POSTGRESQL).build()
    assert params.url == "jdbc:postgresql://db1:5432/sales"


def test_build_mssql_example():
    params = make_builder("db2", "1433", "hr", "admin", "secret").database_type(DatabaseType.MSSQL).build()
    assert params.url == "jdbc:sqlserver://db2:1433;databaseName=hr;user=admin;password=secret"


def test_build_without_type_raises():
    with pytest.raises(UnsupportedOperation, match="Unsupported database type"):
        make_builder().build()


def test_build_does_not_escape():
    params = make_builder("h", "1", "a/b?c", "u", "p").database_type("postgresql").build()
    assert params.url == "jdbc:postgresql://h:1/a/b?c"


def test_build_logs_without_password(caplog):
    with caplog.at_level(logging.DEBUG, logger="connparams"):
        make_builder(password="topsecret").database_type("db2").build()
    assert "DB2" in caplog.text
    assert "db1:5432" in caplog.text
    assert "topsecret" not in caplog.text
