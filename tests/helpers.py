"""Shared test helpers."""

from connparams import ConnectionParametersBuilder, Configuration


def make_builder(server="db1", port="5432", database="sales", user="admin", password="secret"):
    """Builder with explicit fields and no configuration."""
    return (
        ConnectionParametersBuilder(server, port, config=Configuration())
        .database(database)
        .user(user)
        .password(password)
    )
