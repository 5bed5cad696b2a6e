"""Identifiers of the XA (two-phase commit) recovery helpers, one per vendor family.

The values are resolved by the external transaction-recovery machinery; nothing
here imports or instantiates them.
"""

import enum


class XAHelper(str, enum.Enum):

    MSSQL = "MssqlXAConnectionUtil"
    POSTGRESPLUS = "PostgresPlusXAConnectionUtil"
    ORACLE = "OracleXAConnectionUtil"
    SYBASE = "SybaseXAConnectionUtil"
    DB2 = "Db2XAConnectionUtil"
    MARIADB = "MariaDBXAConnectionUtil"
    MYSQL = "MySQLXAConnectionUtil"
