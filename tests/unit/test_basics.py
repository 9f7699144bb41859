import csv
from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from personnel import config
from personnel.domain.models import EmployeeStatus, EmploymentType
from personnel.errors import EmployeeValidationError
from personnel.infrastructure.channels import LoggingSmtpChannel, NotificationChannel
from personnel.infrastructure.database import (
    DatabaseConnection,
    InMemoryDatabaseConnection,
    LoggingDatabaseConnection,
    _redact,
    build_dsn,
    get_database_connection,
)
from personnel.roster import ROSTER_FIELDS, load_roster
from scripts import generate_roster

GENERATED_ROWS = 5


def test_settings_defaults():
    settings = config.Settings(_env_file=None)
    assert settings.db_backend == "memory"
    assert settings.db_host == "localhost"
    assert settings.db_name == "personnel"
    assert settings.smtp_port > 0
    assert settings.report_default_format == "CSV"
    assert settings.log_json is False


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_database_factory_selects_backend(test_settings):
    assert isinstance(get_database_connection(test_settings), InMemoryDatabaseConnection)

    logging_settings = test_settings.model_copy(update={"db_backend": "LOGGING"})
    connection = get_database_connection(logging_settings)
    assert isinstance(connection, LoggingDatabaseConnection)
    assert connection.dsn == build_dsn(logging_settings)
    assert isinstance(connection, DatabaseConnection)


def test_database_factory_rejects_unknown_backend(test_settings):
    with pytest.raises(ValueError, match="Unknown database backend"):
        get_database_connection(test_settings.model_copy(update={"db_backend": "oracle"}))


def test_dsn_password_is_redacted():
    assert _redact("mysql://hr:s3cret@db:3306/personnel") == "mysql://hr:***@db:3306/personnel"
    assert _redact("sqlite-memory") == "sqlite-memory"


def test_in_memory_query_is_recorded_and_empty():
    connection = InMemoryDatabaseConnection()

    assert connection.query("SELECT * FROM employees WHERE id = ?", dict, "EMP001") == []
    assert connection.executed_queries == ["QUERY: SELECT * FROM employees WHERE id = ?, Params: ['EMP001']"]


def test_smtp_channel_from_settings_logs_only(test_settings, caplog):
    channel = LoggingSmtpChannel.from_settings(test_settings)

    with caplog.at_level("INFO"):
        channel.send("jane@company.com", "Subject", "Body")

    assert isinstance(channel, NotificationChannel)
    assert channel.host == test_settings.smtp_host
    assert "Sending email via SMTP" in caplog.text


def test_generate_roster_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    generate_roster._generate_roster_csv(csv_path, rows=GENERATED_ROWS, seed=123)

    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + 5 rows = 6 lines
    assert len(rows) == GENERATED_ROWS + 1
    assert rows[0] == ROSTER_FIELDS


def test_generated_roster_loads_in_file_order(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    generate_roster._generate_roster_csv(csv_path, rows=GENERATED_ROWS, seed=7)

    employees = load_roster(csv_path)

    assert [e.id for e in employees] == [f"EMP{i:05d}" for i in range(1, GENERATED_ROWS + 1)]
    assert all(e.base_salary >= 0 for e in employees)


def test_roster_optional_columns_take_defaults(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    csv_path.write_text(
        "id,name,email,department,base_salary,performance_rating,status,employment_type\n"
        "E1,Ada,ada@company.com,Engineering,90000,,,\n"
        "E2,Bob,bob@company.com,Marketing,50000,4,on_leave,intern\n",
        encoding="utf-8",
    )

    first, second = load_roster(csv_path)

    assert (first.performance_rating, first.status, first.employment_type) == (
        0,
        EmployeeStatus.ACTIVE,
        EmploymentType.FULL_TIME,
    )
    assert second.base_salary == Decimal("50000")
    assert (second.performance_rating, second.status, second.employment_type) == (
        4,
        EmployeeStatus.ON_LEAVE,
        EmploymentType.INTERN,
    )


def test_roster_missing_columns_is_rejected(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    csv_path.write_text("id,name\nE1,Ada\n", encoding="utf-8")

    with pytest.raises(EmployeeValidationError, match="missing columns: email, department, base_salary"):
        load_roster(csv_path)


def test_roster_non_numeric_salary_is_a_pydantic_error(tmp_path: Path):
    csv_path = tmp_path / "roster.csv"
    csv_path.write_text(
        "id,name,email,department,base_salary\nE1,Ada,ada@company.com,Engineering,lots\n",
        encoding="utf-8",
    )

    with pytest.raises(ValidationError, match="base_salary"):
        load_roster(csv_path)
