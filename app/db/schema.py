# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, String, Text

metadata = MetaData()

people = Table(
    "people",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("nickname", String(32), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("birth_date", String(10), nullable=False),
    Column("stack", Text, nullable=False, default=""),
)
