from sqlalchemy import BigInteger, Column, DateTime, Integer, MetaData, Numeric, String, Table

metadata = MetaData()

rentals = Table(
    "rentals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("booking_number", String(36), nullable=False, unique=True),
    Column("registration_number", String(20), nullable=False),
    Column("customer_id", String(20), nullable=False),
    Column("email_address", String(255), nullable=False),
    Column("category", String(20), nullable=False),
    Column("pickup_datetime", DateTime(timezone=True), nullable=False),
    Column("pickup_meter_reading", BigInteger, nullable=False),
    Column("return_datetime", DateTime(timezone=True)),
    Column("return_meter_reading", BigInteger),
    Column("calculated_price", Numeric(18, 2)),
    Column("status", String(20), nullable=False, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True)),
)
