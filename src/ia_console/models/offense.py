from sqlalchemy import Column, Integer, String, Text, DateTime, func
from ia_console.database import Base


class Offense(Base):
    """Catalog entry. Rows are written once by the seeding step and only read afterwards."""
    __tablename__ = "offenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(32), nullable=False)                # e.g. "0.1"
    description = Column(Text, nullable=False)               # e.g. "No VC picture in patrol log"
    punishment = Column(String(256), nullable=False)         # e.g. "Logged warning"
    category = Column(String(128), nullable=False)           # e.g. "Category 0 - Logged Warnings"


class CatalogSeed(Base):
    """One row per catalog version that has been loaded into `offenses`."""
    __tablename__ = "catalog_seeds"

    version = Column(String(64), primary_key=True)
    offense_count = Column(Integer, nullable=False)
    seeded_at = Column(DateTime, server_default=func.now())
