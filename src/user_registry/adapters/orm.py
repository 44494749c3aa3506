from sqlalchemy import Column, Float, MetaData, String, Table
from sqlalchemy.orm import registry

from user_registry.domain.user import User

USERS_TABLE = "users"

metadata = MetaData()
mapper_registry = registry()

users = Table(
    USERS_TABLE,
    metadata,
    Column("id", String, primary_key=True, autoincrement=False),
    Column("pseudo", String, nullable=False),
    Column("user_name", String, nullable=False),
    Column("avatar_url", String, nullable=False),
    Column("referral_id", String, nullable=True),
    Column("created_at", Float, nullable=False),
    Column("updated_at", Float, nullable=False),
)


def start_mappers():
    # mapping the same class twice raises, and every engine shares one mapper
    if list(mapper_registry.mappers):
        return
    mapper_registry.map_imperatively(User, users)
