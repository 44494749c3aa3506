from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from user_registry.adapters.orm import metadata, start_mappers


class Settings(BaseSettings):
    USER_REGISTRY_DB_URI: str = Field(default="sqlite:///./user_registry.db", description="Database URI")
    USER_REGISTRY_DB_ECHO: bool = Field(default=False, description="Log emitted SQL")
    USER_REGISTRY_URL_PREFIX: str = Field(default="/v1", description="API URL prefix")
    DEBUG: int = Field(default=0, description="Debug mode flag")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()


def build_engine(db_uri: str, echo: bool = False) -> Engine:
    """Create an engine and attach the users table.

    ``create_all`` leaves an existing table untouched, so a restarted process
    reattaches to the records it wrote before.
    """
    connect_args = {"check_same_thread": False} if db_uri.startswith("sqlite") else {}
    engine = create_engine(db_uri, echo=echo, connect_args=connect_args)
    metadata.create_all(engine)
    start_mappers()
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)
